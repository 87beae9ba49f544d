import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _make_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.setLevel(level)
    return handler


def setup_logger(
    name: str,
    level: int = logging.WARNING,
    stream: Optional[TextIO] = None,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configures and returns a logger writing to a stream and optionally a file.

    Existing handlers on the logger are removed first so repeated calls do not
    duplicate output.

    Parameters
    ----------
    name : str
        The name of the logger, typically `__name__`.
    level : int, optional
        Level applied to the logger and every handler, by default `logging.WARNING`.
    stream : TextIO, optional
        Destination of console records. Defaults to the current `sys.stderr`,
        which keeps stdout free for command output.
    log_file : str | Path, optional
        If given, records are also appended to this file. Missing parent
        directories are created.

    Returns
    -------
    logging.Logger
        The configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.hasHandlers():
        logger.handlers.clear()

    logger.addHandler(_make_handler(logging.StreamHandler(stream if stream is not None else sys.stderr), level))

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_make_handler(logging.FileHandler(log_path, mode='a', encoding='utf-8'), level))

    return logger


def setup_loggers(
    names: Iterable[str],
    level: int,
    stream: Optional[TextIO] = None,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """Applies `setup_logger` with the same settings to several loggers."""
    for name in names:
        setup_logger(name, level=level, stream=stream, log_file=log_file)


def set_log_level(logger: logging.Logger, level: int) -> None:
    """
    Updates the logging level for a logger and all its handlers.
    """
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)
