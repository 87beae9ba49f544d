from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Literal

import yaml

logger = logging.getLogger(__name__)

ComponentFormat = Literal["repr", "str"]

_COMPONENT_FORMATS = ("repr", "str")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class RenderStyle:
    """
    Delimiters used when rendering a `Pair` as text.

    Parameters
    ----------
    prefix : str
        Text emitted before the first component, by default ``"Pair("``.
    separator : str
        Text emitted between the two components, by default ``", "``.
    suffix : str
        Text emitted after the second component, by default ``")"``.
    component : {"repr", "str"}
        How non-pair components are converted to text. ``"repr"`` keeps
        strings quoted so that ``Pair("1", 1)`` and ``Pair(1, 1)`` render
        differently. ``"str"`` prints plain text, but text containing a
        delimiter or starting with a quote is emitted as a quoted literal so
        the two slots stay distinguishable.
    """
    prefix: str = "Pair("
    separator: str = ", "
    suffix: str = ")"
    component: ComponentFormat = "repr"

    def __post_init__(self):
        if self.component not in _COMPONENT_FORMATS:
            raise ValueError(
                f"Unknown component format '{self.component}', expected one of {_COMPONENT_FORMATS}."
            )
        if not self.separator:
            raise ValueError("Render separator must be non-empty.")

    def format_component(self, value: Any) -> str:
        if self.component == "repr":
            return repr(value)
        text = str(value)
        if text.startswith(("'", '"')) or any(
                delimiter and delimiter in text for delimiter in (self.prefix, self.separator, self.suffix)):
            return repr(text)
        return text


DEFAULT_RENDER_STYLE = RenderStyle()


@dataclass(frozen=True, slots=True)
class NestedPairsConfig:
    """
    Settings for rendering and logging.

    Parameters
    ----------
    render : RenderStyle
        Delimiters used by `render` and the command line tool.
    log_level : str
        Name of the logging level used by the command line tool.
    """
    render: RenderStyle = field(default_factory=RenderStyle)
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.log_level}', expected one of {_LOG_LEVELS}.")

    @property
    def log_level_value(self) -> int:
        """Numeric `logging` level matching `log_level`."""
        return getattr(logging, self.log_level)


def read_yaml(path: str | Path) -> Dict[str, Any]:
    """
    Read and parse a YAML file.
    """
    path_obj = Path(path)
    if path_obj.suffix.lower() not in {".yml", ".yaml"}:
        raise ValueError("Only YAML files are supported.")

    return yaml.safe_load(path_obj.read_text(encoding="utf-8")) or {}


def parse_render_style(data: Dict[str, Any]) -> RenderStyle:
    """
    Build a `RenderStyle` from the ``render`` section of a config mapping.

    Missing keys fall back to the defaults of `RenderStyle`.

    Raises
    ------
    ValueError
        If the section is not a mapping or contains unknown keys.
    """
    section = data.get("render") or {}
    if not isinstance(section, dict):
        raise ValueError("'render' section must be a mapping.")

    unknown = set(section) - set(RenderStyle.__dataclass_fields__)
    if unknown:
        raise ValueError(f"Unknown render option(s): {', '.join(sorted(unknown))}")

    return RenderStyle(**{key: str(value) for key, value in section.items()})


def parse_log_level(data: Dict[str, Any]) -> str:
    section = data.get("logging") or {}
    if not isinstance(section, dict):
        raise ValueError("'logging' section must be a mapping.")

    return str(section.get("level", "WARNING")).upper()


def load_config(path: str | Path | None = None) -> NestedPairsConfig:
    """
    Load settings from a YAML file.

    Parameters
    ----------
    path : str | Path | None
        Location of the YAML file. When None the defaults are returned.

    Returns
    -------
    NestedPairsConfig
        An immutable settings bundle.

    Raises
    ------
    ValueError
        If the file is not YAML, is not a mapping, or contains invalid values.

    Notes
    -----
    Expected layout::

        render:
          prefix: "<"
          separator: " * "
          suffix: ">"
          component: str
        logging:
          level: INFO
    """
    if path is None:
        return NestedPairsConfig()

    data = read_yaml(path)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level.")

    config = NestedPairsConfig(render=parse_render_style(data), log_level=parse_log_level(data))
    logger.debug(f"Loaded config from {path}: {config}")
    return config
