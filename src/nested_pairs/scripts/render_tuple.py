#!/usr/bin/env python3
"""
Build a nested tuple from command-line values and print it.

Each value is read as a YAML scalar, so ``3`` becomes an int, ``3.5`` a
float, ``true`` a bool and anything else a string.

Examples:
  - python -m nested_pairs 1 x true 3.5
  - python -m nested_pairs --pick 2 1 x true 3.5
  - python -m nested_pairs --json --config render.yaml a b c
"""

# --- Standard Library Imports ---
from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import Any, List, Optional, Sequence

# --- Third-Party Imports ---
import yaml

# --- Local Application Imports ---
from nested_pairs.config import NestedPairsConfig, load_config
from nested_pairs.structures.nested_tuple import MAX_ARITY, MIN_ARITY, apply_to_tuple, construct, destruct
from nested_pairs.structures.pairing import Pair, render
from nested_pairs.utils.logging_utils import set_log_level, setup_loggers

# Set up module logger
logger = logging.getLogger(__name__)


# --------------------------
# Logging Configuration
# --------------------------
def setup_cli_logging(verbose_level: int, log_file: Optional[str] = None) -> None:
    """
    Configures logging for the tool based on command-line arguments.

    Parameters
    ----------
    verbose_level : int
        The verbosity level: 0 for WARNING, 1 for INFO, 2 for DEBUG.
    log_file : Optional[str]
        The path to a log file receiving the same records.

    Notes
    -----
    Records go to stderr so that stdout only carries the rendered tuple or
    the JSON document.
    """
    level_map = {
        0: logging.WARNING,
        1: logging.INFO,
        2: logging.DEBUG,
    }
    log_level = level_map.get(verbose_level, logging.DEBUG)
    setup_loggers((__name__, "nested_pairs.config"), level=log_level, stream=sys.stderr, log_file=log_file)

    if log_file is not None:
        logger.info(f"Logs will be saved to: {log_file}")


# --------------------------
# Helpers
# --------------------------
def parse_value(raw_value: str) -> Any:
    """
    Interprets a command-line token as a YAML scalar.

    Tokens that YAML reads as collections, or that it cannot parse, are kept
    as plain strings.
    """
    try:
        value = yaml.safe_load(raw_value)
    except yaml.YAMLError:
        return raw_value
    if value is None or isinstance(value, (dict, list)):
        return raw_value
    return value


def build_tuple(raw_values: Sequence[str]) -> Pair[Any, Any]:
    """
    Parses the tokens and builds the matching nested tuple.

    Raises
    ------
    ValueError
        If the number of values is outside the supported arity range.
    """
    if not MIN_ARITY <= len(raw_values) <= MAX_ARITY:
        raise ValueError(f"Expected between {MIN_ARITY} and {MAX_ARITY} values, got {len(raw_values)}.")
    values: List[Any] = [parse_value(raw) for raw in raw_values]
    logger.debug(f"Parsed values: {values!r}")
    return construct(*values)


def pick_component(nested: Pair[Any, Any], arity: int, position: int) -> Any:
    """
    Returns the 1-based `position`-th component of a nested tuple.

    Raises
    ------
    ValueError
        If `position` is not between 1 and `arity`.
    """
    if not 1 <= position <= arity:
        raise ValueError(f"--pick must be between 1 and {arity}, got {position}.")
    return apply_to_tuple(lambda *values: values[position - 1], arity)(nested)


# --------------------------
# Command-Line Interface
# --------------------------
def main(argv=None) -> int:
    """
    Parses command-line arguments, builds the nested tuple and prints it.
    """
    parser = argparse.ArgumentParser(description="Build and render a nested-pair tuple.")
    parser.add_argument("values", nargs="+",
                        help=f"Between {MIN_ARITY} and {MAX_ARITY} values, parsed as YAML scalars.")
    parser.add_argument("--pick", type=int, default=None,
                        help="Print only the N-th component (1-based).")
    parser.add_argument("--config", default=None,
                        help="Path to a YAML config with 'render' and 'logging' sections.")
    parser.add_argument("--json", action="store_true",
                        help="Emit JSON instead of the rendered text.")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase verbosity (-v=INFO, -vv=DEBUG)")
    parser.add_argument("--log-file", default=None,
                        help="Path to log file.")

    cli_args = parser.parse_args(argv)
    setup_cli_logging(cli_args.verbose, cli_args.log_file)

    try:
        config = load_config(cli_args.config) if cli_args.config else NestedPairsConfig()
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Failed to load config: {e}")
        print(f"Failed to load config: {e}", file=sys.stderr)
        return 2

    if cli_args.verbose == 0:
        set_log_level(logger, config.log_level_value)

    try:
        nested = build_tuple(cli_args.values)
        arity = len(cli_args.values)
        picked = pick_component(nested, arity, cli_args.pick) if cli_args.pick is not None else None
    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 2

    rendered = render(nested, config.render)
    logger.info(f"Built {arity}-tuple: {rendered}")

    if cli_args.json:
        payload = {
            "arity": arity,
            "rendered": rendered,
            "components": list(destruct(nested, arity)),
        }
        if cli_args.pick is not None:
            payload["picked"] = picked
        print(json.dumps(payload, indent=2, default=str))
    elif cli_args.pick is not None:
        print(config.render.format_component(picked))
    else:
        print(rendered)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
