"""Command-line interface for matrixpath."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path as FilePath
from typing import Any, Dict, List, Optional

import yaml

from matrixpath.config import DEFAULT_SYNTAX, SyntaxConfig
from matrixpath.errors import PathSyntaxError
from matrixpath.logging import get_logger, set_global_log_level
from matrixpath.matrix import MatrixPath, MatrixPathPattern, PathElement
from matrixpath.path import Path, PatternPath
from matrixpath.pattern import UnixWildcardBuilder

logger = get_logger(__name__)

_PATH_KINDS = {
    "path": Path,
    "pattern": PatternPath,
    "matrix": MatrixPath,
    "matrix-pattern": MatrixPathPattern,
}


def _render_value(value: Any, escape: str) -> Optional[str]:
    """Return a JSON-friendly form of a name or attribute value."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return value.build(UnixWildcardBuilder(escape, ()))


def _describe_element(element: Any, escape: str) -> Any:
    if isinstance(element, PathElement):
        return {
            "name": _render_value(element.name, escape),
            "attrs": {
                key: _render_value(value, escape)
                for key, value in element.attrs.items()
            },
        }
    return _render_value(element, escape)


def _describe_path(kind: str, path: Path, escape: str) -> Dict[str, Any]:
    return {
        "kind": kind,
        "length": len(path),
        "elements": [_describe_element(element, escape) for element in path],
        "canonical": path.to_string(escape),
    }


def _load_config(
    config_path: Optional[FilePath], escape: Optional[str]
) -> SyntaxConfig:
    config = DEFAULT_SYNTAX
    if config_path is not None:
        config = SyntaxConfig.from_yaml(config_path.read_text())
        logger.debug("Loaded syntax config from %s: %r", config_path, config)
    if escape is not None:
        config = SyntaxConfig(escape=escape)
    return config


def _parse_command(text: str, kind: str, config: SyntaxConfig) -> None:
    path = _PATH_KINDS[kind].parse(text, config.escape)
    print(json.dumps(_describe_path(kind, path, config.escape), indent=2))


def _match_command(
    pattern_text: str, text: str, matrix: bool, config: SyntaxConfig
) -> bool:
    if matrix:
        path: Path = MatrixPath.parse(text, config.escape)
        patterns: Path = MatrixPathPattern.parse(pattern_text, config.escape)
    else:
        path = Path.parse(text, config.escape)
        patterns = PatternPath.parse(pattern_text, config.escape)
    matched = path.matches(patterns)
    logger.debug(
        "Matched %d-element path against %d-element pattern: %s",
        len(path),
        len(patterns),
        matched,
    )
    print(json.dumps({"matches": matched}))
    return matched


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``matrixpath`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.

    Exit status is 0 on success, 1 when ``match`` finds no match, and 2 on a
    syntax or configuration error.
    """
    parser = argparse.ArgumentParser(
        prog="matrixpath",
        description="Parse, render and match escapable matrix paths.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--config",
        "-c",
        type=FilePath,
        default=None,
        help="YAML file with a 'syntax' section (e.g. the escape character)",
    )
    parser.add_argument(
        "--escape",
        default=None,
        help="Escape character (overrides --config)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{parse,match}",
        help="Available commands",
    )

    parse_parser = subparsers.add_parser(
        "parse", help="Parse a path and print its elements as JSON"
    )
    parse_parser.add_argument("text", help="Path string")
    parse_parser.add_argument(
        "--kind",
        "-k",
        choices=sorted(_PATH_KINDS),
        default="path",
        help="Path syntax to parse (default: path)",
    )

    match_parser = subparsers.add_parser(
        "match", help="Match a path against a wildcard pattern path"
    )
    match_parser.add_argument("pattern", help="Pattern path string")
    match_parser.add_argument("text", help="Path string")
    match_parser.add_argument(
        "--matrix",
        "-m",
        action="store_true",
        help="Use matrix syntax (name;key=value segments)",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    try:
        config = _load_config(args.config, args.escape)
        if args.command == "parse":
            _parse_command(args.text, args.kind, config)
        elif args.command == "match":
            if not _match_command(args.pattern, args.text, args.matrix, config):
                sys.exit(1)
    except FileNotFoundError as e:
        logger.error(f"Config file not found: {e.filename}")
        print(f"ERROR: Config file not found: {e.filename}", file=sys.stderr)
        sys.exit(2)
    except (yaml.YAMLError, OSError) as e:
        logger.error(f"Failed to read config: {e}")
        print(f"ERROR: Failed to read config: {e}", file=sys.stderr)
        sys.exit(2)
    except PathSyntaxError as e:
        logger.error(f"Syntax error: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(2)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"ERROR: {type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
