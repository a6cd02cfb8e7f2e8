"""Command-line interface for uritpl."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, NoReturn, Optional

from uritpl.dsl.loader import load_bindings_file
from uritpl.exceptions import URITemplateError
from uritpl.logging import get_logger, set_global_log_level
from uritpl.template import Template

logger = get_logger(__name__)


def _parse_assignments(assignments: Optional[List[str]]) -> Dict[str, str]:
    """Turn ``NAME=VALUE`` strings into a bindings dict.

    Only the first ``=`` splits, so values may contain ``=``.

    Raises:
        ValueError: An assignment has no ``=`` or an empty name.
    """
    result: Dict[str, str] = {}
    for item in assignments or []:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise ValueError(f"Expected NAME=VALUE, got '{item}'")
        result[name] = value
    return result


def _fail(message: str) -> NoReturn:
    logger.error(message)
    print(f"❌ ERROR: {message}")
    sys.exit(1)


def _load_template(text: str) -> Template:
    try:
        return Template(text)
    except URITemplateError as e:
        _fail(f"Invalid template: {e}")


def _expand(
    template_text: str,
    vars_path: Optional[Path],
    assignments: Optional[List[str]],
) -> None:
    """Expand a template with bindings from a file and/or the command line."""
    template = _load_template(template_text)

    bindings: Dict[str, Any] = {}
    try:
        if vars_path is not None:
            logger.debug(f"Loading bindings from: {vars_path}")
            bindings.update(load_bindings_file(vars_path))
        bindings.update(_parse_assignments(assignments))
    except FileNotFoundError:
        _fail(f"Bindings file not found: {vars_path}")
    except Exception as e:
        _fail(f"Failed to load bindings: {type(e).__name__}: {e}")

    missing = [name for name in template.variables() if name not in bindings]
    if missing:
        logger.debug(f"Undefined variables: {', '.join(missing)}")

    print(template.expand(bindings))


def _list_variables(template_text: str) -> None:
    template = _load_template(template_text)
    for name in template.variables():
        print(name)


def _validate(template_text: str) -> None:
    template = _load_template(template_text)
    count = len(template.variables())
    print(f"✅ Template is valid ({count} variable reference(s))")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``uritpl`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="uritpl",
        description="Expand and check RFC 6570 URI templates.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{expand,variables,validate}",
        help="Available commands",
    )

    expand_parser = subparsers.add_parser("expand", help="Expand a template")
    expand_parser.add_argument("template", help="Template text")
    expand_parser.add_argument(
        "--vars",
        type=Path,
        default=None,
        help="YAML or JSON file mapping variable names to values",
    )
    expand_parser.add_argument(
        "--set",
        dest="assignments",
        action="append",
        metavar="NAME=VALUE",
        help="String binding; repeatable, overrides --vars entries",
    )

    variables_parser = subparsers.add_parser(
        "variables", help="List variables referenced by a template"
    )
    variables_parser.add_argument("template", help="Template text")

    validate_parser = subparsers.add_parser("validate", help="Check template syntax")
    validate_parser.add_argument("template", help="Template text")

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
        set_global_log_level(logging.ERROR)
    else:
        set_global_log_level(logging.WARNING)

    if args.command == "expand":
        _expand(args.template, args.vars, args.assignments)
    elif args.command == "variables":
        _list_variables(args.template)
    elif args.command == "validate":
        _validate(args.template)


if __name__ == "__main__":
    main()
