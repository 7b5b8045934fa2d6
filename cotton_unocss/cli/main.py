from __future__ import annotations
import argparse
import logging
from typing import List, Optional

from .commands import (
    tokens as cmd_tokens,
    transform as cmd_transform,
)
from ..core.logger import set_level


def entrypoint():
    main()


def build_parser() -> argparse.ArgumentParser:
    # Subcommand --verbose must not reset a global --verbose given earlier.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable debug logging",
    )

    parser = argparse.ArgumentParser(
        description="Convert design tool CSS declarations to UnoCSS classes"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    t = sub.add_parser(
        "transform",
        parents=[common],
        help="Transform declarations into a class list",
    )
    t.add_argument(
        "input",
        type=str,
        help="File with a JSON object or 'property: value;' declarations, or '-' for stdin",
    )
    t.add_argument(
        "--rem", action="store_true", help="Convert px lengths to rem (16px root)"
    )
    t.add_argument(
        "--prefix", type=str, default="", help="Prefix added to every class"
    )
    t.add_argument(
        "--settings",
        type=str,
        default=None,
        help="Settings JSON with the ignored style keys (defaults to the packaged settings)",
    )
    t.add_argument(
        "--show-css",
        action="store_true",
        help="Print the cleaned css block before the class list",
    )

    k = sub.add_parser(
        "tokens",
        parents=[common],
        help="Resolve CSS variable names to palette tokens",
    )
    k.add_argument(
        "names",
        nargs="*",
        help="Variable names to resolve (lists the rule table when omitted)",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_level(logging.DEBUG)

    if args.command == "transform":
        cmd_transform.run(args)
    elif args.command == "tokens":
        cmd_tokens.run(args)
