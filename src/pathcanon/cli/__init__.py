"""Command-line front end for pathcanon.

Usage:
    pathcanon canonicalize <path>... [--family F] [--home H] [--strict]
                                     [--caret-escapes] [--resolve-links] [--json]
    pathcanon families
    pathcanon env [--json]

Global options:
    --config <file>   YAML config (default: $PATHCANON_CONFIG or
                      ~/.config/pathcanon/config.yaml)
"""

import argparse
import sys

from pathcanon.cli.canon import cmd_canonicalize
from pathcanon.cli.env import cmd_env
from pathcanon.cli.families import cmd_families


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathcanon",
        description="Canonicalize Windows, MinGW and Cygwin path strings",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to a YAML config file",
    )
    sub = parser.add_subparsers(dest="command")

    # canonicalize
    can = sub.add_parser("canonicalize", help="Canonicalize one or more paths")
    can.add_argument("paths", nargs="+", metavar="PATH")
    _add_context_flags(can)
    can.add_argument(
        "--json", action="store_true",
        help="Output machine-readable JSON",
    )

    # families
    sub.add_parser("families", help="List registered path families")

    # env
    env = sub.add_parser("env", help="Show the detected environment context")
    _add_context_flags(env)
    env.add_argument(
        "--json", action="store_true",
        help="Output machine-readable JSON",
    )

    return parser


def _add_context_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--family", default=None,
        help="Path family (windows, mingw32, mingw64, cygwin, ...)",
    )
    parser.add_argument(
        "--home", default=None,
        help="Home directory used to expand '~'",
    )
    parser.add_argument(
        "--strict", action="store_true",
        help="Reject ambiguous backslash escapes instead of passing them through",
    )
    parser.add_argument(
        "--caret-escapes", action="store_true",
        help="Strip cmd.exe '^' escapes before canonicalizing",
    )
    parser.add_argument(
        "--resolve-links", action="store_true",
        help="Resolve symbolic links for paths that exist",
    )


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        "canonicalize": cmd_canonicalize,
        "families": cmd_families,
        "env": cmd_env,
    }
    return dispatch[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
