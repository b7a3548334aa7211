"""Command-line entry point for doksnet."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from doksnet.commands import add, check, edit, interactive, new, remove_failed
from doksnet.errors import DoksError

VERSION = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="doksnet",
        description="A CLI tool for documentation-code mapping verification",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    commands = parser.add_subparsers(dest="command", required=True)

    new_parser = commands.add_parser("new", help="Create a .doks file for a project")
    new_parser.add_argument("path", nargs="?", default=None, help="project directory")
    commands.add_parser("add", help="Add a documentation-code mapping")
    edit_parser = commands.add_parser("edit", help="Edit an existing mapping")
    edit_parser.add_argument("id", help="mapping id or a prefix of it")
    commands.add_parser("remove-failed", help="Remove mappings that no longer match")
    commands.add_parser("test", help="Verify all mappings")
    commands.add_parser("test-interactive", help="Verify mappings and fix failures")
    return parser


def _dispatch(args: argparse.Namespace) -> int:
    command = args.command
    if command == "new":
        new.handle(args.path)
    elif command == "add":
        add.handle()
    elif command == "edit":
        edit.handle(args.id)
    elif command == "remove-failed":
        remove_failed.handle()
    elif command == "test":
        return check.handle()
    elif command == "test-interactive":
        interactive.handle()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = build_parser().parse_args(argv)
    try:
        return _dispatch(args)
    except DoksError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())