"""Command line entry point for kubectl-kuttl."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from .version import get as get_version

PROG = "kubectl-kuttl"
_ERROR_EXIT = 255

_ROOT_DESCRIPTION = """\
CLI to Test Kubernetes

KUTTL CLI and future sub-commands can be used to manipulate, inspect and troubleshoot CRDs
and serves as an API aggregation layer.
"""

_ROOT_EXAMPLE = """\
examples:
  # View kuttl version
  kubectl kuttl version
"""

_VERSION_EXAMPLE = """\
examples:
  # Print the current installed KUTTL package version
  kubectl kuttl version
"""


def _run_version(args: argparse.Namespace, out: TextIO) -> int:
    """Write the full version information of this build to ``out``."""
    info = get_version()
    out.write(f"KUTTL Version: {info!r}\n")
    out.flush()
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the root parser and its sub-commands."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=_ROOT_DESCRIPTION,
        epilog=_ROOT_EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{PROG} version {get_version().git_version}",
    )
    commands = parser.add_subparsers(dest="command", metavar="command")

    version_parser = commands.add_parser(
        "version",
        help="Print the current KUTTL package version.",
        description="Print the current installed KUTTL package version.",
        epilog=_VERSION_EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    version_parser.set_defaults(handler=_run_version)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the process exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as stop:
        return 0 if stop.code in (0, None) else _ERROR_EXIT

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 0
    try:
        return handler(args, sys.stdout)
    except Exception as error:  # noqa: BLE001 - report and fail like the CLI does
        print(f"Error: {error}", file=sys.stderr)
        return _ERROR_EXIT


if __name__ == "__main__":
    sys.exit(main())