"""Command-line argument parsing for resptree.

Two parsers are involved: the main parser for rendering a tree, and a small
parser for the ``completion`` mode. A first argument of ``completion`` selects
the latter, which means a directory literally named ``completion`` has to be
given as ``./completion``.
"""

import argparse
import sys
from typing import List, Optional, Sequence

import shtab

from resptree import __version__

PROG = "resptree"
COMPLETION_COMMAND = "completion"
COMPLETION_SHELLS = ("bash", "zsh", "tcsh")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the parser for rendering a tree.

    Returns:
        An ArgumentParser instance configured with resptree's options.
    """
    description = """
    resptree: print a directory tree annotated with each file's responsibility.

    Every file is followed by the first line of its leading comment (a line
    starting with // or #), so a project's layout and the purpose of each file
    can be read at a glance. Hidden files and directories are skipped.
    """

    epilog = f"""
    Examples:
      # Current directory
      {PROG}

      # Another directory, drawn with ASCII connectors
      {PROG} --ascii path/to/project

      # Install bash completion
      {PROG} {COMPLETION_COMMAND} bash > ~/.local/share/bash-completion/completions/{PROG}
    """

    parser = argparse.ArgumentParser(
        prog=PROG,
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"{PROG} {__version__}", help="Show the version and exit"
    )
    path_argument = parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="The directory to render (default: current directory).",
    )
    path_argument.complete = shtab.DIRECTORY  # type: ignore[attr-defined]
    parser.add_argument(
        "-A",
        "--ascii",
        action="store_true",
        help="Draw tree connectors with ASCII characters instead of box-drawing characters.",
    )
    return parser


def create_completion_parser() -> argparse.ArgumentParser:
    """Create the parser for the ``completion`` mode."""
    parser = argparse.ArgumentParser(
        prog=f"{PROG} {COMPLETION_COMMAND}",
        description=f"Print a shell completion script for {PROG} to standard output.",
    )
    parser.add_argument("shell", choices=COMPLETION_SHELLS, help="Shell to generate the completion script for.")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments, dispatching to the completion parser when requested.

    Args:
        argv: Arguments without the program name. Defaults to ``sys.argv[1:]``.

    Returns:
        The parsed namespace. ``command`` is ``"completion"`` in completion mode
        and None otherwise.
    """
    if argv is None:
        argv = sys.argv[1:]
    args: List[str] = list(argv)

    if args and args[0] == COMPLETION_COMMAND:
        namespace = create_completion_parser().parse_args(args[1:])
        namespace.command = COMPLETION_COMMAND
    else:
        namespace = create_parser().parse_args(args)
        namespace.command = None
    return namespace


def generate_completion(shell: str) -> str:
    """Return the completion script of the main parser for ``shell``."""
    return shtab.complete(create_parser(), shell=shell)
