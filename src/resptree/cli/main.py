"""Command-line interface for resptree.

This module renders the tree of a directory to standard output, annotating
every file with the responsibility found in its leading comment, or prints a
shell completion script when invoked in completion mode.

Signal Handling Notes:
    - SIGPIPE: Handled when output pipe is closed (e.g., when piping to `head`) on Unix-like systems
    - SIGINT: Handled for clean exit on Ctrl+C
    In both cases output stops at the next line and the process exits with the
    conventional status code.

Exit Codes:
    0: Successful completion
    1: Target directory not accessible, or another runtime error
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Render the current directory
    $ resptree

    # Render another directory
    $ resptree /path/to/dir

    # Generate zsh completion
    $ resptree completion zsh
"""

import sys
from typing import Optional, Sequence

from resptree.cli.argparser import COMPLETION_COMMAND, generate_completion, parse_args
from resptree.cli.safe_writer import SafeWriter
from resptree.cli.signal_handler import setup_signal_handling, signal_handler
from resptree.resptree import ResponsibilityTree


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the resptree command-line interface.

    Args:
        argv: Arguments without the program name. Defaults to ``sys.argv[1:]``.

    Exit codes:
        0: Successful completion
        1: Target directory not accessible, or another runtime error
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
    args = parse_args(argv)

    try:
        with SafeWriter(sys.stdout.fileno()) as safe_writer:
            try:
                if args.command == COMPLETION_COMMAND:
                    safe_writer.write(generate_completion(args.shell))
                else:
                    tree = ResponsibilityTree(args.path, ascii=args.ascii)
                    for line in tree.stream_tree():
                        safe_writer.write_line(line)
            except BrokenPipeError:
                pass

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    # Handle exit codes based on received signals
    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
