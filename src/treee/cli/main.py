"""Command-line interface for treee.

This module provides the command-line interface for treee, printing the tree
(or full-path listing) of a directory. It handles command-line argument parsing,
color detection, error reporting and signal management for graceful interruption
handling.

Signal Handling Notes:
    - SIGPIPE: Handled when output pipe is closed (e.g., when piping to `head`) on Unix-like systems
    - SIGINT: Handled for clean exit on Ctrl+C
    Both cases stop output and exit with the conventional status.

Exit Codes:
    0: Successful completion
    1: Invalid option combination, missing root path, malformed glob pattern or other runtime error
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # List a directory three levels deep
    $ treee -L 3 /path/to/dir

    # Display version information
    $ treee --version
"""

import sys
from typing import IO

from treee.cli.argparser import create_parser, validate_args
from treee.cli.safe_writer import SafeWriter
from treee.cli.interrupts import install_handlers, interrupts
from treee.config import TreeConfig
from treee.treee import StreamingTree


def color_enabled(no_color: bool, stream: IO[str]) -> bool:
    """Decide whether directory names are styled.

    Args:
        no_color: Whether the user passed --no-color.
        stream: The stream output goes to.

    Returns:
        True only if colors were not disabled and the stream is a terminal.
    """
    if no_color:
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def main() -> None:
    """Main entry point for the treee command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    install_handlers()

    try:
        parser = create_parser()
        # argparse exits with status 2 on syntax errors and 0 for --version
        args = parser.parse_args()

        # Checked before anything touches the filesystem
        validate_args(args)

        config = TreeConfig.from_args(args, use_color=color_enabled(args.no_color, sys.stdout))
        listing = StreamingTree(config)

        sys.stdout.flush()
        with SafeWriter(sys.stdout.fileno()) as safe_writer:
            try:
                for line in listing.stream_tree():
                    safe_writer.write(line)
            except BrokenPipeError:
                pass

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    # 141 after SIGPIPE, 130 after SIGINT
    status = interrupts.exit_status()
    if status is not None:
        sys.exit(status)


if __name__ == "__main__":
    main()
