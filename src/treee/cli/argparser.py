"""Command-line argument parsing for treee.

This module defines the command-line interface for treee,
handling argument parsing and validation.
"""

import argparse

from treee import __version__


def non_negative_int(value: str) -> int:
    """Parse a depth argument.

    Raises:
        argparse.ArgumentTypeError: If the value is not a non-negative integer.
    """
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: '{value}' is not an integer")
    if depth < 0:
        raise argparse.ArgumentTypeError(f"invalid depth: '{value}' must not be negative")
    return depth


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with treee's options.
    """
    description = """
    treee: A fast tree command with gitignore support and flexible filtering.

    Lists the contents of a directory as an indented tree (or as a flat list of paths),
    skipping hidden entries and anything matched by .gitignore, .ignore, the repository
    exclude file or git's global excludes file.

    Filtering:
    - Exclude patterns (-E) remove any file or directory whose path or name matches
    - Include patterns (-I) keep only files whose path or name matches
    - Name patterns (-P) keep only files whose name matches
    Directories are only ever removed by exclude patterns, so matching files below
    them can still be found.
    """

    epilog = """
    Examples:
      # List the current directory
      treee

      # Limit the depth and show hidden files
      treee -L 2 -a /path/to/project

      # Only Python sources, skipping tests
      treee -I "*.py" -E "test_*" /path/to/project

      # Directories only
      treee -d /path/to/project

      # Flat list of full paths, ignoring .gitignore rules
      treee --full-path --no-git-ignore /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="treee",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"treee {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Directory to traverse (default: current directory).",
    )
    parser.add_argument(
        "-L",
        "--depth",
        type=non_negative_int,
        default=10,
        metavar="DEPTH",
        help="Maximum depth to traverse (default: 10).",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Show hidden files and directories.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Don't use colors. Colors are also disabled when output is not a terminal.",
    )
    parser.add_argument(
        "-d",
        "--directories-only",
        action="store_true",
        help="Show directories only.",
    )
    parser.add_argument(
        "-f",
        "--files-only",
        action="store_true",
        help="Show files only (opposite of --directories-only).",
    )
    parser.add_argument(
        "-I",
        "--include",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Include files whose path or name matches this glob pattern (can be specified multiple times).",
    )
    parser.add_argument(
        "-E",
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Exclude paths matching this glob pattern (can be specified multiple times).",
    )
    parser.add_argument(
        "-P",
        "--pattern",
        action="append",
        default=[],
        metavar="PATTERN",
        help="File name glob pattern to match (can be specified multiple times).",
    )
    parser.add_argument(
        "--no-git-ignore",
        action="store_true",
        help="Disable .gitignore, .git/info/exclude and global git excludes rules.",
    )
    parser.add_argument(
        "--full-path",
        action="store_true",
        help="Print full paths instead of tree format.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.directories_only and args.files_only:
        raise ValueError("Cannot use both --directories-only and --files-only")
