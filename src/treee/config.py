"""Run configuration for a tree listing."""

import argparse
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class TreeConfig:
    """Immutable settings for one run.

    Attributes:
        path (str): Root directory to list.
        max_depth (int): Deepest level to list; the root's direct children are level 1.
        show_hidden (bool): List dotfiles and dot-directories.
        use_color (bool): Style directory names with ANSI escapes.
        directories_only (bool): List directories only.
        files_only (bool): List regular files only.
        include_patterns (Tuple[str, ...]): Glob patterns a file must match (path or name).
        exclude_patterns (Tuple[str, ...]): Glob patterns that remove any matching entry.
        file_patterns (Tuple[str, ...]): Glob patterns a file's name must match.
        use_ignore_rules (bool): Honor .gitignore, the repository exclude file and the
            global git excludes file.
        full_path (bool): Print full paths instead of a tree.

    Raises:
        ValueError: If max_depth is negative or both directories_only and files_only are set.

    Example:
        >>> config = TreeConfig(path="src", exclude_patterns=("*.pyc",))
        >>> config.max_depth
        10
        >>> TreeConfig(directories_only=True, files_only=True)
        Traceback (most recent call last):
        ...
        ValueError: directories_only and files_only are mutually exclusive
    """

    path: str = "."
    max_depth: int = 10
    show_hidden: bool = False
    use_color: bool = False
    directories_only: bool = False
    files_only: bool = False
    include_patterns: Tuple[str, ...] = ()
    exclude_patterns: Tuple[str, ...] = ()
    file_patterns: Tuple[str, ...] = ()
    use_ignore_rules: bool = True
    full_path: bool = False

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")
        if self.directories_only and self.files_only:
            raise ValueError("directories_only and files_only are mutually exclusive")

    @classmethod
    def from_args(cls, args: argparse.Namespace, use_color: bool) -> "TreeConfig":
        """Build a configuration from parsed command-line arguments.

        Args:
            args: Namespace produced by the treee argument parser.
            use_color: Whether color output is enabled for this run.

        Returns:
            The corresponding configuration.
        """
        return cls(
            path=str(args.path),
            max_depth=args.depth,
            show_hidden=args.all,
            use_color=use_color,
            directories_only=args.directories_only,
            files_only=args.files_only,
            include_patterns=tuple(args.include or ()),
            exclude_patterns=tuple(args.exclude or ()),
            file_patterns=tuple(args.pattern or ()),
            use_ignore_rules=not args.no_git_ignore,
            full_path=args.full_path,
        )
