"""Include/exclude filtering of discovered paths."""

import os
from typing import List, Optional, Sequence

from .glob_pattern import GlobPattern


class PathFilter:
    """Predicate deciding whether a discovered path survives the user's glob filters.

    Three ordered sets of patterns are consulted:

    - exclude patterns, matched against the full path string and the bare file name,
      reject any entry and are always checked first
    - include patterns, matched the same way, restrict files only
    - file-name patterns, matched against the bare file name, restrict files only

    Directories are never gated by include or file-name patterns so that traversal can
    still reach matching files below a directory whose own name does not match. An
    empty pattern set places no constraint on its dimension.

    Attributes:
        include_patterns (List[GlobPattern]): Compiled include patterns.
        exclude_patterns (List[GlobPattern]): Compiled exclude patterns.
        file_patterns (List[GlobPattern]): Compiled file-name patterns.

    Example:
        >>> path_filter = PathFilter(include_patterns=["*.py"], exclude_patterns=["test_*"])
        >>> path_filter.should_include("src/main.py", is_dir=False)
        True
        >>> path_filter.should_include("src/test_main.py", is_dir=False)
        False
        >>> path_filter.should_include("src/README.md", is_dir=False)
        False
        >>> path_filter.should_include("src/docs", is_dir=True)
        True
    """

    def __init__(
        self,
        include_patterns: Sequence[str] = (),
        exclude_patterns: Sequence[str] = (),
        file_patterns: Sequence[str] = (),
    ) -> None:
        """Compile the filter's patterns.

        Args:
            include_patterns: Glob patterns a file must match (path or name) to be kept.
            exclude_patterns: Glob patterns that remove any matching entry.
            file_patterns: Glob patterns a file's name must match to be kept.

        Raises:
            PatternError: If any pattern is not a valid glob.
        """
        self.include_patterns: List[GlobPattern] = [GlobPattern(p) for p in include_patterns]
        self.exclude_patterns: List[GlobPattern] = [GlobPattern(p) for p in exclude_patterns]
        self.file_patterns: List[GlobPattern] = [GlobPattern(p) for p in file_patterns]

    def should_include(self, path: str, is_dir: Optional[bool] = None) -> bool:
        """Decide whether ``path`` passes the filter.

        Args:
            path: The path as it will be displayed (root argument joined with the
                entry's relative location).
            is_dir: Whether the path is a directory. When omitted the filesystem is
                consulted.

        Returns:
            True if the entry should be kept.
        """
        file_name = os.path.basename(path)

        for pattern in self.exclude_patterns:
            if pattern.matches(path) or pattern.matches(file_name):
                return False

        if is_dir is None:
            is_dir = os.path.isdir(path)
        if is_dir:
            return True

        if self.include_patterns:
            if not any(p.matches(path) or p.matches(file_name) for p in self.include_patterns):
                return False

        if self.file_patterns:
            return any(p.matches(file_name) for p in self.file_patterns)

        return True
