"""Directory tree listing with streaming output.

This module ties the pipeline together: the walker enumerates entries, the path
filter and kind constraints prune them, the assembler groups the survivors by
parent, and the renderer turns the result into output lines.
"""

import os
from typing import Iterator

from treee.config import TreeConfig
from treee.filters.path_filter import PathFilter
from treee.tree_assembler import ParentIndex, build_parent_index
from treee.tree_renderer import TreeRenderer
from treee.walker.ignore_walker import IgnoreWalker


class StreamingTree:
    """Produces the listing for one configuration, one line at a time.

    Every fatal problem is detected in the constructor, before a single line is
    produced: the configuration is validated when it is built, then the glob patterns
    are compiled, then the root path is checked. Per-entry filesystem errors during
    the walk are never fatal.

    Streaming properties:
    - The root line (tree mode) is produced before the walk starts
    - The walk runs to completion before the first child line, since children are
      grouped and sorted first
    - The listing can be streamed more than once; each stream walks the filesystem anew

    Attributes:
        config (TreeConfig): The run's configuration.
        path_filter (PathFilter): Compiled glob filters.
        renderer (TreeRenderer): Output formatter.

    Example:
        >>> listing = StreamingTree(TreeConfig(path="src"))  # doctest: +SKIP
        >>> for line in listing.stream_tree():  # doctest: +SKIP
        ...     print(line, end='')  # Each line includes newline
        src
        └── treee
            └── __init__.py

    Raises:
        PatternError: If any glob pattern is malformed.
        FileNotFoundError: If the root path does not exist.
    """

    def __init__(self, config: TreeConfig) -> None:
        """Initialize the listing.

        Args:
            config: Validated run configuration.

        Raises:
            PatternError: If any glob pattern is malformed.
            FileNotFoundError: If the root path does not exist.
        """
        self.config = config
        self.path_filter = PathFilter(
            include_patterns=config.include_patterns,
            exclude_patterns=config.exclude_patterns,
            file_patterns=config.file_patterns,
        )

        if not os.path.exists(config.path):
            raise FileNotFoundError(f"Path '{config.path}' does not exist")

        self.renderer = TreeRenderer(use_color=config.use_color, full_path=config.full_path)
        self._walker = IgnoreWalker(
            config.path,
            max_depth=config.max_depth,
            show_hidden=config.show_hidden,
            git_ignore=config.use_ignore_rules,
        )

    def build_index(self) -> ParentIndex:
        """Walk the filesystem and group the surviving entries by parent directory."""
        return build_parent_index(
            self._walker.walk(),
            self._walker.root,
            path_filter=self.path_filter,
            directories_only=self.config.directories_only,
            files_only=self.config.files_only,
        )

    def stream_tree(self) -> Iterator[str]:
        """Generate the listing one line at a time.

        Yields:
            Output lines, each terminated by a newline.
        """
        if not self.config.full_path:
            yield self.renderer.root_line(self.config.path) + "\n"

        index = self.build_index()
        for line in self.renderer.render_entries(index):
            yield line + "\n"
