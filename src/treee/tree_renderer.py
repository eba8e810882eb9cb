"""Line-by-line rendering of a parent index as a tree or as a list of paths."""

from pathlib import PurePath
from typing import Iterator

from rich.style import Style

from treee.tree_assembler import ParentIndex
from treee.walker.entry import DiscoveredEntry

BRANCH = "├── "
LAST_BRANCH = "└── "
VERTICAL = "│   "
SPACER = "    "

DIRECTORY_STYLE = Style(color="blue", bold=True)


def root_display_name(root: str) -> str:
    """Return the name shown on the root line: the base name, or the path itself if it has none.

    A path ending in ``..`` has no base name.

    Example:
        >>> root_display_name("projects/app/")
        'app'
        >>> root_display_name(".")
        '.'
        >>> root_display_name("x/..")
        'x/..'
    """
    name = PurePath(root).name
    if not name or name == "..":
        return root
    return name


class TreeRenderer:
    """Renders a ParentIndex depth-first.

    In tree mode ``root_line`` names the root and every surviving entry is prefixed
    with tree-drawing connectors. In full-path mode there is no root line and each
    entry is printed as its complete path, in the same depth-first order, without
    connectors.

    Directory names are styled bold blue when color is enabled. Files are never styled.

    Attributes:
        use_color (bool): Whether directory names are styled with ANSI escapes.
        full_path (bool): Whether to print full paths instead of a tree.

    Example:
        >>> from treee.types import FileType
        >>> from treee.tree_assembler import build_parent_index
        >>> index = build_parent_index(
        ...     [
        ...         DiscoveredEntry("root/a.txt", "root", FileType.FILE, 1),
        ...         DiscoveredEntry("root/b", "root", FileType.DIRECTORY, 1),
        ...         DiscoveredEntry("root/b/c.txt", "root/b", FileType.FILE, 2),
        ...     ],
        ...     "root",
        ... )
        >>> print("\\n".join(TreeRenderer().render_entries(index)))
        ├── a.txt
        └── b
            └── c.txt
    """

    def __init__(self, use_color: bool = False, full_path: bool = False) -> None:
        self.use_color = use_color
        self.full_path = full_path

    def render_entries(self, index: ParentIndex) -> Iterator[str]:
        """Generate the lines for every entry reachable from the root, without the root line."""
        yield from self._render_children(index, index.root, "")

    def root_line(self, root: str) -> str:
        """Format the banner line naming the root directory."""
        return self._style(root_display_name(root), is_dir=True)

    def format_entry(self, entry: DiscoveredEntry, prefix: str, is_last: bool) -> str:
        """Format a single entry.

        Args:
            entry: The entry to format.
            prefix: Accumulated indentation of the entry's ancestors.
            is_last: Whether the entry is the last child of its directory.

        Returns:
            The formatted line.
        """
        if self.full_path:
            return self._style(entry.path, entry.is_dir)

        connector = LAST_BRANCH if is_last else BRANCH
        return f"{prefix}{connector}{self._style(entry.name, entry.is_dir)}"

    def child_prefix(self, prefix: str, is_last: bool) -> str:
        """Derive the indentation for the children of an entry drawn with ``prefix``.

        Descendants of a last sibling are not continued with a vertical bar.
        """
        if self.full_path:
            return ""
        return prefix + (SPACER if is_last else VERTICAL)

    def _render_children(self, index: ParentIndex, directory: str, prefix: str) -> Iterator[str]:
        children = index.children(directory)
        for i, child in enumerate(children):
            is_last = i == len(children) - 1
            yield self.format_entry(child, prefix, is_last)

            if child.is_dir:
                yield from self._render_children(index, child.path, self.child_prefix(prefix, is_last))

    def _style(self, text: str, is_dir: bool) -> str:
        if self.use_color and is_dir:
            return DIRECTORY_STYLE.render(text)
        return text
