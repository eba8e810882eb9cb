"""Grouping of filtered walker output into a parent-to-children index.

The index replaces an in-memory tree of nodes: every directory's surviving children
are looked up by the directory's display path, so no entry holds a reference to its
parent and rendering is a simple recursive lookup.
"""

import os
from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from treee.filters.path_filter import PathFilter
from treee.walker.entry import DiscoveredEntry


def _sort_key(entry: DiscoveredEntry) -> bytes:
    # Byte order of the encoded path, independent of locale
    return os.fsencode(entry.path)


class ParentIndex:
    """Read-only mapping from a directory path to its surviving immediate children.

    Attributes:
        root (str): Display path of the root directory. The root never appears among
            the children of any directory.

    Example:
        >>> from treee.types import FileType
        >>> entries = [
        ...     DiscoveredEntry("r/b", "r", FileType.DIRECTORY, 1),
        ...     DiscoveredEntry("r/a.txt", "r", FileType.FILE, 1),
        ... ]
        >>> index = build_parent_index(entries, "r")
        >>> [child.path for child in index.children("r")]
        ['r/a.txt', 'r/b']
        >>> index.children("r/b")
        []
    """

    def __init__(self, root: str, groups: Dict[str, List[DiscoveredEntry]]) -> None:
        self.root = root
        self._groups = groups

    def children(self, directory: str) -> List[DiscoveredEntry]:
        """Return the children of ``directory`` in ascending byte order of their paths.

        Sorting happens on every lookup so the result does not depend on the order in
        which entries were grouped.
        """
        return sorted(self._groups.get(directory, ()), key=_sort_key)


def build_parent_index(
    entries: Iterable[DiscoveredEntry],
    root: str,
    path_filter: Optional[PathFilter] = None,
    directories_only: bool = False,
    files_only: bool = False,
) -> ParentIndex:
    """Filter the walker's entries and group the survivors by parent directory.

    An entry is dropped if it is the root itself, if the path filter rejects it, if
    directories_only is set and it is not a directory, or if files_only is set and it
    is not a regular file. Survivors are sorted by path before grouping.

    Args:
        entries: Entries produced by the walker, consumed exactly once.
        root: Display path of the root directory.
        path_filter: Glob filter to apply. None keeps everything.
        directories_only: Keep directories only.
        files_only: Keep regular files only.

    Returns:
        The index of surviving entries.

    Raises:
        ValueError: If both directories_only and files_only are set.
    """
    if directories_only and files_only:
        raise ValueError("directories_only and files_only are mutually exclusive")

    survivors: List[DiscoveredEntry] = []
    for entry in entries:
        if entry.path == root:
            continue
        if path_filter is not None and not path_filter.should_include(entry.path, is_dir=entry.is_dir):
            continue
        if directories_only and not entry.is_dir:
            continue
        if files_only and not entry.is_file:
            continue
        survivors.append(entry)

    survivors.sort(key=_sort_key)

    groups: Dict[str, List[DiscoveredEntry]] = defaultdict(list)
    for entry in survivors:
        groups[entry.parent].append(entry)

    return ParentIndex(root, dict(groups))
