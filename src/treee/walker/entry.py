"""Entry representation for filesystem nodes found during traversal."""

import os
from dataclasses import dataclass

from treee.types import FileType


@dataclass(frozen=True)
class DiscoveredEntry:
    """A filesystem node produced by the walker.

    Attributes:
        path (str): Display path, the root argument joined with the entry's relative location.
        parent (str): Display path of the directory the entry was found in.
        kind (FileType): Classification of the node. Symlinks are classified by their target.
        depth (int): Directory levels below the root; the root's direct children are at depth 1.

    Example:
        >>> entry = DiscoveredEntry("./src/main.py", "./src", FileType.FILE, 2)
        >>> entry.name
        'main.py'
        >>> entry.is_dir
        False
    """

    path: str
    parent: str
    kind: FileType
    depth: int

    @property
    def name(self) -> str:
        """The entry's base name."""
        return os.path.basename(self.path)

    @property
    def is_dir(self) -> bool:
        return self.kind is FileType.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is FileType.FILE
