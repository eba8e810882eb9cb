from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(Enum):
    """Enumeration of entry kinds reported by the walker.

    Symbolic links are classified by their target, so a link to a directory is a
    DIRECTORY. Anything that is neither a regular file nor a directory (FIFOs,
    sockets, device nodes) is OTHER.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        OTHER: Any other kind of filesystem node
    """

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"
