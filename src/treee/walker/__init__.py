"""Ignore-aware directory traversal.

This package provides the walker that enumerates a directory tree while honoring
hidden-entry and ignore-file rules, and the entry type it produces.
"""

from .entry import DiscoveredEntry
from .ignore_walker import IgnoreWalker

__all__ = [
    "DiscoveredEntry",
    "IgnoreWalker",
]
