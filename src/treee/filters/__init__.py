"""Glob based path filtering."""

from .glob_pattern import GlobPattern
from .path_filter import PathFilter

__all__ = [
    "GlobPattern",
    "PathFilter",
]
