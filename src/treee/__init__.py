"""Directory tree visualization with ignore-file and glob filtering.

This package walks a directory, honors .gitignore-style rules and user supplied
glob filters, and renders the surviving entries as a tree or as a flat list of
paths.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("treee")
except PackageNotFoundError:
    __version__ = "unknown"
