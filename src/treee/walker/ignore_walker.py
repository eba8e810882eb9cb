"""Depth-limited directory traversal honoring hidden entries and ignore files.

This module provides the IgnoreWalker class, which enumerates the entries below a
root directory the way version-control aware tools do: dotfiles are skipped unless
requested, and ``.ignore``/``.gitignore`` hierarchies, the repository exclude file and
git's global excludes file prune the walk.
"""

import os
import stat
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from treee.exclusion_rules.composite_rules import CompositeExclusionRules, PathMapper
from treee.exclusion_rules.git_rules import GitIgnoreExclusionRules
from treee.types import FileType, PathType

from . import ignore_files
from .entry import DiscoveredEntry

# Ignore files paired with the absolute directory their patterns are anchored to
_Layer = Tuple[GitIgnoreExclusionRules, str]


@dataclass
class _RuleFrame:
    """Ignore rules in effect for the children of one directory."""

    ignore_layers: List[_Layer] = field(default_factory=list)
    git_layers: List[_Layer] = field(default_factory=list)
    repository: Optional[str] = None
    exclude: Optional[GitIgnoreExclusionRules] = None
    global_rules: Optional[GitIgnoreExclusionRules] = None

    def composite(self) -> CompositeExclusionRules:
        """Stack the frame's rules by precedence.

        ``.ignore`` files beat ``.gitignore`` files, which beat the repository exclude
        file, which beats the global excludes file. Deeper files come first within
        each kind.
        """
        composite = CompositeExclusionRules()
        for rules, base in self.ignore_layers + self.git_layers:
            composite.add_rule_object(rules, _relative_to(base))
        if self.repository is not None:
            for rules in (self.exclude, self.global_rules):
                if rules is not None:
                    composite.add_rule_object(rules, _relative_to(self.repository))
        return composite


def _relative_to(base: str) -> PathMapper:
    def mapper(path: str) -> Optional[str]:
        relative = os.path.relpath(path, base)
        if relative in (os.curdir, os.pardir) or relative.startswith(os.pardir + os.sep):
            return None
        return relative.replace(os.sep, "/")

    return mapper


def _classify(path: str) -> Optional[FileType]:
    """Classify ``path`` by what it resolves to, or None if it cannot be stat'ed."""
    try:
        mode = os.stat(path).st_mode
    except (OSError, ValueError):
        return None
    if stat.S_ISDIR(mode):
        return FileType.DIRECTORY
    if stat.S_ISREG(mode):
        return FileType.FILE
    return FileType.OTHER


def _strip_trailing_separators(path: str) -> str:
    stripped = path.rstrip("/" + (os.altsep or "") + os.sep)
    return stripped or path[:1]


class IgnoreWalker:
    """Enumerates the entries below a root directory.

    Entries are produced depth-first, children in sorted order, each exactly once.
    The root itself is never produced. Entries that cannot be read are dropped
    silently: broken symlinks and nodes that cannot be stat'ed disappear, and a
    directory whose listing fails is produced without children.

    Depth Behavior:
        The root's direct children are at depth 1. An entry is produced iff its depth
        does not exceed max_depth, and directories at max_depth are not descended.

    Symbolic Link Behavior:
        Symlinks are never followed. A link is classified by its target, so a link to
        a directory is reported as a directory, but its contents are not listed.

    Ignore Rules:
        ``.ignore`` files are always honored, in traversed directories and in every
        ancestor of the root. When git_ignore is enabled and the walk is inside a git
        repository, ``.gitignore`` files (up to the repository root), the repository's
        ``.git/info/exclude`` and git's global excludes file apply as well. A directory
        holding ``.git`` starts a new repository for its subtree. Ignored directories
        are pruned together with everything below them.

    Attributes:
        root (str): The root path as given, without trailing separators.
        max_depth (int): Deepest level to produce.
        show_hidden (bool): Whether dotfiles and dot-directories are produced.
        git_ignore (bool): Whether git's ignore sources are honored.

    Example:
        >>> walker = IgnoreWalker(".", max_depth=1)  # doctest: +SKIP
        >>> [entry.path for entry in walker.walk()]  # doctest: +SKIP
        ['./README.md', './src']
    """

    def __init__(
        self,
        root: PathType,
        max_depth: int = 10,
        show_hidden: bool = False,
        git_ignore: bool = True,
    ) -> None:
        """Initialize an IgnoreWalker.

        Args:
            root: Directory to walk. Entry paths are built by joining onto it.
            max_depth: Deepest level to produce. Defaults to 10.
            show_hidden: Produce entries whose name starts with a dot. Defaults to False.
            git_ignore: Honor .gitignore, .git/info/exclude and the global excludes file.
                Defaults to True.
        """
        self.root = _strip_trailing_separators(os.fspath(root))
        self.max_depth = max_depth
        self.show_hidden = show_hidden
        self.git_ignore = git_ignore

    def walk(self) -> Iterator[DiscoveredEntry]:
        """Produce the entries below the root.

        Yields:
            One DiscoveredEntry per surviving filesystem node, parents before children.
        """
        if self.max_depth < 1 or not os.path.isdir(self.root):
            return

        absolute_root = os.path.abspath(self.root)
        frame = self._enter(absolute_root, self._initial_frame(absolute_root))
        yield from self._walk_directory(self.root, absolute_root, 1, frame)

    def __iter__(self) -> Iterator[DiscoveredEntry]:
        return self.walk()

    def _initial_frame(self, absolute_root: str) -> _RuleFrame:
        """Collect the rules contributed by the root's ancestors."""
        frame = _RuleFrame()
        repository = ignore_files.find_repository_root(absolute_root) if self.git_ignore else None

        ancestors: List[str] = []
        current = os.path.dirname(absolute_root)
        while True:
            ancestors.append(current)
            parent = os.path.dirname(current)
            if parent == current:
                break
            current = parent

        # Topmost first so deeper files end up in front
        for ancestor in reversed(ancestors):
            rules = ignore_files.load_rules(os.path.join(ancestor, ignore_files.IGNORE_FILENAME))
            if rules is not None:
                frame.ignore_layers.insert(0, (rules, ancestor))
            if repository is not None and _is_within(ancestor, repository):
                rules = ignore_files.load_rules(os.path.join(ancestor, ignore_files.GITIGNORE_FILENAME))
                if rules is not None:
                    frame.git_layers.insert(0, (rules, ancestor))

        if repository is not None:
            frame.repository = repository
            frame.exclude = ignore_files.repository_exclude_rules(repository)
            frame.global_rules = ignore_files.global_rules()
        return frame

    def _enter(self, directory: str, parent: _RuleFrame) -> _RuleFrame:
        """Derive the rules for the children of ``directory`` from its parent's frame."""
        frame = _RuleFrame(
            ignore_layers=list(parent.ignore_layers),
            git_layers=list(parent.git_layers),
            repository=parent.repository,
            exclude=parent.exclude,
            global_rules=parent.global_rules,
        )

        rules = ignore_files.load_rules(os.path.join(directory, ignore_files.IGNORE_FILENAME))
        if rules is not None:
            frame.ignore_layers.insert(0, (rules, directory))

        if not self.git_ignore:
            return frame

        if ignore_files.is_repository(directory) and directory != parent.repository:
            frame.git_layers = []
            frame.repository = directory
            frame.exclude = ignore_files.repository_exclude_rules(directory)
            frame.global_rules = ignore_files.global_rules()

        if frame.repository is not None:
            rules = ignore_files.load_rules(os.path.join(directory, ignore_files.GITIGNORE_FILENAME))
            if rules is not None:
                frame.git_layers.insert(0, (rules, directory))
        return frame

    def _walk_directory(
        self, display_dir: str, absolute_dir: str, depth: int, frame: _RuleFrame
    ) -> Iterator[DiscoveredEntry]:
        try:
            names = sorted(os.listdir(absolute_dir))
        except OSError:
            # Unreadable directories keep their own entry but contribute no children
            return

        rules = frame.composite()

        for name in names:
            if not self.show_hidden and name.startswith("."):
                continue

            absolute_path = os.path.join(absolute_dir, name)
            kind = _classify(absolute_path)
            if kind is None:
                continue

            is_link = os.path.islink(absolute_path)
            descend = kind is FileType.DIRECTORY and not is_link
            if rules.exclude(absolute_path, is_dir=descend):
                continue

            display_path = os.path.join(display_dir, name)
            yield DiscoveredEntry(path=display_path, parent=display_dir, kind=kind, depth=depth)

            if descend and depth < self.max_depth:
                child_frame = self._enter(absolute_path, frame)
                yield from self._walk_directory(display_path, absolute_path, depth + 1, child_frame)


def _is_within(path: str, directory: str) -> bool:
    return path == directory or path.startswith(directory.rstrip(os.sep) + os.sep)
