"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from pathspec.patterns import GitWildMatchPattern  # type: ignore

from treee.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    Patterns are compiled with the pathspec library so they behave the way Git treats
    them:
    - Basic globs (*, ?, [abc], [0-9], etc.)
    - Directory-specific patterns (ending in /)
    - Negation patterns (starting with !)
    - Double-asterisk matching (**)
    - Comment lines (starting with #)

    The last pattern that matches a path decides its fate, so a later ``!important.log``
    re-includes a file an earlier ``*.log`` ignored. Lines that pathspec rejects are
    skipped, the remaining lines of the file still apply.

    Attributes:
        patterns (List[GitWildMatchPattern]): Compiled patterns in file order.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("!keep.log")
        >>> rules.add_rule("build/")
        >>> rules.match("app.log")
        True
        >>> rules.match("keep.log")
        False
        >>> rules.match("build", is_dir=True)
        True
        >>> rules.match("build") is None
        True

    Note:
        The paths provided to match() should use forward slashes (/) as path separators,
        even on Windows systems, to match Git's behavior.
    """

    def __init__(
        self,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
    ):
        """Initialize GitIgnoreExclusionRules with patterns from specified files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.patterns: List[GitWildMatchPattern] = []

        if rules_files is not None:
            self.load_rules(rules_files)

    def match(self, path: str, is_dir: bool = False) -> Optional[bool]:
        if is_dir and not path.endswith("/"):
            path += "/"

        for pattern in reversed(self.patterns):
            if pattern.include is None or pattern.regex is None:
                continue
            if pattern.regex.match(path):
                return bool(pattern.include)
        return None

    def has_rules(self) -> bool:
        """Return True if at least one effective pattern is loaded."""
        return any(pattern.include is not None for pattern in self.patterns)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and append .gitignore patterns from one or more files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r", encoding="utf-8", errors="replace") as f:
                self._add_lines(f.read().splitlines())

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern directly.

        Args:
            rule: A single .gitignore pattern (e.g., "*.pyc", "node_modules/", "!important.txt").
        """
        self._add_lines([rule])

    def _add_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            try:
                self.patterns.append(GitWildMatchPattern(line))
            except ValueError:
                # pathspec raises GitWildMatchPatternError (a ValueError) for lines git ignores too
                continue
