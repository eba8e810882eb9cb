from abc import ABC, abstractmethod
from typing import Optional, Sequence, Union

from treee.types import PathType


class BaseExclusionRules(ABC):
    """
    Interface shared by ignore-file rule sets.

    A rule set answers a query with one of three outcomes so that several sets can be
    stacked by precedence: the path is ignored (True), a ``!pattern`` line explicitly
    whitelists it (False), or the set has no opinion (None). Callers that only care
    whether a path is ignored use ``exclude()``.

    Example:
        >>> from treee.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> git_rules = GitIgnoreExclusionRules()
        >>> git_rules.add_rule('*.pyc')
        >>> git_rules.exclude('test.pyc')
        True
        >>> git_rules.match('test.py') is None
        True
    """

    @abstractmethod
    def match(self, path: str, is_dir: bool = False) -> Optional[bool]:
        """
        Look up the rules' verdict for a path.

        Args:
            path (str): Path relative to the directory the rules belong to, with forward
                slashes as separators.
            is_dir (bool): Whether the path names a directory. Directory-only rules
                (``build/``) apply only when this is True.

        Returns:
            Optional[bool]: True if ignored, False if whitelisted, None if no rule matches.
        """

    def exclude(self, path: str, is_dir: bool = False) -> bool:
        """Return True if the rules ignore ``path``."""
        return self.match(path, is_dir) is True

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Read rules from one or more files.

        Raises:
            NotImplementedError: Unless the subclass supports rule files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Append one rule.

        Raises:
            NotImplementedError: Unless the subclass supports single rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
