"""Composite exclusion rules for stacking rule sets by precedence."""

from typing import Callable, List, Optional, Tuple

from .base_rules import BaseExclusionRules

# Maps an absolute path to the path the rule set expects, or None if it does not apply
PathMapper = Callable[[str], Optional[str]]


class CompositeExclusionRules(BaseExclusionRules):
    """Ordered stack of rule sets where the first decisive answer wins.

    Each constituent rule set is registered with a mapper that turns the path handed to
    ``match()`` into the relative path that rule set understands (ignore files are
    anchored to the directory that holds them). Rule sets are consulted in the order
    they were added, and the first one that ignores or whitelists the path settles the
    question. A whitelist from a higher-precedence rule set therefore overrides an
    ignore rule from a lower one.

    Attributes:
        rules (List[Tuple[BaseExclusionRules, PathMapper]]): Rule sets in precedence order.

    Example:
        >>> from treee.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> local, parent = GitIgnoreExclusionRules(), GitIgnoreExclusionRules()
        >>> local.add_rule("!keep.log")
        >>> parent.add_rule("*.log")
        >>> composite = CompositeExclusionRules()
        >>> composite.add_rule_object(local, lambda path: path)
        >>> composite.add_rule_object(parent, lambda path: path)
        >>> composite.match("keep.log")
        False
        >>> composite.match("other.log")
        True
    """

    def __init__(self) -> None:
        self.rules: List[Tuple[BaseExclusionRules, PathMapper]] = []

    def match(self, path: str, is_dir: bool = False) -> Optional[bool]:
        for rule, mapper in self.rules:
            mapped = mapper(path)
            if mapped is None:
                continue
            decision = rule.match(mapped, is_dir)
            if decision is not None:
                return decision
        return None

    def add_rule_object(self, rule: BaseExclusionRules, mapper: PathMapper) -> None:
        """Append a rule set with the lowest precedence so far.

        Raises:
            TypeError: If rule doesn't implement BaseExclusionRules.
        """
        if not isinstance(rule, BaseExclusionRules):
            raise TypeError(f"Rule must implement BaseExclusionRules, got {type(rule)}")
        self.rules.append((rule, mapper))
