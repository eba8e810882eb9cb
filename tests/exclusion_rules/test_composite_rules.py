"""Unit tests for composite exclusion rules."""

from typing import Optional

import pytest

from treee.exclusion_rules.base_rules import BaseExclusionRules
from treee.exclusion_rules.composite_rules import CompositeExclusionRules
from treee.exclusion_rules.git_rules import GitIgnoreExclusionRules


class MockExclusionRules(BaseExclusionRules):
    """Mock exclusion rules answering from fixed sets."""

    def __init__(self, ignored=(), whitelisted=()):
        self.ignored = set(ignored)
        self.whitelisted = set(whitelisted)
        self.seen = []

    def match(self, path: str, is_dir: bool = False) -> Optional[bool]:
        self.seen.append((path, is_dir))
        if path in self.whitelisted:
            return False
        if path in self.ignored:
            return True
        return None


def git_rules(*lines):
    rules = GitIgnoreExclusionRules()
    for line in lines:
        rules.add_rule(line)
    return rules


def unchanged(path):
    return path


def stack(*rule_sets):
    composite = CompositeExclusionRules()
    for rules in rule_sets:
        composite.add_rule_object(rules, unchanged)
    return composite


class TestCompositeExclusionRules:
    """Test the CompositeExclusionRules class."""

    def test_empty_composite_has_no_opinion(self):
        composite = CompositeExclusionRules()
        assert composite.match("anything") is None
        assert not composite.exclude("anything")
        assert composite.rules == []

    def test_first_decisive_rule_wins(self):
        high = MockExclusionRules(whitelisted={"keep.log"})
        low = MockExclusionRules(ignored={"keep.log", "drop.log"})
        composite = stack(high, low)

        assert composite.match("keep.log") is False
        assert composite.match("drop.log") is True
        assert composite.match("other.log") is None

    def test_later_rules_not_consulted_after_decision(self):
        high = MockExclusionRules(ignored={"a"})
        low = MockExclusionRules()
        composite = stack(high, low)

        composite.match("a")
        assert low.seen == []

    def test_is_dir_is_forwarded(self):
        rules = MockExclusionRules()
        stack(rules).match("build", is_dir=True)
        assert rules.seen == [("build", True)]

    def test_mapper_translates_paths(self):
        composite = CompositeExclusionRules()
        composite.add_rule_object(git_rules("docs/*.md"), lambda p: p[len("/repo/"):])
        assert composite.exclude("/repo/docs/index.md")
        assert not composite.exclude("/repo/index.md")

    def test_mapper_returning_none_skips_rule_set(self):
        rules = MockExclusionRules(ignored={"x"})
        composite = CompositeExclusionRules()
        composite.add_rule_object(rules, lambda p: None)
        assert composite.match("x") is None
        assert rules.seen == []

    def test_add_rule_object_appends_lowest_precedence(self):
        composite = stack(git_rules("*.log"))
        composite.add_rule_object(git_rules("!*.log"), unchanged)
        assert composite.exclude("app.log")
        assert len(composite.rules) == 2

    def test_invalid_rule_type(self):
        with pytest.raises(TypeError, match="Rule must implement BaseExclusionRules"):
            CompositeExclusionRules().add_rule_object("not a rule", unchanged)


def test_base_rules_optional_capabilities():
    rules = MockExclusionRules()
    with pytest.raises(NotImplementedError, match="MockExclusionRules doesn't support loading"):
        rules.load_rules("rules.txt")
    with pytest.raises(NotImplementedError, match="MockExclusionRules doesn't support adding"):
        rules.add_rule("*.log")
