import argparse

import pytest

from treee.config import TreeConfig


def test_defaults():
    config = TreeConfig()
    assert config.path == "."
    assert config.max_depth == 10
    assert not config.show_hidden
    assert not config.use_color
    assert config.use_ignore_rules
    assert config.include_patterns == ()


def test_immutable():
    config = TreeConfig()
    with pytest.raises(AttributeError):
        config.max_depth = 3


def test_conflicting_kind_filters():
    with pytest.raises(ValueError, match="mutually exclusive"):
        TreeConfig(directories_only=True, files_only=True)


def test_negative_depth():
    with pytest.raises(ValueError, match="must not be negative"):
        TreeConfig(max_depth=-1)


def test_from_args():
    args = argparse.Namespace(
        path="src",
        depth=3,
        all=True,
        no_color=False,
        directories_only=False,
        files_only=True,
        include=["*.py"],
        exclude=["test_*", "*.pyc"],
        pattern=[],
        no_git_ignore=True,
        full_path=True,
    )
    config = TreeConfig.from_args(args, use_color=True)

    assert config == TreeConfig(
        path="src",
        max_depth=3,
        show_hidden=True,
        use_color=True,
        files_only=True,
        include_patterns=("*.py",),
        exclude_patterns=("test_*", "*.pyc"),
        use_ignore_rules=False,
        full_path=True,
    )
