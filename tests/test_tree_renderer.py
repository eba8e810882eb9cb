"""Unit tests for tree and full-path rendering."""

import pytest

from treee.tree_assembler import build_parent_index
from treee.tree_renderer import (
    BRANCH,
    DIRECTORY_STYLE,
    LAST_BRANCH,
    SPACER,
    VERTICAL,
    TreeRenderer,
    root_display_name,
)
from treee.types import FileType
from treee.walker.entry import DiscoveredEntry


def entry(path, kind=FileType.FILE):
    parent, _, _ = path.rpartition("/")
    return DiscoveredEntry(path, parent, kind, path.count("/"))


def directory(path):
    return entry(path, FileType.DIRECTORY)


def render(renderer, index):
    """Collect every output line the way the listing streams them."""
    lines = list(renderer.render_entries(index))
    return lines if renderer.full_path else [renderer.root_line(index.root)] + lines


@pytest.fixture
def simple_index():
    return build_parent_index([entry("root/a.txt"), directory("root/b"), entry("root/b/c.txt")], "root")


@pytest.fixture
def nested_index():
    return build_parent_index(
        [
            directory("proj/src"),
            directory("proj/src/pkg"),
            entry("proj/src/pkg/mod.py"),
            entry("proj/src/main.py"),
            directory("proj/tests"),
            entry("proj/tests/test_main.py"),
            entry("proj/setup.py"),
        ],
        "proj",
    )


def test_simple_tree(simple_index):
    assert render(TreeRenderer(), simple_index) == [
        "root",
        "├── a.txt",
        "└── b",
        "    └── c.txt",
    ]


def test_nested_tree_connectors(nested_index):
    assert render(TreeRenderer(), nested_index) == [
        "proj",
        "├── setup.py",
        "├── src",
        "│   ├── main.py",
        "│   └── pkg",
        "│       └── mod.py",
        "└── tests",
        "    └── test_main.py",
    ]


def test_only_last_sibling_uses_terminal_connector(nested_index):
    lines = list(TreeRenderer().render_entries(nested_index))
    top_level = [line for line in lines if line.startswith((BRANCH, LAST_BRANCH))]
    assert [line.startswith(LAST_BRANCH) for line in top_level] == [False, False, True]


def test_full_path_mode(simple_index):
    assert render(TreeRenderer(full_path=True), simple_index) == [
        "root/a.txt",
        "root/b",
        "root/b/c.txt",
    ]


def test_full_path_mode_keeps_depth_first_order(nested_index):
    lines = render(TreeRenderer(full_path=True), nested_index)
    assert lines == [
        "proj/setup.py",
        "proj/src",
        "proj/src/main.py",
        "proj/src/pkg",
        "proj/src/pkg/mod.py",
        "proj/tests",
        "proj/tests/test_main.py",
    ]
    for line in lines:
        assert not any(token in line for token in (BRANCH, LAST_BRANCH, VERTICAL))


def test_directories_colored_files_plain(simple_index):
    lines = render(TreeRenderer(use_color=True), simple_index)
    assert lines[0] == DIRECTORY_STYLE.render("root")
    assert lines[1] == "├── a.txt"
    assert lines[2] == "└── " + DIRECTORY_STYLE.render("b")
    assert "\x1b[" in lines[2]
    assert lines[3] == "    └── c.txt"


def test_full_path_colors_directories_only(simple_index):
    lines = render(TreeRenderer(use_color=True, full_path=True), simple_index)
    assert lines == ["root/a.txt", DIRECTORY_STYLE.render("root/b"), "root/b/c.txt"]


def test_child_prefix():
    renderer = TreeRenderer()
    assert renderer.child_prefix("", is_last=True) == SPACER
    assert renderer.child_prefix("", is_last=False) == VERTICAL
    assert renderer.child_prefix(VERTICAL, is_last=True) == VERTICAL + SPACER
    assert TreeRenderer(full_path=True).child_prefix(VERTICAL, is_last=False) == ""


def test_empty_directory_renders_root_only():
    index = build_parent_index([], "empty")
    assert render(TreeRenderer(), index) == ["empty"]
    assert render(TreeRenderer(full_path=True), index) == []


def test_directory_without_children_is_still_listed():
    index = build_parent_index([directory("r/empty"), entry("r/z.txt")], "r")
    assert list(TreeRenderer().render_entries(index)) == ["├── empty", "└── z.txt"]


@pytest.mark.parametrize(
    "root,expected",
    [
        ("project", "project"),
        ("/home/user/project", "project"),
        ("project/", "project"),
        (".", "."),
        ("..", ".."),
        ("x/..", "x/.."),
        ("/srv/app/../", "/srv/app/../"),
        ("/", "/"),
    ],
)
def test_root_display_name(root, expected):
    assert root_display_name(root) == expected
