import pytest

from treee.types import FileType
from treee.walker.entry import DiscoveredEntry


def test_entry_properties():
    entry = DiscoveredEntry(path="./src/main.py", parent="./src", kind=FileType.FILE, depth=2)
    assert entry.name == "main.py"
    assert entry.is_file
    assert not entry.is_dir


def test_directory_entry():
    entry = DiscoveredEntry(path="/abs/root/pkg", parent="/abs/root", kind=FileType.DIRECTORY, depth=1)
    assert entry.name == "pkg"
    assert entry.is_dir
    assert not entry.is_file


def test_other_entries_are_neither_file_nor_directory():
    entry = DiscoveredEntry(path="./fifo", parent=".", kind=FileType.OTHER, depth=1)
    assert not entry.is_dir
    assert not entry.is_file


def test_entries_are_immutable():
    entry = DiscoveredEntry(path="./a", parent=".", kind=FileType.FILE, depth=1)
    with pytest.raises(AttributeError):
        entry.path = "./b"
