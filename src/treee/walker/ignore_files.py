"""Location and loading of the ignore files consulted during traversal."""

import os
import re
from pathlib import Path
from typing import List, Optional

from treee.exclusion_rules.git_rules import GitIgnoreExclusionRules

IGNORE_FILENAME = ".ignore"
GITIGNORE_FILENAME = ".gitignore"

_SECTION_RE = re.compile(r'^\s*\[\s*([A-Za-z0-9.-]+)(?:\s+"[^"]*")?\s*\]')
_EXCLUDES_FILE_RE = re.compile(r"^\s*excludesfile\s*=\s*(.*?)\s*$", re.IGNORECASE)


def is_repository(directory: str) -> bool:
    """Return True if ``directory`` holds a ``.git`` directory or gitdir file."""
    return os.path.exists(os.path.join(directory, ".git"))


def find_repository_root(directory: str) -> Optional[str]:
    """Find the closest directory at or above ``directory`` that is a git repository.

    Args:
        directory: Absolute path to start searching from.

    Returns:
        The repository's top-level directory, or None outside a repository.
    """
    current = directory
    while True:
        if is_repository(current):
            return current
        parent = os.path.dirname(current)
        if parent == current:
            return None
        current = parent


def load_rules(path: str) -> Optional[GitIgnoreExclusionRules]:
    """Load an ignore file if it exists and holds any rules.

    Unreadable files are treated as absent.

    Args:
        path: The ignore file to read.

    Returns:
        The loaded rules, or None if there is nothing to apply.
    """
    if not os.path.isfile(path):
        return None
    try:
        rules = GitIgnoreExclusionRules(path)
    except OSError:
        return None
    return rules if rules.has_rules() else None


def repository_exclude_rules(repository: str) -> Optional[GitIgnoreExclusionRules]:
    """Load ``.git/info/exclude`` for the repository rooted at ``repository``."""
    return load_rules(os.path.join(repository, ".git", "info", "exclude"))


def _config_home() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def _read_excludes_file_setting(config_file: Path) -> Optional[str]:
    try:
        lines = config_file.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError:
        return None

    section = ""
    value: Optional[str] = None
    for line in lines:
        section_match = _SECTION_RE.match(line)
        if section_match:
            section = section_match.group(1).lower()
            continue
        if section != "core":
            continue
        setting = _EXCLUDES_FILE_RE.match(line)
        if setting:
            value = setting.group(1).strip('"')
    return value


def global_excludes_file() -> Optional[Path]:
    """Locate git's global excludes file.

    ``core.excludesFile`` is read from ``$XDG_CONFIG_HOME/git/config`` and then
    ``~/.gitconfig`` (the latter wins, as with git). Without a setting the XDG default
    ``$XDG_CONFIG_HOME/git/ignore`` is used.

    Returns:
        Path to the excludes file, whether or not it exists. None if the home
        directory cannot be determined.
    """
    try:
        config_home = _config_home()
        home = Path.home()
    except RuntimeError:
        return None

    config_files: List[Path] = [config_home / "git" / "config", home / ".gitconfig"]

    configured: Optional[str] = None
    for config_file in config_files:
        value = _read_excludes_file_setting(config_file)
        if value:
            configured = value

    if configured:
        return Path(os.path.expanduser(configured))
    return config_home / "git" / "ignore"


def global_rules() -> Optional[GitIgnoreExclusionRules]:
    """Load git's global excludes file, if one is configured and present."""
    excludes = global_excludes_file()
    if excludes is None:
        return None
    return load_rules(str(excludes))
