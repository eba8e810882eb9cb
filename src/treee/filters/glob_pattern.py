"""Compilation of Unix shell glob patterns into regular expressions."""

import re
from typing import List, Pattern, Tuple

from treee.exceptions import PatternError

ERROR_WILDCARDS = "wildcards are either regular `*` or recursive `**`"
ERROR_RECURSIVE_WILDCARDS = "recursive wildcards must form a single path component"
ERROR_INVALID_RANGE = "invalid range pattern"


class GlobPattern:
    """A compiled shell glob pattern.

    Supported syntax:
    - ``?`` matches any single character
    - ``*`` matches any sequence of characters, path separators included
    - ``**`` as a whole path component matches any number of directories;
      ``**/`` may also match nothing at all
    - ``[abc]``, ``[a-z]`` and ``[!abc]`` character classes; a ``]`` right after
      the opening ``[`` or ``[!`` is taken literally

    Matching is case-sensitive and must cover the whole text. Every other
    character, backslash included, matches itself.

    Attributes:
        pattern (str): The original pattern text.

    Example:
        >>> GlobPattern("*.py").matches("setup.py")
        True
        >>> GlobPattern("src/**/*.py").matches("src/main.py")
        True
        >>> GlobPattern("[!a]*").matches("abc")
        False
    """

    def __init__(self, pattern: str) -> None:
        """Compile a glob pattern.

        Args:
            pattern: The glob pattern text.

        Raises:
            PatternError: If the pattern is malformed.
        """
        self.pattern = pattern
        self._regex: Pattern[str] = re.compile(self._translate(pattern), re.DOTALL)

    def matches(self, text: str) -> bool:
        """Return True if the whole of ``text`` matches this pattern."""
        return self._regex.fullmatch(text) is not None

    def __repr__(self) -> str:
        return f"GlobPattern({self.pattern!r})"

    @staticmethod
    def _translate(pattern: str) -> str:
        parts: List[str] = []
        i = 0
        n = len(pattern)

        while i < n:
            char = pattern[i]

            if char == "?":
                parts.append(".")
                i += 1
            elif char == "*":
                run = 0
                while i + run < n and pattern[i + run] == "*":
                    run += 1

                if run > 2:
                    raise PatternError(pattern, i + 2, ERROR_WILDCARDS)

                if run == 1:
                    parts.append(".*")
                    i += 1
                    continue

                # "**" must stand alone between separators
                starts_component = i == 0 or pattern[i - 1] == "/"
                end = i + 2
                if not starts_component or (end < n and pattern[end] != "/"):
                    raise PatternError(pattern, i, ERROR_RECURSIVE_WILDCARDS)

                if end < n:
                    parts.append("(?:.*/)?")
                    i = end + 1
                else:
                    parts.append(".*")
                    i = end
            elif char == "[":
                regex_class, i = GlobPattern._translate_class(pattern, i)
                parts.append(regex_class)
            else:
                parts.append(re.escape(char))
                i += 1

        return "".join(parts)

    @staticmethod
    def _translate_class(pattern: str, start: int) -> Tuple[str, int]:
        """Translate the character class opening at ``start``.

        Returns:
            The regular expression class and the index just past the closing bracket.
        """
        n = len(pattern)
        j = start + 1
        negated = j < n and pattern[j] == "!"
        if negated:
            j += 1

        # A leading "]" is a member, not the terminator
        close = pattern.find("]", j + 1 if j < n and pattern[j] == "]" else j)
        if close == -1:
            raise PatternError(pattern, start, ERROR_INVALID_RANGE)

        members = pattern[j:close]
        items: List[str] = []
        k = 0
        while k < len(members):
            low = members[k]
            if k + 2 < len(members) and members[k + 1] == "-":
                high = members[k + 2]
                # A reversed range is accepted but contains no characters
                if low <= high:
                    items.append(f"{re.escape(low)}-{re.escape(high)}")
                k += 3
            else:
                items.append(re.escape(low))
                k += 1

        if not items:
            return ("." if negated else "(?!)"), close + 1
        return f"[{'^' if negated else ''}{''.join(items)}]", close + 1
