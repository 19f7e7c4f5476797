"""Scanner cursor: the single matching primitive used by the parser."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass
class Cursor:
    """Read position over an immutable source string.

    try_match() either consumes a non-empty prefix at the current position
    or leaves the position untouched.
    """

    src: str
    pos: int = 0

    def try_match(self, pattern: re.Pattern[str]) -> re.Match[str] | None:
        m = pattern.match(self.src, self.pos)
        if m is None or m.end() == self.pos:
            return None
        self.pos = m.end()
        return m

    def location(self) -> tuple[int, int]:
        """1-based (line, column) of the first non-blank character ahead."""
        pos = self.pos
        while pos < len(self.src) and self.src[pos].isspace():
            pos += 1
        line = self.src.count("\n", 0, pos) + 1
        column = pos - (self.src.rfind("\n", 0, pos) + 1) + 1
        return line, column
