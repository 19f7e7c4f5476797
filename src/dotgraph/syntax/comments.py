"""Comment stripping pre-pass."""

from __future__ import annotations

from dotgraph.syntax.patterns import BLOCK_COMMENT_RE, LINE_COMMENT_RE


def strip_comments(text: str) -> str:
    """Remove // line comments, then /* */ block comments.

    Repeats until nothing changes: removing a block comment can join two
    slashes into a new line comment.
    """
    while True:
        stripped = LINE_COMMENT_RE.sub("", text)
        stripped = BLOCK_COMMENT_RE.sub("", stripped)
        if stripped == text:
            return stripped
        text = stripped
