"""Token patterns for the reduced DOT dialect.

Every structural pattern begins with the same whitespace clause (_WS) and
is applied with Pattern.match() at the cursor position, so it can only
match at the start of the remaining text. Token text is exposed through
a named group where callers need more than the whole match.
"""

from __future__ import annotations

import re

_WS = r"\s*"

# ─── Header and blocks ───────────────────────────────────────────────────────

GRAPH_KIND_RE = re.compile(_WS + r"(?P<kind>(?i:digraph|graph))\b")
IDENTIFIER_RE = re.compile(_WS + r"(?P<name>[A-Za-z0-9]+)")
BLOCK_BEGIN_RE = re.compile(_WS + r"\{" + _WS)
BLOCK_END_RE = re.compile(_WS + r"\};?" + _WS)

# ─── Statements ──────────────────────────────────────────────────────────────

EDGE_OP_RE = re.compile(_WS + r"(?P<op>--|->)")
STATEMENT_END_RE = re.compile(_WS + r";" + _WS)

UNDIRECTED_OP = "--"
DIRECTED_OP = "->"

# ─── Attribute lists ─────────────────────────────────────────────────────────

ATTR_BEGIN_RE = re.compile(_WS + r"\[")
ATTR_END_RE = re.compile(_WS + r"\]")
ATTR_NAME_RE = re.compile(_WS + r"(?P<name>[A-Za-z0-9_]+)" + _WS + r"=")

_VALUE = (
    r"(?:"
    r"(?P<number>[+-]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?))"
    r"|(?P<bare>[A-Za-z0-9]+)"
    r'|"(?P<quoted>[^"]*)"'
    r")"
)

# tried first: the value closes the list
ATTR_VALUE_END_RE = re.compile(_WS + _VALUE + _WS + r"\]")
# the value is followed by another key=value pair
ATTR_VALUE_NEXT_RE = re.compile(_WS + _VALUE + _WS + r",")

# ─── Comments ────────────────────────────────────────────────────────────────

LINE_COMMENT_RE = re.compile(r"[ \t]*//[^\n]*(?:\n|$)", re.MULTILINE)
BLOCK_COMMENT_RE = re.compile(r"[ \t]*/\*.*?\*/(?:\n|$)?", re.DOTALL | re.MULTILINE)


def value_token(match: re.Match[str]) -> str:
    """Return the raw value text of an attribute value match, quotes removed."""
    for group in ("number", "bare", "quoted"):
        token = match.group(group)
        if token is not None:
            return token
    return ""
