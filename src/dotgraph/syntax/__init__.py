"""Lexical layer: pattern catalog, scanner cursor and comment stripping."""

from dotgraph.syntax.comments import strip_comments
from dotgraph.syntax.scanner import Cursor

__all__ = ["Cursor", "strip_comments"]
