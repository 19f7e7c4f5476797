"""dotgraph: parse a reduced DOT dialect into an attributed graph."""

from dotgraph.coerce import coerce, to_number
from dotgraph.config import SearchConfig
from dotgraph.errors import AttributeNotFoundError, CoercionError, DotSyntaxError
from dotgraph.ir.graph import AttributedGraph
from dotgraph.parser import parse, parse_file
from dotgraph.search import Vertex, heuristic_for, resolve_cost, resolve_heuristic, to_digraph
from dotgraph.syntax.comments import strip_comments
from dotgraph.types import AttributeValue, Bool, Float, Int, Text

__all__ = [
    "AttributeNotFoundError",
    "AttributeValue",
    "AttributedGraph",
    "Bool",
    "CoercionError",
    "DotSyntaxError",
    "Float",
    "Int",
    "SearchConfig",
    "Text",
    "Vertex",
    "coerce",
    "heuristic_for",
    "parse",
    "parse_file",
    "resolve_cost",
    "resolve_heuristic",
    "strip_comments",
    "to_digraph",
    "to_number",
]
