"""DOT parser — single-pass scanner over the comment-stripped source.

Grammar (reduced dialect):

    (di)?graph <id> {
      ( <id> [attrs]? (-- | ->) [attrs]? ( <id> [attrs]? | { (<id> [attrs]?)* } ) ;? )*
    }

Every mandatory element that fails to match raises DotSyntaxError and the
partially built graph is dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from dotgraph.coerce import coerce
from dotgraph.errors import DotSyntaxError
from dotgraph.ir.graph import AttributedGraph
from dotgraph.syntax.comments import strip_comments
from dotgraph.syntax.patterns import (
    ATTR_BEGIN_RE,
    ATTR_END_RE,
    ATTR_NAME_RE,
    ATTR_VALUE_END_RE,
    ATTR_VALUE_NEXT_RE,
    BLOCK_BEGIN_RE,
    BLOCK_END_RE,
    EDGE_OP_RE,
    GRAPH_KIND_RE,
    IDENTIFIER_RE,
    STATEMENT_END_RE,
    UNDIRECTED_OP,
    value_token,
)
from dotgraph.syntax.scanner import Cursor
from dotgraph.types import Attributes

logger = logging.getLogger("dotgraph.parser")


@dataclass
class _Parser:
    """Stateful parser driving a Cursor and filling an AttributedGraph."""

    cursor: Cursor
    verbose: bool = False
    graph: AttributedGraph = field(default_factory=AttributedGraph)

    # ── Primitive helpers ─────────────────────────────────────────────────────

    def trace(self, token: str) -> None:
        if self.verbose:
            logger.info("[ %s ]", token)

    def fail(self, message: str) -> DotSyntaxError:
        line, column = self.cursor.location()
        logger.debug("syntax error at %d:%d: %s", line, column, message)
        return DotSyntaxError(message, line, column)

    # ── Header ────────────────────────────────────────────────────────────────

    def parse_header(self) -> None:
        m = self.cursor.try_match(GRAPH_KIND_RE)
        if m is None:
            raise self.fail("GRAPH TYPE could not be parsed")
        self.graph.kind = m.group("kind").lower()
        self.trace("TYPE " + m.group("kind"))

        m = self.cursor.try_match(IDENTIFIER_RE)
        if m is None:
            raise self.fail("GRAPH NAME could not be parsed")
        self.graph.name = m.group("name")
        self.trace("NAME " + self.graph.name)

        if self.cursor.try_match(BLOCK_BEGIN_RE) is None:
            raise self.fail("BLOCK BEGIN missing")
        self.trace("--- BLOCK BEGIN found ---")

    # ── Names and edge operator ───────────────────────────────────────────────

    def parse_vertex_name(self, is_target: bool = False) -> str:
        name = self.try_parse_vertex_name(is_target)
        if name is None:
            raise self.fail("TARGET NAME could not be parsed" if is_target else "VERTEX NAME could not be parsed")
        return name

    def try_parse_vertex_name(self, is_target: bool = False) -> str | None:
        m = self.cursor.try_match(IDENTIFIER_RE)
        if m is None:
            return None
        name = m.group("name")
        self.trace(("TARGET VERTEX NAME " if is_target else "VERTEX NAME ") + name)
        return name

    def parse_edge_op(self) -> bool:
        """Consume an edge operator. Returns True for an undirected edge."""
        m = self.cursor.try_match(EDGE_OP_RE)
        if m is None:
            raise self.fail("EDGE TYPE could not be parsed")
        op = m.group("op")
        self.trace("EDGE TYPE " + op)
        return op == UNDIRECTED_OP

    # ── Attribute lists ───────────────────────────────────────────────────────

    def try_parse_attributes(self) -> Attributes | None:
        """Parse an optional `[k=v, ...]` list. None when no list is present."""
        if self.cursor.try_match(ATTR_BEGIN_RE) is None:
            return None
        attributes: Attributes = {}
        if self.cursor.try_match(ATTR_END_RE) is not None:
            return attributes
        while True:
            m = self.cursor.try_match(ATTR_NAME_RE)
            if m is None:
                raise self.fail("ATTRIBUTE section expected attribute name")
            key = m.group("name")
            self.trace("\tATTRIBUTE " + key)

            m = self.cursor.try_match(ATTR_VALUE_END_RE)
            if m is not None:
                raw = value_token(m)
                self.trace("\tVALUE " + raw)
                attributes[key] = coerce(raw)
                return attributes

            m = self.cursor.try_match(ATTR_VALUE_NEXT_RE)
            if m is None:
                raise self.fail("ATTRIBUTE section is neither ended nor continued")
            raw = value_token(m)
            self.trace("\tVALUE " + raw)
            attributes[key] = coerce(raw)

    def parse_vertex_attributes(self, vertex: str) -> None:
        attributes = self.try_parse_attributes()
        if attributes:
            self.graph.update_vertex_attributes(vertex, attributes)

    # ── Targets ───────────────────────────────────────────────────────────────

    def parse_target_block(self, source: str, undirected: bool) -> list[str]:
        """Parse `{ t1 [attrs]? t2 ... }` after the opening brace was consumed."""
        self.trace(" --- Beginning multiple target specification ---")
        targets: list[str] = []
        while self.cursor.try_match(BLOCK_END_RE) is None:
            target = self.parse_vertex_name(is_target=True)
            self.graph.add_edge(source, target, undirected)
            targets.append(target)
            self.parse_vertex_attributes(target)
        self.trace(" --- Ending multiple target specification ---")
        return targets

    # ── Statement ─────────────────────────────────────────────────────────────

    def parse_statement(self) -> None:
        source = self.parse_vertex_name()
        self.graph.add_vertex(source)
        self.parse_vertex_attributes(source)

        undirected = self.parse_edge_op()
        # edge attributes wait until the target set is known
        edge_attributes = self.try_parse_attributes() or {}

        target = self.try_parse_vertex_name(is_target=True)
        if target is not None:
            self.graph.add_edge(source, target, undirected)
            self.graph.set_edge_attributes(source, target, undirected, edge_attributes)
            self.parse_vertex_attributes(target)
        else:
            if self.cursor.try_match(BLOCK_BEGIN_RE) is None:
                raise self.fail("TARGET NAME could not be parsed")
            for target in self.parse_target_block(source, undirected):
                self.graph.set_edge_attributes(source, target, undirected, edge_attributes)

        self.cursor.try_match(STATEMENT_END_RE)

    # ── Top-level parse ───────────────────────────────────────────────────────

    def parse_graph(self) -> AttributedGraph:
        self.parse_header()
        while self.cursor.try_match(BLOCK_END_RE) is None:
            self.parse_statement()
        self.trace("--- BLOCK END found ---")
        return self.graph


# ─── Public API ──────────────────────────────────────────────────────────────


def parse(text: str, verbose: bool = False) -> AttributedGraph:
    """Parse DOT source text into an AttributedGraph.

    Args:
        text: DOT source.
        verbose: Log every recognized token on the "dotgraph.parser" logger.

    Raises:
        DotSyntaxError: If a mandatory grammar element is missing.
    """
    p = _Parser(cursor=Cursor(src=strip_comments(text)), verbose=verbose)
    return p.parse_graph()


def parse_file(path: str | Path, verbose: bool = False) -> AttributedGraph:
    """Read a .dot file and parse it. OSError propagates to the caller."""
    text = Path(path).read_text(encoding="utf-8")
    return parse(text, verbose)
