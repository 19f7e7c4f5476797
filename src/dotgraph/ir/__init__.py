"""Intermediate representation: the attributed graph built by the parser."""

from dotgraph.ir.graph import DIGRAPH, GRAPH, AttributedGraph

__all__ = ["DIGRAPH", "GRAPH", "AttributedGraph"]
