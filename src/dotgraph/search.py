"""Search adapter — exposes graph vertices as opaque searchable states.

Vertex wraps a name plus a back-reference to its graph and offers the
neighbors/cost/heuristic surface search code expects. to_digraph() exports
the graph to networkx so its search algorithms can run over it.
"""

from __future__ import annotations

from collections.abc import Callable

import networkx as nx

from dotgraph.coerce import to_number
from dotgraph.errors import AttributeNotFoundError, CoercionError
from dotgraph.ir.graph import AttributedGraph


class Vertex:
    """A named vertex bound to its graph. Equal when the names match."""

    def __init__(self, name: str, graph: AttributedGraph) -> None:
        self.name = name
        self.graph = graph

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Vertex({self.name!r})"

    def neighbors(self) -> list[Vertex]:
        return [Vertex(name, self.graph) for name in self.graph.neighbors(self.name)]

    def cost(self, target: Vertex) -> float:
        """Cost of moving to target; the configured default when unresolvable."""
        try:
            return resolve_cost(self.graph, self.name, target.name)
        except (AttributeNotFoundError, CoercionError):
            return self.graph.search.default_cost

    def heuristic(self) -> float:
        """Heuristic estimate for this vertex; the configured default when unresolvable."""
        try:
            return resolve_heuristic(self.graph, self.name)
        except (AttributeNotFoundError, CoercionError):
            return self.graph.search.default_heuristic


def resolve_cost(graph: AttributedGraph, origin: str, target: str) -> float:
    """Resolve the cost of origin -> target.

    Uses graph.search.cost_func when set, else the edge attribute named by
    graph.search.cost_key, else graph.search.default_cost.

    Raises:
        AttributeNotFoundError: The cost key is configured but not set on the edge.
        CoercionError: The cost attribute is not numeric.
    """
    config = graph.search
    if config.cost_func is not None:
        return config.cost_func(Vertex(origin, graph), Vertex(target, graph))
    if config.cost_key:
        return to_number(graph.get_edge_attribute(origin, target, config.cost_key))
    return config.default_cost


def resolve_heuristic(graph: AttributedGraph, vertex: str) -> float:
    """Resolve the heuristic of a vertex, analogous to resolve_cost()."""
    config = graph.search
    if config.heuristic_func is not None:
        return config.heuristic_func(Vertex(vertex, graph))
    if config.heuristic_key:
        return to_number(graph.get_vertex_attribute(vertex, config.heuristic_key))
    return config.default_heuristic


def to_digraph(graph: AttributedGraph) -> nx.DiGraph:
    """Export to a networkx DiGraph.

    Node and edge data carry the attribute values; every edge also gets a
    "weight" from Vertex.cost(). Duplicate edges collapse into one.
    """
    digraph: nx.DiGraph = nx.DiGraph(name=graph.name)
    for name in graph.vertices():
        digraph.add_node(name, attributes=dict(graph.vertex_attributes.get(name, {})))
    for name in graph.vertices():
        vertex = Vertex(name, graph)
        for neighbor in vertex.neighbors():
            data = dict(graph.edge_attributes.get(name, {}).get(neighbor.name, {}))
            digraph.add_edge(name, neighbor.name, attributes=data, weight=vertex.cost(neighbor))
    return digraph


def heuristic_for(graph: AttributedGraph) -> Callable[[str, str], float]:
    """Build a networkx heuristic h(u, v) from the vertex heuristics of u.

    The heuristic is goal-agnostic, so v is ignored.
    """

    def h(u: str, _v: str) -> float:
        return Vertex(u, graph).heuristic()

    return h
