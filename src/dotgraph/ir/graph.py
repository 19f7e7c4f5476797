"""Attributed graph — adjacency lists plus per-vertex and per-edge attributes.

Vertices are identified by name. Undirected edges are stored as two mirrored
directed entries; whether a given write is mirrored is decided by the
`undirected` flag of that call, not by the graph kind.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dotgraph.config import SearchConfig
from dotgraph.errors import AttributeNotFoundError
from dotgraph.types import Attributes, AttributeValue

GRAPH = "graph"
DIGRAPH = "digraph"


@dataclass
class AttributedGraph:
    name: str = ""
    kind: str = DIGRAPH
    adjacency: dict[str, list[str]] = field(default_factory=dict)
    vertex_attributes: dict[str, Attributes] = field(default_factory=dict)
    edge_attributes: dict[str, dict[str, Attributes]] = field(default_factory=dict)
    search: SearchConfig = field(default_factory=SearchConfig)

    @property
    def is_directed(self) -> bool:
        return self.kind == DIGRAPH

    # ── Topology ──────────────────────────────────────────────────────────────

    def add_vertex(self, vertex: str) -> None:
        self.adjacency.setdefault(vertex, [])

    def add_edge(self, origin: str, target: str, undirected: bool) -> None:
        """Append target to origin's successors; mirror when undirected.

        Duplicate edges are kept.
        """
        self.add_vertex(target)
        self.adjacency.setdefault(origin, []).append(target)
        if undirected:
            self.adjacency[target].append(origin)

    def has_vertex(self, vertex: str) -> bool:
        return vertex in self.adjacency

    def vertices(self) -> list[str]:
        """Vertex names in discovery order."""
        return list(self.adjacency)

    def neighbors(self, vertex: str) -> list[str]:
        """Ordered successor names; empty for unknown or sink vertices."""
        return list(self.adjacency.get(vertex, []))

    def edge_count(self) -> int:
        return sum(len(targets) for targets in self.adjacency.values())

    # ── Vertex attributes ─────────────────────────────────────────────────────

    def set_vertex_attribute(self, vertex: str, key: str, value: AttributeValue) -> None:
        self.vertex_attributes.setdefault(vertex, {})[key] = value

    def update_vertex_attributes(self, vertex: str, attributes: Attributes) -> None:
        """Merge attributes into the vertex's map; later keys win. No-op if empty."""
        for key, value in attributes.items():
            self.set_vertex_attribute(vertex, key, value)

    def get_vertex_attributes(self, vertex: str) -> Attributes:
        if vertex not in self.vertex_attributes:
            raise AttributeNotFoundError(f"vertex {vertex}: vertex has no attributes")
        return dict(self.vertex_attributes[vertex])

    def get_vertex_attribute(self, vertex: str, key: str) -> AttributeValue:
        if vertex not in self.vertex_attributes:
            raise AttributeNotFoundError(f"vertex {vertex}: vertex has no attributes")
        attributes = self.vertex_attributes[vertex]
        if key not in attributes:
            raise AttributeNotFoundError(f"vertex {vertex}: attribute {key} not found")
        return attributes[key]

    # ── Edge attributes ───────────────────────────────────────────────────────

    def set_edge_attributes(self, origin: str, target: str, undirected: bool, attributes: Attributes) -> None:
        """Replace the origin -> target attribute map wholesale.

        Does nothing for an empty map. When undirected, target -> origin gets
        an identical (but separate) copy.
        """
        if not attributes:
            return
        self.edge_attributes.setdefault(origin, {})[target] = dict(attributes)
        if undirected:
            self.set_edge_attributes(target, origin, False, attributes)

    def get_edge_attributes(self, origin: str, target: str) -> Attributes:
        return dict(self._edge_map(origin, target))

    def set_edge_attribute(self, origin: str, target: str, undirected: bool, key: str, value: AttributeValue) -> None:
        self.edge_attributes.setdefault(origin, {}).setdefault(target, {})[key] = value
        if undirected:
            self.set_edge_attribute(target, origin, False, key, value)

    def get_edge_attribute(self, origin: str, target: str, key: str) -> AttributeValue:
        attributes = self._edge_map(origin, target)
        if key not in attributes:
            raise AttributeNotFoundError(f"edge {origin} -> {target}: attribute {key} not found")
        return attributes[key]

    def _edge_map(self, origin: str, target: str) -> Attributes:
        targets = self.edge_attributes.get(origin)
        if targets is None:
            raise AttributeNotFoundError(f"edge {origin} -> {target}: origin has no edge attributes")
        if target not in targets:
            raise AttributeNotFoundError(f"edge {origin} -> {target}: connection has no attributes")
        return targets[target]
