"""Human-readable listing of a parsed graph's attributes."""

from __future__ import annotations

from dotgraph.ir.graph import AttributedGraph


def format_graph(graph: AttributedGraph) -> str:
    """List every vertex with its attributes, then every attributed edge."""
    lines: list[str] = []
    for vertex in graph.vertices():
        lines.append(f" Vertex {vertex}:")
        attributes = graph.vertex_attributes.get(vertex)
        if attributes:
            for key, value in attributes.items():
                lines.append(f"\t{key}: {value}")
        else:
            lines.append("\t<no attributes>")
        lines.append("")

    for vertex in graph.vertices():
        seen: set[str] = set()
        for neighbor in graph.neighbors(vertex):
            if neighbor in seen:
                continue
            seen.add(neighbor)
            attributes = graph.edge_attributes.get(vertex, {}).get(neighbor)
            if not attributes:
                continue
            lines.append(f" Edge {vertex} -> {neighbor}:")
            for key, value in attributes.items():
                lines.append(f"\t{key}: {value}")
            lines.append("")
    return "\n".join(lines)
