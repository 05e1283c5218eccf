"""
builder.py — Graph Construction Entry Point
===========================================
Builds any representation from already-validated labels and edges.  The
HTTP layer (and tests) go through here rather than instantiating the
storage classes directly.

    g = build_graph(["A", "B", "C"], [("A", "B"), ("B", "C", False, 2)])
"""

from typing import Dict, Hashable, Iterable, Type

from graph.adjacency import AdjacencyListGraph
from graph.graph import Graph
from graph.incidence import IncidenceMatrixGraph
from graph.matrix import AdjacencyMatrixGraph


REPRESENTATIONS: Dict[str, Type[Graph]] = {
    AdjacencyListGraph.representation:   AdjacencyListGraph,
    AdjacencyMatrixGraph.representation: AdjacencyMatrixGraph,
    IncidenceMatrixGraph.representation: IncidenceMatrixGraph,
}


def graph_class(representation: str) -> Type[Graph]:
    try:
        return REPRESENTATIONS[representation]
    except (KeyError, TypeError):
        raise ValueError(
            f"Unknown representation '{representation}' "
            f"(expected one of: {', '.join(REPRESENTATIONS)})"
        ) from None


def build_graph(
    vertex_labels: Iterable[Hashable],
    edges: Iterable = (),
    representation: str = "list",
    directed: bool = False,
) -> Graph:
    """
    Construct a graph in one call.

    Each edge is an Edge, a dict, or a tuple `(a, b[, directed[, multiplicity]])`.
    Construction errors (DuplicateVertex, UnknownVertex, DuplicateEdge …)
    propagate unchanged; nothing is repaired.
    """
    g = graph_class(representation)(vertices=vertex_labels, directed=directed)
    g.add_edges(edges)
    return g


def graph_from_dict(data: dict) -> Graph:
    """Inverse of Graph.to_dict()."""
    return graph_class(data.get("representation", "list")).from_dict(data)
