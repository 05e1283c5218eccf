"""
graph/
-----
Core data layer.  Public API:

    from graph import build_graph, Graph
    from graph import AdjacencyListGraph, AdjacencyMatrixGraph, IncidenceMatrixGraph
    from graph import VertexIndex, VertexState, Edge
    from graph import GraphError, DuplicateVertex, UnknownVertex, …
"""

from graph.errors    import (
    GraphError, DuplicateVertex, UnknownVertex,
    DuplicateEdge, UnsupportedEdge, SizeMismatch,
)
from graph.vertex    import VertexIndex, VertexState
from graph.edge      import Edge
from graph.graph     import Graph
from graph.adjacency import AdjacencyListGraph
from graph.matrix    import AdjacencyMatrixGraph
from graph.incidence import IncidenceMatrixGraph
from graph.builder   import REPRESENTATIONS, build_graph, graph_from_dict

__all__ = [
    "GraphError", "DuplicateVertex", "UnknownVertex",
    "DuplicateEdge", "UnsupportedEdge", "SizeMismatch",
    "VertexIndex", "VertexState",
    "Edge",
    "Graph",
    "AdjacencyListGraph", "AdjacencyMatrixGraph", "IncidenceMatrixGraph",
    "REPRESENTATIONS", "build_graph", "graph_from_dict",
]
