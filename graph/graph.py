"""
graph.py — Graph Container Base
===============================
Single capability interface every representation implements.  The
traversal, cycle, bipartite and connectivity algorithms only ever talk to
this surface, so they are written once no matter how edges are stored.

Responsibilities:
  1. Vertex bookkeeping                     (shared VertexIndex)
  2. Edge log                               (every add_edge, in order)
  3. Adjacency queries                      (neighbours, degree, has_edge)
  4. Dense export                           (adjacency_matrix)
  5. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Subclasses only implement `_store_edge` and `neighbours`; labels are
    resolved to indices here, once.
  - `neighbours(v)` yields `(neighbour_index, edge_id)` pairs.  A parallel
    edge shows up once per copy, so degree is just the entry count.
  - `directed` is a graph-level default; individual edges may override it.
"""

import logging
from typing import Hashable, Iterable, Iterator, List, Optional, Tuple

from graph.edge import Edge
from graph.vertex import VertexIndex

logger = logging.getLogger(__name__)


class Graph:
    """
    Attributes:
        vertices   : VertexIndex shared by every structure of this graph
        edges      : [Edge, …] in insertion order; Edge.id is the position
        directed   : bool – default directedness for add_edge
    """

    representation = "abstract"

    def __init__(self, vertices: Iterable[Hashable] = (), directed: bool = False):
        self.vertices: VertexIndex = VertexIndex()
        self.edges:    List[Edge]  = []
        self.directed: bool        = directed
        for label in vertices:
            self.add_vertex(label)

    # ==================================================================
    # VERTICES
    # ==================================================================
    def add_vertex(self, label: Hashable) -> int:
        idx = self.vertices.add(label)
        self._grow(idx)
        return idx

    def _grow(self, idx: int) -> None:
        """Hook: make room for the vertex that was just given `idx`."""
        raise NotImplementedError

    # ==================================================================
    # EDGES
    # ==================================================================
    def add_edge(
        self,
        source: Hashable,
        target: Hashable,
        directed: Optional[bool] = None,
        multiplicity: int = 1,
    ) -> Edge:
        """
        Record an edge between two existing vertices.

        Repeated calls accumulate: declaring A–B twice leaves two parallel
        edges.  Raises UnknownVertex if either endpoint was never added.
        """
        u = self.vertices.index_of(source)
        v = self.vertices.index_of(target)
        if directed is None:
            directed = self.directed
        edge = Edge(source, target, directed=directed, multiplicity=multiplicity, id=len(self.edges))
        self._store_edge(u, v, edge)
        self.edges.append(edge)
        logger.debug("added %r to %s graph", edge, self.representation)
        return edge

    def add_edges(self, edges: Iterable) -> List[Edge]:
        added = []
        for spec in edges:
            e = Edge.coerce(spec)
            added.append(self.add_edge(e.source, e.target, e.directed, e.multiplicity))
        return added

    def _store_edge(self, u: int, v: int, edge: Edge) -> None:
        raise NotImplementedError

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, index: int) -> Iterator[Tuple[int, int]]:
        """Yield (neighbour_index, edge_id) for every entry of `index`, in insertion order."""
        raise NotImplementedError

    def degree(self, label: Hashable) -> int:
        """Number of adjacency entries (parallel edges counted per copy)."""
        return self.degree_at(self.vertices.index_of(label))

    def degree_at(self, index: int) -> int:
        return sum(1 for _ in self.neighbours(index))

    def has_edge(self, source: Hashable, target: Hashable) -> bool:
        u = self.vertices.index_of(source)
        v = self.vertices.index_of(target)
        return any(nbr == v for nbr, _ in self.neighbours(u))

    def neighbour_labels(self, label: Hashable) -> List[Hashable]:
        return [self.vertices.label_of(nbr) for nbr, _ in self.neighbours(self.vertices.index_of(label))]

    def adjacency_matrix(self) -> List[List[int]]:
        """Dense n×n multiplicity matrix, whatever the storage."""
        n = self.vertex_count()
        matrix = [[0] * n for _ in range(n)]
        for u in range(n):
            for v, _ in self.neighbours(u):
                matrix[u][v] += 1
        return matrix

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "representation": self.representation,
            "directed":       self.directed,
            "vertices":       self.vertices.labels(),
            "edges":          [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        if cls is Graph:
            from graph.builder import graph_from_dict
            return graph_from_dict(data)
        g = cls(vertices=data.get("vertices", []), directed=data.get("directed", False))
        g.add_edges(data.get("edges", []))
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def vertex_count(self) -> int:
        return len(self.vertices)

    def edge_count(self) -> int:
        return len(self.edges)

    def labels(self) -> List[Hashable]:
        return self.vertices.labels()

    def __len__(self) -> int:
        return self.vertex_count()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.vertex_count()}, "
            f"edges={self.edge_count()}, directed={self.directed})"
        )
