"""
matrix.py — Adjacency Matrix Storage
====================================
Dense n×n table of edge multiplicities.  Cell [u][v] counts how many
edges run from u to v; an undirected edge bumps the mirror cell too, so
the matrix is symmetric exactly when every edge is undirected.

Design decisions:
  - Cells only hold counts, so each row also keeps its
    `(neighbour_index, edge_id)` entries in the order edges were added.
    neighbours() reads that log, which gives the same walk order as the
    list and incidence forms for the same edge sequence.
"""

from typing import Iterator, List, Tuple

from graph.edge import Edge
from graph.graph import Graph


class AdjacencyMatrixGraph(Graph):
    """
    Attributes:
        matrix   : [[multiplicity, …], …]  (0 = no edge)
        _entries : [[(neighbour_index, edge_id), …], …] per row, insertion order
    """

    representation = "matrix"

    def __init__(self, vertices=(), directed: bool = False):
        self.matrix:   List[List[int]]             = []
        self._entries: List[List[Tuple[int, int]]] = []
        super().__init__(vertices=vertices, directed=directed)

    def _grow(self, idx: int) -> None:
        for row in self.matrix:
            row.append(0)
        self.matrix.append([0] * (idx + 1))
        self._entries.append([])

    def _store_edge(self, u: int, v: int, edge: Edge) -> None:
        self.matrix[u][v] += edge.multiplicity
        self._entries[u].extend([(v, edge.id)] * edge.multiplicity)
        if not edge.directed and u != v:
            self.matrix[v][u] += edge.multiplicity
            self._entries[v].extend([(u, edge.id)] * edge.multiplicity)

    def neighbours(self, index: int) -> Iterator[Tuple[int, int]]:
        return iter(self._entries[index])

    def degree_at(self, index: int) -> int:
        return sum(self.matrix[index])

    def multiplicity(self, source, target) -> int:
        """Accumulated count stored in the [source][target] cell."""
        return self.matrix[self.vertices.index_of(source)][self.vertices.index_of(target)]

    def adjacency_matrix(self) -> List[List[int]]:
        return [list(row) for row in self.matrix]
