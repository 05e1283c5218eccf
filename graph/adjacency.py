"""
adjacency.py — Adjacency List Storage
=====================================
Per-vertex ordered list of `(neighbour_index, edge_id)` entries, kept in
the order edges were added.  Parallel edges are duplicate entries; an
undirected edge writes the mirror entry on the other endpoint, except for
a self-loop, which is stored once.
"""

from typing import Iterator, List, Tuple

from graph.edge import Edge
from graph.graph import Graph


class AdjacencyListGraph(Graph):
    """
    Attributes:
        _adj : [[(neighbour_index, edge_id), …], …] indexed by vertex
    """

    representation = "list"

    def __init__(self, vertices=(), directed: bool = False):
        self._adj: List[List[Tuple[int, int]]] = []
        super().__init__(vertices=vertices, directed=directed)

    def _grow(self, idx: int) -> None:
        self._adj.append([])

    def _store_edge(self, u: int, v: int, edge: Edge) -> None:
        self._adj[u].extend([(v, edge.id)] * edge.multiplicity)
        if not edge.directed and u != v:
            self._adj[v].extend([(u, edge.id)] * edge.multiplicity)

    def neighbours(self, index: int) -> Iterator[Tuple[int, int]]:
        return iter(self._adj[index])

    def degree_at(self, index: int) -> int:
        return len(self._adj[index])

    def adjacency_list(self) -> List[List[int]]:
        """Neighbour indices only, per vertex."""
        return [[nbr for nbr, _ in entries] for entries in self._adj]
