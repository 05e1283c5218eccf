"""
incidence.py — Incidence Matrix Storage
=======================================
Vertex-by-edge table.  Each declared edge gets its own column and both
endpoints record the edge's multiplicity in that column (a self-loop
marks a single row).

Design decisions:
  - Incidence graphs are undirected; a directed edge is rejected.
  - An unordered vertex pair may own at most one column.  Declaring A–B
    after B–A raises DuplicateEdge instead of accumulating.
  - Columns grow as edges arrive, so the edge count need not be known
    up front.  Column index == Edge.id.
"""

from typing import Dict, FrozenSet, Iterator, List, Tuple

from graph.edge import Edge
from graph.errors import DuplicateEdge, UnsupportedEdge
from graph.graph import Graph


class IncidenceMatrixGraph(Graph):
    """
    Attributes:
        rows         : [[count per column, …], …] indexed by vertex
        _columns     : [(u, v), …] endpoints of each column
        _pair_column : {frozenset({u, v}): column}
    """

    representation = "incidence"

    def __init__(self, vertices=(), directed: bool = False):
        if directed:
            raise UnsupportedEdge("Incidence graphs are undirected")
        self.rows:         List[List[int]]           = []
        self._columns:     List[Tuple[int, int]]     = []
        self._pair_column: Dict[FrozenSet[int], int] = {}
        super().__init__(vertices=vertices, directed=False)

    def _grow(self, idx: int) -> None:
        self.rows.append([0] * len(self._columns))

    def _store_edge(self, u: int, v: int, edge: Edge) -> None:
        if edge.directed:
            raise UnsupportedEdge(
                f"Incidence graphs cannot store directed edge {edge.source}->{edge.target}",
                source=edge.source, target=edge.target,
            )
        pair = frozenset((u, v))
        if pair in self._pair_column:
            raise DuplicateEdge(
                f"Edge already exists: {edge.source}-{edge.target}",
                source=edge.source, target=edge.target,
            )
        col = len(self._columns)
        for row in self.rows:
            row.append(0)
        self.rows[u][col] = edge.multiplicity
        self.rows[v][col] = edge.multiplicity
        self._columns.append((u, v))
        self._pair_column[pair] = col

    def neighbours(self, index: int) -> Iterator[Tuple[int, int]]:
        row = self.rows[index]
        for col, (u, v) in enumerate(self._columns):
            if row[col]:
                other = v if index == u else u
                for _ in range(row[col]):
                    yield other, col

    def degree_at(self, index: int) -> int:
        return sum(self.rows[index])

    def column_of(self, source, target) -> int:
        """Column owned by the unordered pair {source, target}; KeyError if none."""
        pair = frozenset((self.vertices.index_of(source), self.vertices.index_of(target)))
        return self._pair_column[pair]

    def incidence_matrix(self) -> List[List[int]]:
        return [list(row) for row in self.rows]
