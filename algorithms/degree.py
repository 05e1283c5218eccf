"""
degree.py — Degree & Edge-Multiplicity Reporters
================================================
Read-only queries.

  - vertex_degree / all_degrees read a built graph: degree is the number
    of adjacency entries (parallel edges per copy, a self-loop once).
  - EdgeCounter is a separate little store for per-edge occurrence
    counts.  Unlike Graph.add_edge, re-declaring the same ordered pair
    OVERWRITES its count instead of accumulating.  Do not route one
    policy through the other.
"""

from typing import Dict, Hashable, List, Sequence, Tuple

from graph import Graph, SizeMismatch, VertexIndex


def vertex_degree(graph: Graph, label: Hashable) -> int:
    """Raises UnknownVertex for a label that was never added."""
    return graph.degree(label)


def all_degrees(graph: Graph) -> Dict[Hashable, int]:
    """{label: degree} in vertex-index order."""
    return {label: graph.degree_at(i) for i, label in enumerate(graph.labels())}


# ---------------------------------------------------------------------------
# EdgeCounter
# ---------------------------------------------------------------------------
class EdgeCounter:
    """
    Attributes:
        vertices : VertexIndex of this counter (independent of any Graph)
        matrix   : [[count, …], …] — last count declared for [source][target]
        _counts  : {(source, target): count} in first-declaration order
    """

    def __init__(self, vertices: Sequence[Hashable] = ()):
        self.vertices: VertexIndex                         = VertexIndex()
        self.matrix:   List[List[int]]                     = []
        self._counts:  Dict[Tuple[Hashable, Hashable], int] = {}
        for label in vertices:
            self.add_vertex(label)

    def add_vertex(self, label: Hashable) -> int:
        idx = self.vertices.add(label)
        for row in self.matrix:
            row.append(0)
        self.matrix.append([0] * (idx + 1))
        return idx

    def set_count(self, source: Hashable, target: Hashable, count: int) -> None:
        """Record `count` occurrences of source→target, replacing any earlier count."""
        u = self.vertices.index_of(source)
        v = self.vertices.index_of(target)
        if not isinstance(count, int) or isinstance(count, bool) or count < 1:
            raise ValueError(f"Edge count must be an integer >= 1, got {count!r}")
        self.matrix[u][v] = count
        self._counts[(source, target)] = count

    def count(self, source: Hashable, target: Hashable) -> int:
        """0 for a pair never declared; UnknownVertex for unknown labels."""
        u = self.vertices.index_of(source)
        v = self.vertices.index_of(target)
        return self.matrix[u][v]

    def edge_counts(self) -> Dict[Tuple[Hashable, Hashable], int]:
        return dict(self._counts)

    @classmethod
    def from_matrix(cls, labels: Sequence[Hashable], matrix: Sequence[Sequence[int]]) -> "EdgeCounter":
        """Every non-zero cell [i][j] becomes a declared edge labels[i]→labels[j]."""
        if not isinstance(matrix, (list, tuple)) or not all(isinstance(row, (list, tuple)) for row in matrix):
            raise ValueError("Count matrix must be a list of rows")
        n = len(labels)
        if len(matrix) != n or any(len(row) != n for row in matrix):
            raise SizeMismatch(f"Count matrix must be {n}x{n}", expected=n)
        counter = cls(labels)
        for i, row in enumerate(matrix):
            for j, cnt in enumerate(row):
                if cnt != 0:
                    counter.set_count(labels[i], labels[j], cnt)
        return counter

    def __repr__(self) -> str:
        return f"EdgeCounter(vertices={len(self.vertices)}, edges={len(self._counts)})"
