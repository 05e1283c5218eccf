"""
isomorphism.py — Exact Isomorphism by Backtracking
==================================================
Searches for a bijection m: {0..n-1} → {0..n-1} such that for all i, j

    A[i][j] is adjacent  ⇔  B[m[i]][m[j]] is adjacent

Only connectivity matters: any non-zero cell counts as "adjacent", so
multiplicities are ignored.

Search:
  - Vertices of the first graph are assigned in index order 0..n-1.
  - For vertex v every unused target t of the second graph is tried in
    index order.  t is consistent with v iff the self-loop flag matches
    and, for every vertex i that already has an image, the adjacency
    between v and i (both directions) equals the adjacency between t
    and m[i].
  - A consistent t is assigned, the search recurses to v+1, and the
    assignment is rolled back on every exit path.
  - Success when v reaches n; exhausting the root's candidates means the
    graphs are not isomorphic.

Worst case is O(n!·n) consistency checks, fine for the small graphs
this is meant for.  A degree-sequence pre-check rejects obviously
different graphs without changing any answer.
"""

import logging
from typing import Dict, Hashable, List, Optional, Sequence

from graph import Graph, SizeMismatch

logger = logging.getLogger(__name__)

Matrix = Sequence[Sequence[int]]


def _as_adjacency(matrix: Matrix, name: str) -> List[List[bool]]:
    if not isinstance(matrix, (list, tuple)):
        raise ValueError(f"{name} adjacency matrix must be a list of rows")
    n = len(matrix)
    rows = []
    for row in matrix:
        if not isinstance(row, (list, tuple)):
            raise ValueError(f"{name} adjacency matrix has a row that is not a list: {row!r}")
        if len(row) != n:
            raise SizeMismatch(
                f"{name} adjacency matrix must be square ({n}x{n}), found a row of length {len(row)}",
                expected=n, actual=len(row),
            )
        rows.append([bool(cell) for cell in row])
    return rows


def _degree_signature(adj: List[List[bool]]) -> List[tuple]:
    n = len(adj)
    return sorted(
        (sum(adj[v]), sum(adj[u][v] for u in range(n)), adj[v][v])
        for v in range(n)
    )


class IsomorphismMatcher:
    """
    Attributes:
        first, second : boolean adjacency matrices of equal size n
        mapping       : [target or None, …] — partial map under construction
        used          : [bool, …] — targets in `second` already taken
        checks        : number of candidate consistency checks performed
    """

    def __init__(self, first: Matrix, second: Matrix, prefilter: bool = True):
        self.first  = _as_adjacency(first, "first")
        self.second = _as_adjacency(second, "second")
        if len(self.first) != len(self.second):
            raise SizeMismatch(
                f"Graphs must have the same number of vertices "
                f"({len(self.first)} != {len(self.second)})",
                expected=len(self.first), actual=len(self.second),
            )
        self.n         = len(self.first)
        self.prefilter = prefilter
        self.mapping: List[Optional[int]] = [None] * self.n
        self.used:    List[bool]          = [False] * self.n
        self.checks:  int                 = 0
        self._found:  Optional[Dict[int, int]] = None

    # ------------------------------------------------------------------
    def _consistent(self, v: int, t: int) -> bool:
        self.checks += 1
        a, b = self.first, self.second
        if a[v][v] != b[t][t]:
            return False
        for i, m in enumerate(self.mapping):
            if m is None:
                continue
            if a[v][i] != b[t][m] or a[i][v] != b[m][t]:
                return False
        return True

    def _extend(self, v: int) -> bool:
        if v == self.n:
            self._found = dict(enumerate(self.mapping))
            return True

        for t in range(self.n):
            if self.used[t] or not self._consistent(v, t):
                continue
            self.mapping[v] = t
            self.used[t] = True
            try:
                if self._extend(v + 1):
                    return True
            finally:
                self.mapping[v] = None
                self.used[t] = False
        return False

    def match(self) -> Optional[Dict[int, int]]:
        """The first mapping found in index order, or None when not isomorphic."""
        self._found = None
        if self.prefilter and _degree_signature(self.first) != _degree_signature(self.second):
            logger.debug("degree sequences differ; skipping search (n=%d)", self.n)
            return None
        self._extend(0)
        logger.debug(
            "isomorphism search n=%d: %s after %d checks",
            self.n, "mapping found" if self._found is not None else "exhausted", self.checks,
        )
        return self._found


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def find_isomorphism(first: Matrix, second: Matrix) -> Optional[Dict[int, int]]:
    return IsomorphismMatcher(first, second).match()


def are_isomorphic(first: Matrix, second: Matrix) -> bool:
    return find_isomorphism(first, second) is not None


def is_isomorphism(first: Matrix, second: Matrix, mapping: Dict[int, int]) -> bool:
    """True iff `mapping` is a bijection preserving adjacency exactly."""
    a = _as_adjacency(first, "first")
    b = _as_adjacency(second, "second")
    n = len(a)
    if len(b) != n or sorted(mapping) != list(range(n)) or sorted(mapping.values()) != list(range(n)):
        return False
    return all(a[i][j] == b[mapping[i]][mapping[j]] for i in range(n) for j in range(n))


def match_graphs(first: Graph, second: Graph) -> Optional[Dict[Hashable, Hashable]]:
    """Label-level mapping between two built graphs, or None."""
    found = find_isomorphism(first.adjacency_matrix(), second.adjacency_matrix())
    if found is None:
        return None
    return {
        first.vertices.label_of(i): second.vertices.label_of(t)
        for i, t in found.items()
    }
