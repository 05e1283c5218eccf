"""
cycle.py — Cycle Detection
==========================
Three-state DFS (see traversal.py) started from every unvisited vertex
in index order.  The first edge that reaches a vertex still ON_STACK
closes a cycle; the cycle is the slice of the active path from that
vertex down to the current one.

Only the first cycle found is reported; this is a detector, not an
enumerator.  Edge direction is respected: in a directed graph only
directed cycles count.
"""

import logging
from dataclasses import dataclass, field
from typing import Hashable, List, Optional, Sequence, Union

from graph import Graph
from algorithms.traversal import Event, Traversal

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class CycleResult:
    """
    Attributes:
        vertices    : labels in traversal order, first label repeated at the end
        spans_graph : True when the cycle passes through every vertex,
                      i.e. the whole graph is one cycle
    """

    vertices:    List[Hashable] = field(default_factory=list)
    spans_graph: bool           = False

    @property
    def length(self) -> int:
        """Number of distinct vertices (== number of edges) on the cycle."""
        return max(len(self.vertices) - 1, 0)


# ---------------------------------------------------------------------------
# Detection
# ---------------------------------------------------------------------------
def find_cycle_indices(graph: Graph) -> Optional[List[int]]:
    """Distinct vertex indices of the first cycle found, or None."""
    traversal = Traversal(graph, track_stack=True)

    for root in range(len(graph)):
        if traversal.visited(root):
            continue
        for event in traversal.run(root):
            if event.kind is Event.BACK_EDGE:
                start = traversal.path.index(event.neighbour)
                return list(traversal.path[start:])
    return None


def detect_cycle(graph: Graph) -> Optional[CycleResult]:
    cycle = find_cycle_indices(graph)
    if cycle is None:
        logger.debug("no cycle in %r", graph)
        return None

    labels = [graph.vertices.label_of(i) for i in cycle]
    labels.append(labels[0])
    result = CycleResult(vertices=labels, spans_graph=len(cycle) == len(graph))
    logger.debug("cycle of length %d found in %r", result.length, graph)
    return result


def has_cycle(graph: Graph) -> bool:
    return find_cycle_indices(graph) is not None


def format_cycle(cycle: Union[CycleResult, Sequence[Hashable]], arrow: str = " -> ") -> str:
    """`A -> B -> C -> A`.  Accepts a CycleResult or an already-closed label list."""
    labels = cycle.vertices if isinstance(cycle, CycleResult) else cycle
    return arrow.join(str(label) for label in labels)
