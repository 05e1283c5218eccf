"""
bipartite.py — Two-Colouring
============================
Every uncoloured vertex, in index order, roots a new component and gets
colour 0.  Tree edges hand the opposite colour to the child; any other
edge must join two different colours, otherwise the graph is not
bipartite and the walk stops right there.

Direction is ignored: the colouring runs over an undirected view so an
arc u→v constrains u and v exactly like an undirected edge would.  A
self-loop is always a violation.
"""

import logging
from typing import Hashable, List, Optional, Tuple

from graph import Graph
from algorithms.traversal import Event, Traversal, UndirectedView

logger = logging.getLogger(__name__)


def two_coloring(graph: Graph) -> Optional[List[int]]:
    """Colour (0/1) per vertex index, or None on the first same-colour edge."""
    view = UndirectedView.of(graph)
    traversal = Traversal(view)
    color: List[Optional[int]] = [None] * len(view)

    for root in range(len(view)):
        if color[root] is not None:
            continue
        color[root] = 0
        for event in traversal.run(root):
            if event.kind is Event.TREE_EDGE:
                color[event.neighbour] = 1 - color[event.vertex]
            elif event.kind in (Event.BACK_EDGE, Event.CROSS_EDGE):
                if color[event.neighbour] == color[event.vertex]:
                    logger.debug(
                        "edge %s-%s joins two vertices of colour %d",
                        graph.vertices.label_of(event.vertex),
                        graph.vertices.label_of(event.neighbour),
                        color[event.vertex],
                    )
                    return None
    return color


def is_bipartite(graph: Graph) -> bool:
    return two_coloring(graph) is not None


def bipartition(graph: Graph) -> Optional[Tuple[List[Hashable], List[Hashable]]]:
    """The two vertex sets (labels) of a valid colouring, or None."""
    color = two_coloring(graph)
    if color is None:
        return None
    labels = graph.labels()
    left  = [labels[i] for i, c in enumerate(color) if c == 0]
    right = [labels[i] for i, c in enumerate(color) if c == 1]
    return left, right
