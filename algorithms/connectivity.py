"""
connectivity.py — Connectivity & Components
===========================================
Two-state DFS over an undirected view of the graph, so for directed
graphs "connected" means weakly connected.

Component counting policy:
  - INCLUDE_ISOLATED (default): every unvisited vertex, scanned in index
    order, roots a new component, so an isolated vertex is a singleton
    component.
  - EXCLUDE_ISOLATED: vertices with no edges at all are skipped and
    never counted.  A vertex whose only edge is a self-loop still counts.

is_connected and analyze take the same policy, so a graph is connected
exactly when it has one component (or none at all).
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Hashable, List

from graph import Graph
from algorithms.traversal import Event, Traversal, UndirectedView

logger = logging.getLogger(__name__)


class ComponentPolicy(Enum):
    INCLUDE_ISOLATED = "include_isolated"
    EXCLUDE_ISOLATED = "exclude_isolated"


@dataclass(frozen=True)
class Connectivity:
    connected:       bool
    component_count: int


def _members(view, policy: ComponentPolicy) -> List[int]:
    """Vertex indices that take part in components under `policy`."""
    if policy is ComponentPolicy.EXCLUDE_ISOLATED:
        return [v for v in range(len(view)) if view.degree_at(v) > 0]
    return list(range(len(view)))


def is_connected(
    graph: Graph,
    policy: ComponentPolicy = ComponentPolicy.INCLUDE_ISOLATED,
) -> bool:
    """
    DFS from the first member vertex; True iff it reaches every member.

    Members are all vertices, or only those with an edge under
    EXCLUDE_ISOLATED.  With at most one member the graph is connected.
    """
    policy = ComponentPolicy(policy)
    view = UndirectedView.of(graph)
    members = _members(view, policy)
    if len(members) <= 1:
        return True
    traversal = Traversal(view)
    for _ in traversal.run(members[0]):
        pass
    return all(traversal.visited(v) for v in members)


def components(
    graph: Graph,
    policy: ComponentPolicy = ComponentPolicy.INCLUDE_ISOLATED,
) -> List[List[Hashable]]:
    """Label groups, one per component, in root-index order."""
    policy = ComponentPolicy(policy)
    view = UndirectedView.of(graph)
    traversal = Traversal(view)
    groups: List[List[Hashable]] = []

    for root in _members(view, policy):
        if traversal.visited(root):
            continue
        groups.append([
            graph.vertices.label_of(ev.vertex)
            for ev in traversal.run(root)
            if ev.kind is Event.ENTER
        ])
    return groups


def count_components(
    graph: Graph,
    policy: ComponentPolicy = ComponentPolicy.INCLUDE_ISOLATED,
) -> int:
    return len(components(graph, policy))


def analyze(
    graph: Graph,
    policy: ComponentPolicy = ComponentPolicy.INCLUDE_ISOLATED,
) -> Connectivity:
    result = Connectivity(connected=is_connected(graph, policy), component_count=count_components(graph, policy))
    logger.debug("%r: %s", graph, result)
    return result
