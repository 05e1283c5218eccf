"""
traversal.py — Depth-First Traversal Engine
===========================================
Generator-based DFS using an explicit stack of frames (no Python
recursion limit issues).  Every algorithm that needs a depth-first walk
(cycle detection, two-colouring, connectivity) drives this one engine
and reacts to the events it yields.

Yields a TraversalEvent at:
  1. ENTER       — vertex reached for the first time
  2. TREE_EDGE   — edge leads to an unvisited vertex (about to be entered)
  3. BACK_EDGE   — edge leads to a vertex still on the active path
  4. CROSS_EDGE  — edge leads to a vertex already finished
  5. LEAVE       — all neighbours of a vertex processed

State machine per vertex:
    three-state (track_stack=True):  UNVISITED → ON_STACK → VISITED
    two-state   (track_stack=False): UNVISITED → VISITED

Design decisions:
  - A frame is `[vertex, neighbour iterator, arrival edge id]`.  The
    iterator IS the "position in the adjacency list", so resuming a
    frame after a child finishes continues exactly where it left off.
  - The reverse traversal of the undirected edge used to reach a vertex
    is skipped exactly once.  A parallel copy of that edge still shows
    up, so a doubled edge A=B is a genuine 2-cycle while a tree edge is
    not.
  - Order is fixed by adjacency insertion order, so the same edge
    sequence always gives the same walk.
  - Consumers may stop early simply by abandoning the generator.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Iterator, List, Optional, Tuple

from graph import Graph, VertexState


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------
class Event(Enum):
    ENTER      = "enter"
    TREE_EDGE  = "tree_edge"
    BACK_EDGE  = "back_edge"
    CROSS_EDGE = "cross_edge"
    LEAVE      = "leave"


@dataclass(frozen=True)
class TraversalEvent:
    kind:      Event
    vertex:    int
    neighbour: Optional[int] = None
    edge_id:   Optional[int] = None


# ---------------------------------------------------------------------------
# Undirected view — direction-blind adjacency for colouring / connectivity
# ---------------------------------------------------------------------------
class UndirectedView:
    """
    Read-only wrapper exposing every edge in both directions.

    Directed entries u→v are mirrored onto v once; undirected edges are
    already stored both ways and pass through untouched.
    """

    def __init__(self, graph: Graph):
        self.graph    = graph
        self.vertices = graph.vertices
        self.edges    = graph.edges
        self._adj: List[List[Tuple[int, int]]] = [list(graph.neighbours(v)) for v in range(len(graph))]
        for u in range(len(graph)):
            for v, eid in graph.neighbours(u):
                if self.edges[eid].directed and u != v:
                    self._adj[v].append((u, eid))

    @classmethod
    def of(cls, graph: Graph):
        """Return `graph` itself when no edge is directed, else a view."""
        if any(e.directed for e in graph.edges):
            return cls(graph)
        return graph

    def neighbours(self, index: int) -> Iterator[Tuple[int, int]]:
        return iter(self._adj[index])

    def degree_at(self, index: int) -> int:
        return len(self._adj[index])

    def __len__(self) -> int:
        return len(self._adj)


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------
class Traversal:
    """
    Owns the per-run state shared by every root the caller starts from.

    Attributes:
        graph       : anything exposing neighbours(index) and len()
        track_stack : three-state mode (needed for cycle detection)
        state       : [VertexState, …] indexed by vertex
        path        : vertices currently on the active DFS path, root first
    """

    def __init__(self, graph, track_stack: bool = False):
        self.graph       = graph
        self.track_stack = track_stack
        self.state:  List[VertexState] = [VertexState.UNVISITED] * len(graph)
        self.path:   List[int]         = []

    def visited(self, index: int) -> bool:
        return self.state[index] is not VertexState.UNVISITED

    def unvisited(self) -> List[int]:
        return [v for v, st in enumerate(self.state) if st is VertexState.UNVISITED]

    def _enter(self, vertex: int) -> TraversalEvent:
        self.state[vertex] = VertexState.ON_STACK if self.track_stack else VertexState.VISITED
        self.path.append(vertex)
        return TraversalEvent(Event.ENTER, vertex)

    def run(self, root: int) -> Iterator[TraversalEvent]:
        """Walk everything reachable from `root`.  No-op if root was already visited."""
        if self.visited(root):
            return

        yield self._enter(root)
        stack = [[root, iter(self.graph.neighbours(root)), None]]

        while stack:
            frame = stack[-1]
            vertex, nbrs = frame[0], frame[1]
            descended = False

            for nbr, eid in nbrs:
                if eid == frame[2]:
                    frame[2] = None           # reverse of the tree edge, once
                    continue

                st = self.state[nbr]
                if st is VertexState.UNVISITED:
                    yield TraversalEvent(Event.TREE_EDGE, vertex, nbr, eid)
                    yield self._enter(nbr)
                    stack.append([nbr, iter(self.graph.neighbours(nbr)), eid])
                    descended = True
                    break
                if st is VertexState.ON_STACK:
                    yield TraversalEvent(Event.BACK_EDGE, vertex, nbr, eid)
                else:
                    yield TraversalEvent(Event.CROSS_EDGE, vertex, nbr, eid)

            if descended:
                continue

            # -- all neighbours done --
            stack.pop()
            self.path.pop()
            self.state[vertex] = VertexState.VISITED
            yield TraversalEvent(Event.LEAVE, vertex)


# ---------------------------------------------------------------------------
# Convenience walks
# ---------------------------------------------------------------------------
def preorder(graph: Graph, start: Hashable) -> List[Hashable]:
    """Labels in the order DFS first reaches them from `start`."""
    traversal = Traversal(graph)
    return [
        graph.vertices.label_of(ev.vertex)
        for ev in traversal.run(graph.vertices.index_of(start))
        if ev.kind is Event.ENTER
    ]
