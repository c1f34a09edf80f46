"""
solver.py

Breadth-first shortest paths (fewest edges) over a GridGraph.
"""

import logging
from collections import deque
from typing import Dict, List, Optional

from mazepath.grid_graph import GridGraph

log = logging.getLogger(__name__)


class NoPathFound(RuntimeError):
    """Goal not reachable from start. On a carved maze this means the graph is not a spanning tree."""

    def __init__(self, start: int, goal: int):
        super().__init__(f"No path to {goal} exists in the graph (from {start}).")
        self.start = start
        self.goal = goal


class BreadthFirstPaths:
    """BFS tree rooted at `source`; answers reachability, distance and path queries."""

    def __init__(self, graph: GridGraph, source: int):
        self.graph = graph
        self.source = source
        self._check(source)

        n = graph.vertex_count()
        self.marked: List[bool] = [False] * n
        self.dist: List[int] = [-1] * n
        self.parent: Dict[int, Optional[int]] = {}
        self._bfs(source)

    def _check(self, v: int):
        if not 0 <= v < self.graph.vertex_count():
            raise ValueError(f"vertex {v} is not between 0 and {self.graph.vertex_count() - 1}")

    def _bfs(self, s: int):
        q = deque([s])
        self.marked[s] = True
        self.dist[s] = 0
        self.parent[s] = None
        while q:
            u = q.popleft()
            for v in self.graph.adjacent(u):
                if not self.marked[v]:
                    self.marked[v] = True
                    self.dist[v] = self.dist[u] + 1
                    self.parent[v] = u
                    q.append(v)

    def has_path_to(self, v: int) -> bool:
        self._check(v)
        return self.marked[v]

    def dist_to(self, v: int) -> int:
        """Edge count from source, -1 when unreachable."""
        self._check(v)
        return self.dist[v]

    def path_to(self, v: int) -> Optional[List[int]]:
        if not self.has_path_to(v):
            return None
        path = []
        cur = v
        while cur is not None:
            path.append(cur)
            cur = self.parent[cur]
        return list(reversed(path))


def shortest_path(graph: GridGraph, start: int, goal: int) -> List[int]:
    """Vertices start..goal inclusive. Raises NoPathFound if goal is unreachable."""
    bfp = BreadthFirstPaths(graph, start)
    path = bfp.path_to(goal)
    if path is None:
        raise NoPathFound(start, goal)
    log.debug("path %d -> %d: %d edges", start, goal, len(path) - 1)
    return path
