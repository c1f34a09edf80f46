"""
orchestrator.py

One maze run: carve, pick the goal, solve. Start is always vertex 0, i.e. cell (0, 0).
The goal is drawn uniformly from [V // 2, V): it always lies at or past the
midpoint index, rounding down.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from mazepath.generator import carve_maze
from mazepath.grid_graph import Cell, GridGraph
from mazepath.solver import shortest_path

log = logging.getLogger(__name__)

START_VERTEX = 0


@dataclass
class MazeConfig:
    rows: int
    cols: int
    seed: Optional[int] = None
    debug: bool = False


@dataclass(frozen=True)
class MazeRun:
    graph: GridGraph
    start: int
    goal: int
    path: List[int]

    @property
    def rows(self) -> int:
        return self.graph.rows

    @property
    def cols(self) -> int:
        return self.graph.cols

    @property
    def path_length(self) -> int:
        return len(self.path) - 1

    def cells(self) -> List[Cell]:
        return [self.graph.cell_of(v) for v in self.path]


def pick_goal(rng: random.Random, vertex_count: int) -> int:
    return rng.randrange(vertex_count // 2, vertex_count)


def build_and_solve(config: MazeConfig, rng: Optional[random.Random] = None) -> MazeRun:
    """
    Carve a config.rows x config.cols maze, choose the goal and solve from START_VERTEX.
    All carve draws come before the goal draw on the same random source.
    Raises InvalidDimension or NoPathFound.
    """
    if rng is None:
        rng = random.Random(config.seed)

    graph = carve_maze(config.rows, config.cols, rng)
    n = graph.vertex_count()
    s = START_VERTEX
    c = n // 2
    e = pick_goal(rng, n)

    if config.debug:
        log.debug("maze graph:\n%s", graph)
        log.debug("Start vertex:  %d %s", s, graph.cell_of(s))
        log.debug("Center vertex: %d %s", c, graph.cell_of(c))
        log.debug("End vertex:    %d %s", e, graph.cell_of(e))

    path = shortest_path(graph, s, e)

    if config.debug:
        log.debug("Path from %d to %d: %s", s, e, " ".join(str(v) for v in path))

    return MazeRun(graph=graph, start=s, goal=e, path=path)
