"""
generator.py

Randomized depth-first carving (recursive backtracker) of a perfect maze.

Carving runs on an explicit stack of (cell, remaining directions) frames, so
stack depth is bounded by the cell count, not the recursion limit. Directions
are reshuffled once per visited cell, at visit time; the random draws match the
recursive form draw for draw.
"""

import logging
import random
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from mazepath.grid_graph import Cell, GridGraph

log = logging.getLogger(__name__)

# (dr, dc); North is increasing row index.
DIRS: Dict[str, Tuple[int, int]] = {'N': (1, 0), 'E': (0, 1), 'S': (-1, 0), 'W': (0, -1)}

Frame = Tuple[Cell, Iterator[Tuple[str, Tuple[int, int]]]]


def _shuffled_dirs(rng: random.Random) -> List[Tuple[str, Tuple[int, int]]]:
    # fresh list per cell
    dirs = list(DIRS.items())
    rng.shuffle(dirs)
    return dirs


def carve_maze(rows: int, cols: int, rng: Optional[random.Random] = None) -> GridGraph:
    """
    Build a rows x cols GridGraph whose edges form a spanning tree, carving from (0, 0).
    Raises InvalidDimension for grids smaller than 2x2.
    """
    graph = GridGraph(rows, cols)
    if rng is None:
        rng = random.Random()

    visited = np.zeros((rows, cols), dtype=bool)

    def visit(r: int, c: int) -> Frame:
        visited[r, c] = True
        return (r, c), iter(_shuffled_dirs(rng))

    stack: List[Frame] = [visit(0, 0)]
    max_depth = 1
    while stack:
        (r, c), dirs = stack[-1]
        for _, (dr, dc) in dirs:
            nr, nc = r + dr, c + dc
            if graph.in_bounds(nr, nc) and not visited[nr, nc]:
                graph.add_edge(graph.vertex_of(r, c), graph.vertex_of(nr, nc))
                stack.append(visit(nr, nc))
                max_depth = max(max_depth, len(stack))
                break
        else:
            stack.pop()

    log.debug("carved %dx%d maze: %d edges, max depth %d",
              rows, cols, graph.edge_count(), max_depth)
    return graph
