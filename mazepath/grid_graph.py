"""
grid_graph.py

Undirected graph over the cells of a rows x cols grid. Vertex ids are dense:
    v = row * cols + col        row = v // cols        col = v % cols
Edges are carved passages between cells.
"""

import hashlib
from typing import Iterator, List, Tuple

import numpy as np

Cell = Tuple[int, int]  # (row, col)

# Wall order in walls(): North, East, South, West. North is row + 1.
WALL_ORDER = ('N', 'E', 'S', 'W')
WALL_DELTAS = ((1, 0), (0, 1), (-1, 0), (0, -1))  # (dr, dc)

MIN_DIMENSION = 2


class InvalidDimension(ValueError):
    """rows or cols below the smallest grid a maze can be carved on."""

    def __init__(self, rows: int, cols: int):
        super().__init__(f"rows and cols must both be >= {MIN_DIMENSION} (got {rows}x{cols})")
        self.rows = rows
        self.cols = cols


class GridGraph:
    def __init__(self, rows: int, cols: int):
        if rows < MIN_DIMENSION or cols < MIN_DIMENSION:
            raise InvalidDimension(rows, cols)
        self.rows = rows
        self.cols = cols
        self._adj: List[List[int]] = [[] for _ in range(rows * cols)]
        self._edges: List[Tuple[int, int]] = []

    # -------------------------
    # Cell <-> vertex
    # -------------------------

    def vertex_of(self, row: int, col: int) -> int:
        return row * self.cols + col

    def row_of(self, v: int) -> int:
        return v // self.cols

    def col_of(self, v: int) -> int:
        return v % self.cols

    def cell_of(self, v: int) -> Cell:
        return self.row_of(v), self.col_of(v)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    # -------------------------
    # Edges
    # -------------------------

    def vertex_count(self) -> int:
        return self.rows * self.cols

    def edge_count(self) -> int:
        return len(self._edges)

    def _check_vertex(self, v: int):
        if not 0 <= v < self.vertex_count():
            raise ValueError(f"vertex {v} is not between 0 and {self.vertex_count() - 1}")

    def add_edge(self, u: int, v: int):
        """Record a passage between u and v. Grid adjacency is not checked here."""
        self._check_vertex(u)
        self._check_vertex(v)
        if u == v:
            raise ValueError(f"self-loop on vertex {u}")
        self._adj[u].append(v)
        self._adj[v].append(u)
        self._edges.append((u, v))

    def adjacent(self, v: int) -> Iterator[int]:
        """Neighbours of v in the order their edges were added."""
        self._check_vertex(v)
        for w in self._adj[v]:
            yield w

    def degree(self, v: int) -> int:
        self._check_vertex(v)
        return len(self._adj[v])

    def has_edge(self, u: int, v: int) -> bool:
        self._check_vertex(u)
        self._check_vertex(v)
        return v in self._adj[u]

    def edges(self) -> List[Tuple[int, int]]:
        return list(self._edges)

    # -------------------------
    # Views for renderers / debug
    # -------------------------

    def walls(self) -> np.ndarray:
        """
        (rows, cols, 4) bool array in WALL_ORDER; True where a wall stands,
        i.e. the neighbour is off-grid or there is no edge to it.
        """
        out = np.ones((self.rows, self.cols, len(WALL_ORDER)), dtype=bool)
        for r in range(self.rows):
            for c in range(self.cols):
                v = self.vertex_of(r, c)
                for k, (dr, dc) in enumerate(WALL_DELTAS):
                    nr, nc = r + dr, c + dc
                    if self.in_bounds(nr, nc) and self.vertex_of(nr, nc) in self._adj[v]:
                        out[r, c, k] = False
        return out

    def signature(self) -> str:
        return hashlib.sha256(self.walls().tobytes()).hexdigest()

    def __str__(self) -> str:
        lines = [f"{self.vertex_count()} vertices, {self.edge_count()} edges"]
        for v in range(self.vertex_count()):
            lines.append(f"{v}: " + " ".join(str(w) for w in self._adj[v]))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"GridGraph(rows={self.rows}, cols={self.cols}, edges={self.edge_count()})"
