import random
from collections import deque

import pytest

from mazepath.generator import DIRS, carve_maze
from mazepath.grid_graph import InvalidDimension


class CountingRandom(random.Random):
    """Seeded Random that counts shuffle calls."""

    def __init__(self, seed):
        super().__init__(seed)
        self.shuffles = 0

    def shuffle(self, x):
        self.shuffles += 1
        super().shuffle(x)


def _reachable_from_zero(graph):
    seen = {0}
    q = deque([0])
    while q:
        u = q.popleft()
        for v in graph.adjacent(u):
            if v not in seen:
                seen.add(v)
                q.append(v)
    return seen


@pytest.mark.parametrize("rows,cols", [(2, 2), (2, 9), (9, 2), (5, 5), (13, 21), (30, 30)])
@pytest.mark.parametrize("seed", [0, 1, 42])
def test_spanning_tree(rows, cols, seed):
    g = carve_maze(rows, cols, random.Random(seed))
    n = rows * cols
    assert g.vertex_count() == n
    assert g.edge_count() == n - 1
    assert _reachable_from_zero(g) == set(range(n))


def test_edges_join_grid_neighbours():
    g = carve_maze(12, 17, random.Random(3))
    for u, v in g.edges():
        (ru, cu), (rv, cv) = g.cell_of(u), g.cell_of(v)
        assert abs(ru - rv) + abs(cu - cv) == 1


def test_no_duplicate_edges():
    g = carve_maze(15, 15, random.Random(11))
    pairs = [frozenset(e) for e in g.edges()]
    assert len(pairs) == len(set(pairs))


def test_no_back_edges_during_carve():
    # every edge adds exactly one new vertex to the carved tree
    g = carve_maze(10, 14, random.Random(5))
    in_tree = {0}
    for u, v in g.edges():
        assert u in in_tree
        assert v not in in_tree
        in_tree.add(v)
    assert len(in_tree) == g.vertex_count()


def test_deterministic_for_same_seed():
    a = carve_maze(16, 11, random.Random(2024))
    b = carve_maze(16, 11, random.Random(2024))
    assert a.edges() == b.edges()
    assert a.signature() == b.signature()


def test_different_seeds_differ():
    sigs = {carve_maze(10, 10, random.Random(s)).signature() for s in range(10)}
    assert len(sigs) > 1


def test_directions_reshuffled_once_per_cell():
    rng = CountingRandom(9)
    g = carve_maze(7, 8, rng)
    assert rng.shuffles == g.vertex_count()


def test_direction_table():
    assert set(DIRS) == {'N', 'E', 'S', 'W'}
    assert sorted(DIRS.values()) == [(-1, 0), (0, -1), (0, 1), (1, 0)]
    assert DIRS['N'] == (1, 0)


def test_carve_starts_at_origin():
    g = carve_maze(6, 6, random.Random(8))
    assert g.edges()[0][0] == 0


def test_deep_carve_does_not_recurse():
    # a 1-wide serpentine is the worst case: depth equal to the vertex count
    g = carve_maze(2, 3000, random.Random(1))
    assert g.edge_count() == 5999
    g = carve_maze(120, 120, random.Random(1))
    assert g.edge_count() == 120 * 120 - 1


def test_default_rng():
    g = carve_maze(4, 4)
    assert g.edge_count() == 15


def test_invalid_dimensions():
    with pytest.raises(InvalidDimension):
        carve_maze(1, 5)
