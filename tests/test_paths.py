import math

from algolab.paths import (
    DisjointSet,
    bellman_ford,
    dijkstra,
    floyd_warshall,
    has_cycle_dsu,
    kruskal,
)

INF = math.inf

BELLMAN_EDGES = [
    (1, 2, 3),
    (3, 2, 5),
    (1, 3, 2),
    (3, 1, 1),
    (1, 4, 2),
    (0, 2, 4),
    (4, 3, -3),
    (0, 1, -1),
]

KRUSKAL_EDGES = [
    (1, 2, 5),
    (2, 3, 6),
    (4, 3, 2),
    (1, 4, 9),
    (3, 5, 5),
    (5, 6, 10),
    (6, 7, 7),
    (7, 8, 1),
    (8, 5, 1),
]

FW_MATRIX = [
    [0, 5, INF, 10],
    [INF, 0, 3, INF],
    [INF, INF, 0, 1],
    [INF, INF, INF, 0],
]


def test_disjoint_set_union_and_find():
    sets = DisjointSet()
    assert sets.union(1, 2) is True
    assert sets.union(2, 3) is True
    assert sets.union(1, 3) is False
    assert sets.find(1) == sets.find(3)
    assert sets.find(4) == 4


def test_bellman_ford_sample():
    assert bellman_ford(5, BELLMAN_EDGES, 0) == [0, -1, 2, -2, 1]


def test_bellman_ford_unreachable():
    assert bellman_ford(3, [(0, 1, 4)], 0)[2] is None


def test_dijkstra_sample():
    edges = [(1, 2, 24), (1, 4, 20), (3, 1, 3), (4, 3, 12)]
    assert dijkstra(4, edges, 1) == [0, 24, 3, 15]


def test_dijkstra_agrees_with_bellman_ford():
    edges = [(1, 2, 7), (1, 3, 9), (1, 6, 14), (2, 3, 10), (2, 4, 15), (3, 4, 11), (3, 6, 2), (4, 5, 6), (5, 6, 9)]
    both_ways = edges + [(v, u, w) for u, v, w in edges]
    expected = bellman_ford(7, both_ways, 1)[1:]
    assert dijkstra(6, edges, 1) == expected


def test_floyd_warshall_first_row():
    assert floyd_warshall(FW_MATRIX)[0] == [0, 5, 8, 9]


def test_floyd_warshall_invariants():
    dist = floyd_warshall(FW_MATRIX)
    n = len(dist)
    for i in range(n):
        assert dist[i][i] == 0
        for j in range(n):
            assert dist[i][j] <= FW_MATRIX[i][j]
            for k in range(n):
                assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_floyd_warshall_leaves_input_alone():
    original = [row[:] for row in FW_MATRIX]
    floyd_warshall(FW_MATRIX)
    assert FW_MATRIX == original


def test_kruskal_sample():
    chosen, cost = kruskal(KRUSKAL_EDGES)
    assert chosen == [(7, 8), (8, 5), (4, 3), (1, 2), (3, 5), (2, 3), (6, 7)]
    assert cost == 27


def test_kruskal_tree_has_no_cycle_and_spans():
    chosen, _ = kruskal(KRUSKAL_EDGES)
    assert has_cycle_dsu(chosen) is False
    vertices = {v for u, v, _ in KRUSKAL_EDGES} | {u for u, _, _ in KRUSKAL_EDGES}
    assert len(chosen) == len(vertices) - 1


def test_has_cycle_dsu_sample():
    assert has_cycle_dsu([(0, 1), (1, 2), (2, 3), (3, 0)]) is True


def test_has_cycle_dsu_path():
    assert has_cycle_dsu([(0, 1), (1, 2), (2, 3)]) is False