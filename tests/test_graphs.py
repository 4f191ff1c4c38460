import pytest

from algolab.graphs import (
    adjacency_list,
    adjacency_matrix,
    bfs_order,
    component_sizes,
    cross_group_pairs,
    format_adjacency_list,
    has_directed_cycle,
    has_undirected_cycle,
    is_bipartite,
    topological_order,
)

SAMPLE_EDGES = [(1, 2), (1, 3), (2, 4), (2, 5), (2, 6), (2, 7), (7, 3)]
LIST_EDGES = [(0, 1), (0, 4), (1, 2), (1, 3), (1, 4), (2, 3), (3, 4)]


def test_adjacency_list_is_symmetric():
    adjacency = adjacency_list(5, LIST_EDGES)
    for u, neighbours in enumerate(adjacency):
        for v in neighbours:
            assert u in adjacency[v]
    assert sum(len(n) for n in adjacency) == 2 * len(LIST_EDGES)


def test_format_adjacency_list_shows_chain():
    text = format_adjacency_list(adjacency_list(5, LIST_EDGES))
    assert "head->1->4\n" in text
    assert text.count("head") == 5


def test_adjacency_matrix_sample():
    assert adjacency_matrix(7, SAMPLE_EDGES) == [
        [0, 1, 1, 0, 0, 0, 0],
        [1, 0, 0, 1, 1, 1, 1],
        [1, 0, 0, 0, 0, 0, 1],
        [0, 1, 0, 0, 0, 0, 0],
        [0, 1, 0, 0, 0, 0, 0],
        [0, 1, 0, 0, 0, 0, 0],
        [0, 1, 1, 0, 0, 0, 0],
    ]


def test_adjacency_matrix_rejects_out_of_range():
    with pytest.raises(ValueError):
        adjacency_matrix(2, [(1, 3)])


def test_bfs_order_sample():
    assert bfs_order(SAMPLE_EDGES, 1) == [1, 2, 3, 4, 5, 6, 7]


def test_bfs_visits_each_vertex_once():
    order = bfs_order(SAMPLE_EDGES, 4)
    assert order[0] == 4
    assert sorted(order) == [1, 2, 3, 4, 5, 6, 7]


def test_component_sizes_sample():
    assert component_sizes(5, [(0, 1), (2, 3), (0, 4)]) == [3, 2]


def test_component_sizes_sum_to_vertex_count():
    sizes = component_sizes(9, [(0, 1), (3, 4), (4, 5), (7, 8)])
    assert sum(sizes) == 9


def test_cross_group_pairs_sample():
    assert cross_group_pairs(5, [(0, 1), (2, 3), (0, 4)]) == 6


def test_cross_group_pairs_connected_graph():
    assert cross_group_pairs(4, [(0, 1), (1, 2), (2, 3)]) == 0


def test_undirected_cycle_sample():
    assert has_undirected_cycle(4, [(0, 1), (1, 2), (2, 0)]) is True


def test_undirected_tree_has_no_cycle():
    assert has_undirected_cycle(5, [(0, 1), (0, 2), (2, 3), (2, 4)]) is False


def test_directed_cycle_sample():
    assert has_directed_cycle(4, [(0, 1), (1, 2), (2, 1)]) is True


def test_directed_dag_has_no_cycle():
    assert has_directed_cycle(3, [(0, 1), (0, 2), (2, 1)]) is False


def test_bipartite_sample_triangle():
    assert is_bipartite(3, [(0, 1), (1, 2), (2, 0)]) is False


def test_even_cycle_is_bipartite():
    assert is_bipartite(4, [(0, 1), (1, 2), (2, 3), (3, 0)]) is True


def test_topological_order_sample():
    assert topological_order(4, [(0, 1), (1, 2), (2, 3)]) == [0, 1, 2, 3]


def test_topological_order_respects_edges():
    edges = [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]
    order = topological_order(6, edges)
    position = {v: i for i, v in enumerate(order)}
    assert sorted(order) == list(range(6))
    for u, v in edges:
        assert position[u] < position[v]


def test_topological_order_rejects_cycle():
    with pytest.raises(ValueError):
        topological_order(3, [(0, 1), (1, 2), (2, 0)])