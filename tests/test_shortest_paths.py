import math
import random

import pytest

from graphkit.shortest_paths import (
    bellman_ford,
    dag_shortest_paths,
    dijkstra,
    floyd_warshall,
    has_negative_cycle,
    spfa,
)

INF = math.inf

EXAMPLE_MATRIX = [
    [0, INF, -2, INF],
    [4, 0, 3, INF],
    [INF, INF, 0, 2],
    [INF, -1, INF, 0],
]


def _random_edges(seed, n, count, low, high):
    rng = random.Random(seed)
    return [(rng.randrange(n), rng.randrange(n), rng.randint(low, high)) for _ in range(count)]


def _random_dag(seed, n, count):
    rng = random.Random(seed)
    edges = []
    for _ in range(count):
        u, v = sorted(rng.sample(range(n), 2))
        edges.append((u, v, rng.randint(-5, 10)))
    return edges


def _matrix(n, edges):
    matrix = [[INF] * n for _ in range(n)]
    for i in range(n):
        matrix[i][i] = 0
    for u, v, w in edges:
        matrix[u][v] = min(matrix[u][v], w)
    return matrix


def test_floyd_warshall_example():
    assert floyd_warshall(EXAMPLE_MATRIX) == [
        [0, -1, -2, 0],
        [4, 0, 2, 4],
        [5, 1, 0, 2],
        [3, -1, 1, 0],
    ]


def test_floyd_warshall_leaves_input_unchanged():
    copy = [list(row) for row in EXAMPLE_MATRIX]
    floyd_warshall(EXAMPLE_MATRIX)
    assert EXAMPLE_MATRIX == copy


def test_no_negative_cycle_in_example():
    assert has_negative_cycle(floyd_warshall(EXAMPLE_MATRIX)) is False


def test_negative_cycle_detected():
    matrix = [[0, 1], [-3, 0]]
    assert has_negative_cycle(floyd_warshall(matrix)) is True


def test_floyd_warshall_rejects_non_square():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])


def test_bellman_ford_small_graph():
    assert bellman_ford(3, [(0, 1, 4), (1, 2, -2), (0, 2, 5)], 0) == [0, 4, 2]


def test_unreachable_vertices_are_infinite():
    edges = [(0, 1, 3)]
    for result in (bellman_ford(3, edges, 0), spfa(3, edges, 0), dag_shortest_paths(3, edges, 0)):
        assert result[2] == INF
        assert result[0] == 0


@pytest.mark.parametrize("seed", range(5))
def test_bellman_ford_and_spfa_agree(seed):
    edges = _random_edges(seed, 8, 20, 0, 9)
    assert bellman_ford(8, edges, 0) == spfa(8, edges, 0)


@pytest.mark.parametrize("seed", range(5))
def test_dijkstra_matches_bellman_ford(seed):
    edges = _random_edges(seed, 8, 20, 0, 9)
    adjacency = [[] for _ in range(8)]
    for u, v, w in edges:
        adjacency[u].append((v, w))
    assert dijkstra(adjacency, 0) == bellman_ford(8, edges, 0)


@pytest.mark.parametrize("seed", range(5))
def test_dag_shortest_paths_match_bellman_ford(seed):
    edges = _random_dag(seed, 8, 15)
    assert dag_shortest_paths(8, edges, 0) == bellman_ford(8, edges, 0)


@pytest.mark.parametrize("seed", range(3))
def test_floyd_warshall_rows_match_single_source(seed):
    edges = _random_edges(seed, 6, 14, 0, 9)
    all_pairs = floyd_warshall(_matrix(6, edges))
    for source in range(6):
        assert all_pairs[source] == bellman_ford(6, edges, source)


@pytest.mark.parametrize("seed", range(3))
def test_distances_satisfy_edge_inequality(seed):
    edges = _random_dag(seed, 8, 15)
    dist = spfa(8, edges, 0)
    for u, v, w in edges:
        assert dist[v] <= dist[u] + w


def test_spfa_raises_on_negative_cycle():
    with pytest.raises(ValueError):
        spfa(3, [(0, 1, 1), (1, 2, -2), (2, 1, 1)], 0)


def test_dijkstra_rejects_negative_weight():
    with pytest.raises(ValueError):
        dijkstra([[(1, -1)], []], 0)


@pytest.mark.parametrize("func", [bellman_ford, spfa, dag_shortest_paths])
def test_vertex_out_of_range(func):
    with pytest.raises(ValueError):
        func(2, [(0, 5, 1)], 0)