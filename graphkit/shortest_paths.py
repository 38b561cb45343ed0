"""Single-source and all-pairs shortest path algorithms."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence

from graphkit.traversal import topological_sort

Edge = tuple[int, int, float]


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} is outside 0..{vertex_count - 1}")


def _checked_edges(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    checked: list[Edge] = []
    for u, v, w in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        checked.append((u, v, w))
    return checked


def _directed(vertex_count: int, edges: Iterable[Edge]) -> list[list[tuple[int, float]]]:
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(vertex_count)]
    for u, v, w in _checked_edges(vertex_count, edges):
        adjacency[u].append((v, w))
    return adjacency


def bellman_ford(vertex_count: int, edges: Iterable[Edge], source: int) -> list[float]:
    """Return distances from ``source`` over directed edges; unreachable vertices get inf.

    Every edge is relaxed ``vertex_count - 1`` times, stopping early once nothing changes.
    """
    edge_list = _checked_edges(vertex_count, edges)
    _check_vertex(source, vertex_count)
    dist = [math.inf] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count - 1):
        changed = False
        for u, v, w in edge_list:
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                changed = True
        if not changed:
            break
    return dist


def spfa(vertex_count: int, edges: Iterable[Edge], source: int) -> list[float]:
    """Return distances from ``source`` using a queue of vertices whose distance dropped.

    Raises ValueError when a negative cycle is reachable from ``source``.
    """
    adjacency = _directed(vertex_count, edges)
    _check_vertex(source, vertex_count)
    dist = [math.inf] * vertex_count
    dist[source] = 0
    queued = [False] * vertex_count
    enqueued = [0] * vertex_count
    queue = deque([source])
    queued[source] = True
    while queue:
        u = queue.popleft()
        queued[u] = False
        for v, w in adjacency[u]:
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                if not queued[v]:
                    enqueued[v] += 1
                    if enqueued[v] >= vertex_count:
                        raise ValueError("negative cycle reachable from the source")
                    queued[v] = True
                    queue.append(v)
    return dist


def dijkstra(adjacency: Sequence[Sequence[tuple[int, float]]], source: int) -> list[float]:
    """Return distances from ``source``; ``adjacency[u]`` lists ``(neighbour, weight)`` pairs.

    Weights must be non-negative; unreachable vertices get inf.
    """
    vertex_count = len(adjacency)
    _check_vertex(source, vertex_count)
    for neighbours in adjacency:
        for v, w in neighbours:
            _check_vertex(v, vertex_count)
            if w < 0:
                raise ValueError(f"negative edge weight {w} is not allowed")

    dist = [math.inf] * vertex_count
    dist[source] = 0
    done = [False] * vertex_count
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if done[u]:
            continue
        done[u] = True
        for v, w in adjacency[u]:
            if d + w < dist[v]:
                dist[v] = d + w
                heapq.heappush(heap, (dist[v], v))
    return dist


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return all-pairs distances from a square weight matrix; inf marks a missing edge.

    The input is not modified.
    """
    dist = [list(row) for row in matrix]
    size = len(dist)
    if any(len(row) != size for row in dist):
        raise ValueError("the weight matrix must be square")
    for k in range(size):
        row_k = dist[k]
        for row in dist:
            through = row[k]
            if through == math.inf:
                continue
            for j, onward in enumerate(row_k):
                if through + onward < row[j]:
                    row[j] = through + onward
    return dist


def has_negative_cycle(distances: Sequence[Sequence[float]]) -> bool:
    """Tell whether an all-pairs distance matrix shows a vertex reaching itself below zero."""
    return any(row[i] < 0 for i, row in enumerate(distances))


def dag_shortest_paths(vertex_count: int, edges: Iterable[Edge], source: int) -> list[float]:
    """Return distances from ``source`` in a directed acyclic graph by relaxing in topological order."""
    adjacency = _directed(vertex_count, edges)
    _check_vertex(source, vertex_count)
    successors = {u: [v for v, _ in neighbours] for u, neighbours in enumerate(adjacency)}
    order = topological_sort(successors, range(vertex_count))

    dist = [math.inf] * vertex_count
    dist[source] = 0
    for u in order:
        if dist[u] == math.inf:
            continue
        for v, w in adjacency[u]:
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
    return dist