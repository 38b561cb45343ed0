"""Breadth-first, depth-first and related graph traversals."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence

Adjacency = Sequence[Sequence[int]]


def _bfs_from(adjacency: Adjacency, source: int, visited: list[bool]) -> Iterator[int]:
    visited[source] = True
    queue = deque([source])
    while queue:
        node = queue.popleft()
        yield node
        for neighbour in adjacency[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)


def bfs_distances(adjacency: Adjacency, source: int) -> list[int | None]:
    """Return the edge count from ``source`` to every vertex, None where unreachable."""
    distances: list[int | None] = [None] * len(adjacency)
    distances[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if distances[neighbour] is None:
                distances[neighbour] = distances[node] + 1
                queue.append(neighbour)
    return distances


def bfs_order(adjacency: Adjacency, source: int) -> list[int]:
    """Return the vertices reachable from ``source`` in breadth-first order."""
    return list(_bfs_from(adjacency, source, [False] * len(adjacency)))


def bfs_all(adjacency: Adjacency) -> list[int]:
    """Return a breadth-first order covering every vertex, restarting at each unvisited one."""
    visited = [False] * len(adjacency)
    order: list[int] = []
    for vertex in range(len(adjacency)):
        if not visited[vertex]:
            order.extend(_bfs_from(adjacency, vertex, visited))
    return order


def dfs_sum(adjacency: Adjacency, source: int) -> int:
    """Return the sum of the indices of all vertices reachable from ``source``."""
    seen = {source}
    stack = [source]
    while stack:
        node = stack.pop()
        for neighbour in adjacency[node]:
            if neighbour not in seen:
                seen.add(neighbour)
                stack.append(neighbour)
    return sum(seen)


def count_components(vertex_count: int, edges: Iterable[tuple[int, int]]) -> int:
    """Count connected components of an undirected graph with vertices 1..vertex_count."""
    adjacency: list[list[int]] = [[] for _ in range(vertex_count + 1)]
    for u, v in edges:
        for vertex in (u, v):
            if not 1 <= vertex <= vertex_count:
                raise ValueError(f"vertex {vertex} is outside 1..{vertex_count}")
        adjacency[u].append(v)
        adjacency[v].append(u)

    visited = [False] * (vertex_count + 1)
    components = 0
    for vertex in range(1, vertex_count + 1):
        if not visited[vertex]:
            for _ in _bfs_from(adjacency, vertex, visited):
                pass
            components += 1
    return components


def _undirected(vertex_count: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for edge in edges:
        u, v = edge[0], edge[1]
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} is outside 0..{vertex_count - 1}")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} is outside 0..{vertex_count - 1}")


def _expand(adjacency: list[list[int]], queue: deque[int], parent: dict[int, int | None]) -> None:
    current = queue.popleft()
    for neighbour in adjacency[current]:
        if neighbour not in parent:
            parent[neighbour] = current
            queue.append(neighbour)


def bidirectional_search(
    vertex_count: int, edges: Iterable[tuple[int, int]], source: int, target: int
) -> list[int] | None:
    """Find a path between two vertices by searching from both ends; None if there is none."""
    adjacency = _undirected(vertex_count, edges)
    _check_vertex(source, vertex_count)
    _check_vertex(target, vertex_count)

    s_parent: dict[int, int | None] = {source: None}
    t_parent: dict[int, int | None] = {target: None}
    s_queue = deque([source])
    t_queue = deque([target])

    while s_queue and t_queue:
        _expand(adjacency, s_queue, s_parent)
        _expand(adjacency, t_queue, t_parent)
        meeting = min((v for v in s_parent if v in t_parent), default=None)
        if meeting is not None:
            front: list[int] = []
            node: int | None = meeting
            while node is not None:
                front.append(node)
                node = s_parent[node]
            front.reverse()
            node = t_parent[meeting]
            while node is not None:
                front.append(node)
                node = t_parent[node]
            return front
    return None


def best_first_search(
    vertex_count: int, edges: Iterable[tuple[int, int, int]], source: int, target: int
) -> list[int]:
    """Return the vertices in the order a greedy cheapest-edge-first search visits them."""
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for x, y, cost in edges:
        _check_vertex(x, vertex_count)
        _check_vertex(y, vertex_count)
        adjacency[x].append((cost, y))
        adjacency[y].append((cost, x))
    _check_vertex(source, vertex_count)

    visited = {source}
    heap = [(0, source)]
    order: list[int] = []
    while heap:
        _, node = heapq.heappop(heap)
        order.append(node)
        if node == target:
            break
        for cost, neighbour in adjacency[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                heapq.heappush(heap, (cost, neighbour))
    return order


def topological_sort(
    graph: Mapping[Hashable, Iterable[Hashable]],
    vertices: Iterable[Hashable] | None = None,
) -> list[Hashable]:
    """Order vertices so each comes before its successors, by reverse depth-first post-order.

    ``vertices`` gives the order in which searches are started; by default every
    vertex named in ``graph``, keys first.
    """
    if vertices is None:
        named: dict[Hashable, None] = dict.fromkeys(graph)
        for successors in graph.values():
            named.update(dict.fromkeys(successors))
        vertices = named

    visited: set[Hashable] = set()
    finished: list[Hashable] = []
    for start in vertices:
        if start in visited:
            continue
        visited.add(start)
        stack = [(start, iter(graph.get(start, ())))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if child not in visited:
                    visited.add(child)
                    stack.append((child, iter(graph.get(child, ()))))
                    break
            else:
                stack.pop()
                finished.append(node)
    finished.reverse()
    return finished