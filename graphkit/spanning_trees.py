"""Disjoint sets and minimum spanning trees."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

Edge = tuple[int, int, float]


class DisjointSet:
    """Union-find over the integers ``0..size-1``."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._size = [1] * size

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        parent = self._parent
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def union(self, x: int, y: int) -> bool:
        """Join the sets holding ``x`` and ``y``; return False if they were already one."""
        a, b = self.find(x), self.find(y)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True

    def same(self, x: int, y: int) -> bool:
        """Tell whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)


def _checked_edges(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    checked: list[Edge] = []
    for u, v, w in edges:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} is outside 0..{vertex_count - 1}")
        checked.append((u, v, w))
    return checked


def kruskal(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the edges of a minimum spanning forest, cheapest first."""
    sets = DisjointSet(vertex_count)
    chosen: list[Edge] = []
    for u, v, w in sorted(_checked_edges(vertex_count, edges), key=lambda edge: edge[2]):
        if sets.union(u, v):
            chosen.append((u, v, w))
            if len(chosen) == vertex_count - 1:
                break
    return chosen


def prim(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the edges of a minimum spanning forest grown outward from each unreached vertex."""
    adjacency: list[list[tuple[float, int]]] = [[] for _ in range(vertex_count)]
    for u, v, w in _checked_edges(vertex_count, edges):
        adjacency[u].append((w, v))
        adjacency[v].append((w, u))

    added = [False] * vertex_count
    chosen: list[Edge] = []
    for start in range(vertex_count):
        if added[start]:
            continue
        added[start] = True
        heap = [(w, start, v) for w, v in adjacency[start]]
        heapq.heapify(heap)
        while heap:
            w, u, v = heapq.heappop(heap)
            if added[v]:
                continue
            added[v] = True
            chosen.append((u, v, w))
            for weight, onward in adjacency[v]:
                if not added[onward]:
                    heapq.heappush(heap, (weight, v, onward))
    return chosen