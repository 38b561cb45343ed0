"""Heights and diameters of trees given as adjacency lists."""

from __future__ import annotations

from collections.abc import Sequence

from graphkit.traversal import bfs_distances

Adjacency = Sequence[Sequence[int]]


def leaf_heights(adjacency: Adjacency, root: int) -> list[int | None]:
    """Return, for each vertex, the edge count down to its deepest leaf when rooted at ``root``.

    Vertices not connected to ``root`` get None.
    """
    if not 0 <= root < len(adjacency):
        raise ValueError(f"root {root} is outside 0..{len(adjacency) - 1}")
    parent: dict[int, int | None] = {root: None}
    order = [root]
    for node in order:
        for neighbour in adjacency[node]:
            if neighbour not in parent:
                parent[neighbour] = node
                order.append(neighbour)

    heights: list[int | None] = [None] * len(adjacency)
    for node in reversed(order):
        below = [
            heights[child]
            for child in adjacency[node]
            if child != root and parent.get(child) == node
        ]
        heights[node] = 1 + max(below) if below else 0
    return heights


def farthest_node(adjacency: Adjacency, source: int) -> tuple[int, int]:
    """Return ``(vertex, distance)`` for the vertex farthest from ``source``, lowest index on ties."""
    if not 0 <= source < len(adjacency):
        raise ValueError(f"vertex {source} is outside 0..{len(adjacency) - 1}")
    distances = bfs_distances(adjacency, source)
    return max(
        ((vertex, d) for vertex, d in enumerate(distances) if d is not None),
        key=lambda pair: pair[1],
    )


def tree_diameter(adjacency: Adjacency) -> int:
    """Return the number of edges on the longest path in a tree, found with two searches."""
    if not adjacency:
        raise ValueError("a tree needs at least one vertex")
    end, _ = farthest_node(adjacency, 0)
    return farthest_node(adjacency, end)[1]