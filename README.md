# graphkit

A small collection of classic graph algorithms that work on plain Python
data: adjacency lists, edge lists and distance matrices. There are no
dependencies outside the standard library.

## Installation

From a checkout of the project:

```
pip install .
```

## Modules

### `graphkit.traversal`

- `bfs_distances(adjacency, source)`: edge counts from `source`, `None` for
  unreachable vertices.
- `bfs_order(adjacency, source)`: vertices reachable from `source`, in
  breadth-first order.
- `bfs_all(adjacency)`: a breadth-first order over every vertex, restarting at
  each vertex not yet visited.
- `dfs_sum(adjacency, source)`: the sum of the indices of all vertices
  reachable from `source`.
- `count_components(vertex_count, edges)`: the number of connected components
  of an undirected graph whose vertices are numbered `1..vertex_count`.
- `bidirectional_search(vertex_count, edges, source, target)`: a path between
  two vertices of an undirected graph, searched from both ends at once;
  `None` if there is no path.
- `best_first_search(vertex_count, edges, source, target)`: the order in which
  a greedy search, always taking the cheapest waiting edge, visits vertices
  until it reaches `target`. Edges are `(x, y, cost)` and undirected.
- `topological_sort(graph, vertices=None)`: reverse depth-first post-order of a
  mapping from vertex to successors. `vertices` sets the order in which
  searches start; by default every vertex named in the mapping, keys first.

### `graphkit.shortest_paths`

Edges are `(u, v, weight)` and directed. Unreachable vertices get `math.inf`.

- `bellman_ford(vertex_count, edges, source)`
- `spfa(vertex_count, edges, source)`: raises `ValueError` when a negative
  cycle is reachable from `source`.
- `dijkstra(adjacency, source)`: `adjacency[u]` lists `(neighbour, weight)`
  pairs; negative weights raise `ValueError`.
- `floyd_warshall(matrix)`: all-pairs distances from a square weight matrix in
  which `math.inf` marks a missing edge. The input is not modified.
- `has_negative_cycle(distances)`: whether an all-pairs distance matrix has a
  negative entry on its diagonal.
- `dag_shortest_paths(vertex_count, edges, source)`: distances in a directed
  acyclic graph, relaxing edges in topological order.

### `graphkit.spanning_trees`

- `DisjointSet(size)`: union-find over `0..size-1`, with `find(x)`,
  `union(x, y)` (returns `False` if the two were already joined) and
  `same(x, y)`.
- `kruskal(vertex_count, edges)`: edges of a minimum spanning forest,
  cheapest first.
- `prim(vertex_count, edges)`: edges of a minimum spanning forest, grown
  outward from each vertex not yet reached.

### `graphkit.trees`

- `leaf_heights(adjacency, root)`: for each vertex, the edge count down to its
  deepest leaf when the tree is rooted at `root`; `None` for vertices not
  connected to it.
- `farthest_node(adjacency, source)`: `(vertex, distance)` of the vertex
  farthest from `source`, lowest index on ties.
- `tree_diameter(adjacency)`: edges on the longest path of a tree, found with
  two breadth-first searches.

### `graphkit.grids`

- `max_area_of_island(grid)`: size of the largest 4-connected group of cells
  equal to `1`. The grid is not modified.
- `word_exists(board, word)`: whether `word` can be spelled along a path of
  horizontally or vertically adjacent cells, each used at most once.

### `graphkit.sequences`

- `fibonacci(n)`: the n-th Fibonacci number, with `fibonacci(0) == 0`; a
  negative `n` raises `ValueError`.
- `fibonacci_series(count)`: the first `count` Fibonacci numbers.

Vertex numbers outside the graph raise `ValueError` throughout.

## Examples

```python
from graphkit.traversal import bfs_order, topological_sort
from graphkit.grids import max_area_of_island
from graphkit.sequences import fibonacci_series

adjacency = [[1, 2], [3], [3], []]
print(bfs_order(adjacency, 0))          # [0, 1, 2, 3]

graph = {"a": ["b"], "b": ["c"]}
print(topological_sort(graph, ["a", "b", "c"]))  # ['a', 'b', 'c']

print(max_area_of_island([[1, 1, 0], [0, 1, 0], [0, 0, 1]]))  # 3

print(fibonacci_series(7))              # [0, 1, 1, 2, 3, 5, 8]
```

## Command line

Print the first terms of the Fibonacci series:

```
graphkit-fibonacci 10
```

Without a count, the command asks for one on standard input.

## What it does not do

The graph algorithms are functions to call from Python only. There is no
command that runs them, and nothing reads graphs from files or standard
input; build the adjacency lists, edge lists or matrices in your own code.

## Running the tests

```
pip install ".[test]"
pytest
```