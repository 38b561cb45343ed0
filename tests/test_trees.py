import random

import pytest

from graphkit.trees import farthest_node, leaf_heights, tree_diameter


def _path(n):
    adjacency = [[] for _ in range(n)]
    for i in range(n - 1):
        adjacency[i].append(i + 1)
        adjacency[i + 1].append(i)
    return adjacency


def _star(n):
    adjacency = [list(range(1, n))] + [[0] for _ in range(n - 1)]
    return adjacency


def _random_tree(seed, n):
    rng = random.Random(seed)
    adjacency = [[] for _ in range(n)]
    for v in range(1, n):
        u = rng.randrange(v)
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def test_path_diameter():
    adjacency = _path(6)
    assert tree_diameter(adjacency) == len(adjacency) - 1


def test_star_diameter():
    assert tree_diameter(_star(7)) == 2


def test_single_vertex_diameter():
    assert tree_diameter([[]]) == 0


def test_empty_tree_rejected():
    with pytest.raises(ValueError):
        tree_diameter([])


def test_farthest_on_path_is_other_end():
    adjacency = _path(5)
    assert farthest_node(adjacency, 0) == (4, 4)


def test_farthest_ties_pick_lowest_index():
    adjacency = _star(5)
    assert farthest_node(adjacency, 0) == (1, 1)


def test_farthest_rejects_bad_vertex():
    with pytest.raises(ValueError):
        farthest_node(_path(3), 3)


def test_leaf_heights_leaves_are_zero():
    adjacency = _star(5)
    heights = leaf_heights(adjacency, 0)
    assert heights[1:] == [0, 0, 0, 0]
    assert heights[0] == 1


@pytest.mark.parametrize("seed", range(5))
def test_root_height_equals_farthest_distance(seed):
    adjacency = _random_tree(seed, 12)
    for root in range(12):
        assert leaf_heights(adjacency, root)[root] == farthest_node(adjacency, root)[1]


@pytest.mark.parametrize("seed", range(5))
def test_diameter_bounds_every_eccentricity(seed):
    adjacency = _random_tree(seed, 12)
    diameter = tree_diameter(adjacency)
    eccentricities = [farthest_node(adjacency, v)[1] for v in range(12)]
    assert max(eccentricities) == diameter


def test_leaf_heights_unreachable_are_none():
    adjacency = [[1], [0], []]
    assert leaf_heights(adjacency, 0)[2] is None
    assert leaf_heights(adjacency, 0)[0] == 1


def test_leaf_heights_rejects_bad_root():
    with pytest.raises(ValueError):
        leaf_heights(_path(2), 5)