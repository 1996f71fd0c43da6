import numpy as np
import pytest

from rangesum.structure import ELEMENT_SIZE, SegmentTree


def test_build():
    tree = SegmentTree.build([1.0, 2.0, 3.0, 4.0, 5.0])

    assert tree.tree_size == 15
    assert np.isclose(tree.range_query(0, 4), 15.0)
    assert np.isclose(tree.range_query(1, 3), 9.0)
    assert np.isclose(tree.range_sum(0, 0), 1.0)


def test_range_update():
    tree = SegmentTree.build([1.0, 2.0, 3.0, 4.0, 5.0])
    tree.range_update(1, 3, 10.0)

    assert np.isclose(tree.range_query(1, 3), 39.0)
    assert np.isclose(tree.range_query(0, 0), 1.0)
    assert np.isclose(tree.range_query(4, 4), 5.0)
    assert np.isclose(tree.range_query(2, 2), 13.0)
    assert np.isclose(tree.range_query(0, 4), 45.0)


def test_pending_accumulates():
    tree = SegmentTree.build([0.0] * 8)
    tree.range_update(0, 7, 1.0)
    tree.range_update(0, 7, 2.0)

    # Children of the root carry both increments before being visited.
    assert np.isclose(tree._pending[1], 3.0)
    assert np.isclose(tree._pending[2], 3.0)

    tree.range_update(0, 3, 4.0)
    assert np.isclose(tree.range_query(0, 0), 7.0)
    assert np.isclose(tree.range_query(4, 7), 12.0)
    assert np.isclose(tree.range_query(0, 7), 40.0)


def test_push_down():
    tree = SegmentTree.build([1.0, 2.0, 3.0, 4.0])
    tree._pending[1] = 2.0
    tree._push_down(1, 0, 1)

    assert tree._pending[1] == 0.0
    assert np.isclose(tree._sums[1], 7.0)
    assert np.isclose(tree._pending[3], 2.0)
    assert np.isclose(tree._pending[4], 2.0)

    # Clean node.
    tree._push_down(1, 0, 1)
    assert np.isclose(tree._sums[1], 7.0)


def test_point_update():
    tree = SegmentTree.build([1.0, 2.0, 3.0, 4.0, 5.0])
    tree.range_update(0, 4, 1.0)
    tree.point_update(3, -2.0)

    assert np.isclose(tree.range_query(3, 3), -2.0)
    assert np.isclose(tree.range_query(0, 4), 2.0 + 3.0 + 4.0 - 2.0 + 6.0)


@pytest.mark.parametrize(
    "l, r",
    [
        (3, 1),
        (-3, -1),
        (5, 9),
    ],
)
def test_empty_ranges(l, r):
    tree = SegmentTree.build([1.0, 2.0, 3.0, 4.0, 5.0])
    tree.range_update(l, r, 100.0)

    assert tree.range_query(l, r) == 0.0
    assert np.isclose(tree.range_query(0, 4), 15.0)


def test_single_element():
    tree = SegmentTree.build([3.0])
    tree.range_update(0, 0, 2.0)

    assert tree.tree_size == 1
    assert np.isclose(tree.range_query(0, 0), 5.0)
    assert np.isclose(tree.range_query(-1, 1), 5.0)


def test_empty_tree():
    tree = SegmentTree.build([])
    tree.range_update(0, 3, 1.0)
    tree.point_update(0, 1.0)

    assert tree.tree_size == 0
    assert tree.range_query(0, 3) == 0.0
    assert tree.memory_footprint() == 0


@pytest.mark.parametrize("size", [1, 3, 8, 17, 64])
def test_build_matches_naive(size):
    data = np.random.RandomState(size).uniform(-10.0, 10.0, size=size).tolist()
    fast = SegmentTree.build(data)
    naive = SegmentTree.build_naive(data)

    for l in range(size):
        assert np.isclose(fast.range_query(0, l), naive.range_query(0, l))
        assert np.isclose(fast.range_query(l, l), data[l])


@pytest.mark.parametrize(
    "size, tree_size",
    [
        (1, 1),
        (2, 3),
        (5, 15),
        (8, 15),
        (9, 31),
        (1000, 2047),
    ],
)
def test_memory_footprint(size, tree_size):
    tree = SegmentTree.build([1.0] * size)

    assert tree.tree_size == tree_size
    assert tree.tree_size >= 2 * size - 1
    assert tree.memory_footprint() == 2 * tree_size * ELEMENT_SIZE
