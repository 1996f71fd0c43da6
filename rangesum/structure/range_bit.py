import numpy as np

from rangesum.structure.base import RangeStructure
from rangesum.structure.fenwick_tree import FenwickTree


class RangeOptimizedBIT(RangeStructure):
    """
    Range-update / range-query BIT built from two Fenwick trees.

    Adding v to [l, r] turns the sequence's prefix sums into a piecewise-linear
    function of the position. tree1 keeps the difference array of the slopes
    and tree2 the matching offsets, so that

        prefix_sum(i) = tree1.prefix_sum(i) * (i + 1) - tree2.prefix_sum(i)
    """

    name = "RangeOptimizedBIT"
    supports_range_update = True

    def __init__(self, size):
        super(RangeOptimizedBIT, self).__init__(size)
        self.tree1 = FenwickTree(size)
        self.tree2 = FenwickTree(size)

    @classmethod
    def build(cls, sequence):
        robit = cls(len(sequence))
        if robit._n == 0:
            return robit

        # Difference array, whose prefix sums give back the sequence.
        values = np.asarray(sequence, dtype=np.float64)
        diff = np.empty_like(values)
        diff[0] = values[0]
        diff[1:] = values[1:] - values[:-1]

        # Element j adds d[j] over [j, n - 1], whose correction term is d[j] * j.
        robit.tree1 = FenwickTree.build(diff)
        robit.tree2 = FenwickTree.build(diff * np.arange(robit._n))
        return robit

    def is_zero(self):
        return self.tree1.is_zero() and self.tree2.is_zero()

    def _accumulate(self, index, value):
        self.range_update(index, index, value)

    def range_update(self, l, r, value):
        """
        Add value to every element in [l, r] (0-based, inclusive).
        """
        l = max(l, 0)
        r = min(r, self._n - 1)
        if l > r:
            return

        self.tree1.update(l, value)
        self.tree2.update(l, value * l)
        if r + 1 < self._n:
            self.tree1.update(r + 1, -value)
            self.tree2.update(r + 1, -value * (r + 1))

    def prefix_sum(self, index):
        if index < 0:
            return 0.0
        index = min(index, self._n - 1)
        return self.tree1.prefix_sum(index) * (index + 1) - self.tree2.prefix_sum(index)

    def range_sum(self, l, r):
        if l > r or r < 0 or l >= self._n:
            return 0.0
        if l <= 0:
            return self.prefix_sum(r)
        return self.prefix_sum(r) - self.prefix_sum(l - 1)

    def point_update(self, index, new_value):
        delta = new_value - self.range_sum(index, index)
        self.range_update(index, index, delta)

    def memory_footprint(self):
        return self.tree1.memory_footprint() + self.tree2.memory_footprint()
