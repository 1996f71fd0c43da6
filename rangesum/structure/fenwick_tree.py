import numpy as np

from rangesum.structure.base import RangeStructure


class FenwickTree(RangeStructure):
    """
    Fenwick tree (binary indexed tree) over a sequence of floats.

    Slot i of the 1-indexed backing array holds the sum of the i & -i
    elements ending at position i, so both prefix sums and point updates
    walk at most log(n) slots. Slot 0 is unused.

    Range updates are not supported, use RangeOptimizedBIT or SegmentTree.
    """

    name = "FenwickTree"
    supports_range_update = False

    def __init__(self, size):
        super(FenwickTree, self).__init__(size)
        self._tree = np.zeros(size + 1, dtype=np.float64)

    @classmethod
    def build(cls, sequence):
        """
        Build in O(n) by pushing each slot into its parent once.
        """
        fenwick = cls(len(sequence))
        n = fenwick._n
        fenwick._tree[1:] = sequence

        for i in range(1, n + 1):
            parent = i + (i & -i)
            if parent <= n:
                fenwick._tree[parent] += fenwick._tree[i]
        return fenwick

    def is_zero(self):
        return not self._tree.any()

    def _accumulate(self, index, value):
        self.update(index, value)

    def update(self, index, delta):
        """
        Add delta to the element at index (0-based).
        """
        if index < 0:
            return

        # Convert to 1-based indexing.
        i = index + 1
        while i <= self._n:
            self._tree[i] += delta
            i += i & -i

    def prefix_sum(self, index):
        """
        Sum of the elements from 0 to index, inclusive.
        """
        if index < 0:
            return 0.0
        index = min(index, self._n - 1)

        i = index + 1
        res = 0.0
        while i > 0:
            res += self._tree[i]
            i -= i & -i
        return float(res)

    def range_sum(self, l, r):
        if l > r or r < 0 or l >= self._n:
            return 0.0
        if l <= 0:
            return self.prefix_sum(r)
        return self.prefix_sum(r) - self.prefix_sum(l - 1)

    def point_update(self, index, new_value):
        delta = new_value - self.range_sum(index, index)
        self.update(index, delta)

    def memory_footprint(self):
        return self._tree.size * self._tree.itemsize
