import numpy as np

from rangesum.structure.base import RangeStructure


class SegmentTree(RangeStructure):
    """
    Sum segment tree with lazy propagation.

    Nodes live in two flat arrays indexed identically: _sums holds subtree
    totals and _pending holds per-element increments not yet applied to the
    node. The root is node 0 and the children of node k are 2k + 1 and
    2k + 2. Every traversal is written over (node, start, end) triples and
    pushes a node's pending increment down before looking at it.
    """

    name = "SegmentTree"
    supports_range_update = True

    def __init__(self, size):
        super(SegmentTree, self).__init__(size)
        if size == 0:
            self.tree_size = 0
        else:
            # ceil(log2(size)) levels below the root.
            height = (size - 1).bit_length()
            self.tree_size = 2 * (1 << height) - 1
        self._sums = np.zeros(self.tree_size, dtype=np.float64)
        self._pending = np.zeros(self.tree_size, dtype=np.float64)

    @classmethod
    def build(cls, sequence):
        tree = cls(len(sequence))
        if tree._n > 0:
            tree._build(sequence, 0, 0, tree._n - 1)
        return tree

    def _build(self, sequence, node, start, end):
        if start == end:
            self._sums[node] = sequence[start]
            return

        mid = (start + end) // 2
        left = 2 * node + 1
        self._build(sequence, left, start, mid)
        self._build(sequence, left + 1, mid + 1, end)
        self._sums[node] = self._sums[left] + self._sums[left + 1]

    def is_zero(self):
        return not (self._sums.any() or self._pending.any())

    def _accumulate(self, index, value):
        self.range_update(index, index, value)

    def _add_pending(self, node, value):
        # Accumulate, an ancestor may already have left an increment here.
        for child in (2 * node + 1, 2 * node + 2):
            if child < self.tree_size:
                self._pending[child] += value

    def _push_down(self, node, start, end):
        pending = self._pending[node]
        if pending == 0:
            return

        self._sums[node] += pending * (end - start + 1)
        if start != end:
            self._add_pending(node, pending)
        self._pending[node] = 0.0

    def range_update(self, l, r, value):
        """
        Add value to every element in [l, r] (0-based, inclusive).
        """
        l = max(l, 0)
        r = min(r, self._n - 1)
        if l > r:
            return
        self._range_update(0, 0, self._n - 1, l, r, value)

    def _range_update(self, node, start, end, l, r, value):
        if node >= self.tree_size:
            return

        self._push_down(node, start, end)

        # No overlap.
        if start > r or end < l:
            return

        # Complete overlap, defer the children.
        if l <= start and end <= r:
            self._sums[node] += value * (end - start + 1)
            if start != end:
                self._add_pending(node, value)
            return

        mid = (start + end) // 2
        left = 2 * node + 1
        right = left + 1
        self._range_update(left, start, mid, l, r, value)
        self._range_update(right, mid + 1, end, l, r, value)

        left_sum = self._sums[left] if left < self.tree_size else 0.0
        right_sum = self._sums[right] if right < self.tree_size else 0.0
        self._sums[node] = left_sum + right_sum

    def range_sum(self, l, r):
        l = max(l, 0)
        r = min(r, self._n - 1)
        if l > r:
            return 0.0
        return float(self._range_sum(0, 0, self._n - 1, l, r))

    def _range_sum(self, node, start, end, l, r):
        if node >= self.tree_size:
            return 0.0

        self._push_down(node, start, end)

        if start > r or end < l:
            return 0.0

        if l <= start and end <= r:
            return self._sums[node]

        mid = (start + end) // 2
        left = 2 * node + 1
        return self._range_sum(left, start, mid, l, r) + self._range_sum(left + 1, mid + 1, end, l, r)

    def point_update(self, index, new_value):
        delta = new_value - self.range_sum(index, index)
        self.range_update(index, index, delta)

    def memory_footprint(self):
        return self._sums.nbytes + self._pending.nbytes
