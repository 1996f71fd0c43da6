from rangesum.structure import FenwickTree, RangeOptimizedBIT, SegmentTree

STRUCTURES = {
    "segment_tree": SegmentTree,
    "fenwick_tree": FenwickTree,
    "range_bit": RangeOptimizedBIT,
}
