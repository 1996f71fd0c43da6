from .base import ELEMENT_SIZE, RangeStructure
from .fenwick_tree import FenwickTree
from .range_bit import RangeOptimizedBIT
from .segment_tree import SegmentTree
