from abc import ABC, abstractmethod

import numpy as np

ELEMENT_SIZE = np.dtype(np.float64).itemsize


class RangeStructure(ABC):
    """
    Base class for range-sum structures.
    """

    name = None
    supports_range_update = False

    def __init__(self, size):
        assert size >= 0, "size must be non-negative"
        self._n = size

    @classmethod
    @abstractmethod
    def build(cls, sequence):
        pass

    @classmethod
    def build_naive(cls, sequence):
        """
        Build with one update per element, starting from a zeroed structure.
        """
        structure = cls(len(sequence))
        assert structure.is_zero(), "naive construction requires a zeroed structure"
        for i, value in enumerate(sequence):
            structure._accumulate(i, float(value))
        return structure

    @abstractmethod
    def is_zero(self):
        pass

    @abstractmethod
    def _accumulate(self, index, value):
        pass

    @abstractmethod
    def range_sum(self, l, r):
        pass

    def range_query(self, l, r):
        return self.range_sum(l, r)

    def range_update(self, l, r, value):
        raise NotImplementedError(f"{self.name} does not support range updates.")

    @abstractmethod
    def point_update(self, index, new_value):
        pass

    @abstractmethod
    def memory_footprint(self):
        pass

    def __len__(self):
        return self._n

    def __str__(self):
        return self.name
