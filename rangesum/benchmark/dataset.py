from collections import namedtuple

import numpy as np

Operation = namedtuple("Operation", ["kind", "indices", "value"])

MIXES = {
    "point_only": ("point_update", "range_query"),
    "range_only": ("range_update", "range_query"),
    "mixed": ("point_update", "range_update", "range_query"),
}


class DatasetGenerator:
    """
    Generator of initial sequences and operation traces.
    """

    def __init__(self, seed=42):
        self.rng = np.random.RandomState(seed)

    def uniform(self, size, low=0.0, high=1000.0):
        return self.rng.uniform(low, high, size=size).tolist()

    def _sorted_pair(self, array_size):
        a, b = self.rng.randint(array_size, size=2)
        return (int(min(a, b)), int(max(a, b)))

    def queries(self, array_size, num_queries, mix="mixed"):
        if mix not in MIXES:
            raise ValueError(f"Unknown query mix: {mix}. Choose from {sorted(MIXES)}.")
        if array_size <= 0:
            raise ValueError("array_size must be positive.")

        kinds = MIXES[mix]
        queries = []
        for _ in range(num_queries):
            kind = kinds[self.rng.randint(len(kinds))]
            if kind == "range_query":
                queries.append(Operation(kind, self._sorted_pair(array_size), None))
            elif kind == "point_update":
                idx = int(self.rng.randint(array_size))
                queries.append(Operation(kind, (idx,), self.rng.uniform(0.0, 1000.0)))
            else:
                queries.append(Operation(kind, self._sorted_pair(array_size), self.rng.uniform(-100.0, 100.0)))
        return queries


def apply(structure, operation):
    """
    Run one operation record through the structure's interface. Returns the
    query result, or None for updates and for range updates the structure
    cannot perform.
    """
    kind, indices, value = operation
    if kind == "range_query":
        return structure.range_query(*indices)
    elif kind == "point_update":
        structure.point_update(indices[0], value)
    elif kind == "range_update":
        if structure.supports_range_update:
            structure.range_update(indices[0], indices[1], value)
    else:
        raise ValueError(f"Unknown operation: {kind}.")
    return None
