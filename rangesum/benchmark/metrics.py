import math


class PerformanceMetrics:
    """
    Build time, memory and average operation times of one structure.
    """

    def __init__(
        self,
        build_time_ms,
        memory_bytes,
        operation_times_ms,
    ):
        self.build_time_ms = build_time_ms
        self.memory_bytes = memory_bytes
        self.operation_times_ms = dict(operation_times_ms)

    def operation_time(self, kind):
        # NaN marks operations the structure could not perform.
        return self.operation_times_ms.get(kind, math.nan)

    def to_dict(self):
        return {
            "build_time_ms": self.build_time_ms,
            "memory_bytes": self.memory_bytes,
            "point_update_ms": self.operation_time("point_update"),
            "range_query_ms": self.operation_time("range_query"),
            "range_update_ms": self.operation_time("range_update"),
        }

    def __str__(self):
        return f"Build Time: {self.build_time_ms:.2f} ms, Memory: {self.memory_bytes} bytes, Ops: {self.operation_times_ms}"
