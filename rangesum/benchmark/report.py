import math

COLUMNS = ("Data Structure", "Build Time (ms)", "Memory (bytes)", "Point Update (ms)", "Range Query (ms)", "Range Update (ms)")
WIDTHS = (20, 15, 18, 17, 16, 17)


def _row(cells):
    return " | ".join(f"{cell:<{width}}" for cell, width in zip(cells, WIDTHS))


def _ms(value, digits=5):
    return "N/A" if math.isnan(value) else f"{value:.{digits}f}"


def format_table(results, size):
    """
    Comparison table of {name: PerformanceMetrics} for one array size.
    """
    header = _row(COLUMNS)
    rule = "-" * len(header)
    lines = [f"Performance Comparison Table (N = {size})", rule, header, rule]
    for name, metrics in results.items():
        lines.append(
            _row(
                (
                    name,
                    _ms(metrics.build_time_ms, 2),
                    str(metrics.memory_bytes),
                    _ms(metrics.operation_time("point_update")),
                    _ms(metrics.operation_time("range_query")),
                    _ms(metrics.operation_time("range_update")),
                )
            )
        )
    lines.append(rule)
    return "\n".join(lines)


def summary():
    return "\n".join(
        [
            "Segment Tree:",
            "   - Build Time: O(N)",
            "   - Operations (Query/Update): O(log N)",
            "   - Memory: 2 arrays of 2 * 2^ceil(log2 N) - 1 elements",
            "   - Features: Point and range updates through lazy propagation.",
            "",
            "Fenwick Tree:",
            "   - Build Time: O(N) with optimized construction",
            "   - Operations (Query/Update): O(log N)",
            "   - Memory: N + 1 elements",
            "   - Features: Point updates and prefix sums. No range updates.",
            "",
            "Range-Optimized BIT:",
            "   - Build Time: O(N)",
            "   - Operations (Query/Update): O(log N)",
            "   - Memory: 2N + 2 elements (two Fenwick trees)",
            "   - Features: Range updates and range queries with less memory than a segment tree.",
        ]
    )
