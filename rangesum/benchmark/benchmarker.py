import os
from collections import defaultdict
from datetime import timedelta
from time import perf_counter, time

import numpy as np
import pandas as pd
from tensorboardX import SummaryWriter
from tqdm import tqdm

from rangesum import STRUCTURES
from rangesum.benchmark.dataset import DatasetGenerator, apply
from rangesum.benchmark.metrics import PerformanceMetrics


class Benchmarker:
    """
    Benchmarker comparing range-sum structures on the same data and queries.
    """

    def __init__(
        self,
        structures=None,
        log_dir=None,
        naive=False,
        seed=42,
    ):
        self.structures = list(STRUCTURES.values()) if structures is None else list(structures)
        self.naive = naive
        self.seed = seed

        # Log setting.
        self.log = defaultdict(list)
        self.log_dir = log_dir
        if log_dir is not None:
            if not os.path.exists(log_dir):
                os.makedirs(log_dir)
            self.csv_path = os.path.join(log_dir, "log.csv")
            self.writer = SummaryWriter(log_dir=os.path.join(log_dir, "summary"))
        else:
            self.csv_path = None
            self.writer = None

    def benchmark_build(self, cls, data):
        builder = cls.build_naive if self.naive else cls.build
        start = perf_counter()
        structure = builder(data)
        build_time_ms = (perf_counter() - start) * 1000.0
        return structure, build_time_ms

    def benchmark_operations(self, structure, queries):
        times = defaultdict(list)
        for query in queries:
            # Not applicable rather than a failure, so it is reported as N/A.
            if query.kind == "range_update" and not structure.supports_range_update:
                continue
            start = perf_counter()
            apply(structure, query)
            times[query.kind].append((perf_counter() - start) * 1000.0)
        return {kind: float(np.mean(t)) for kind, t in times.items()}

    def compare(self, data, queries):
        results = {}
        for cls in self.structures:
            structure, build_time_ms = self.benchmark_build(cls, data)
            memory_bytes = structure.memory_footprint()
            operation_times_ms = self.benchmark_operations(structure, queries)
            results[cls.name] = PerformanceMetrics(build_time_ms, memory_bytes, operation_times_ms)
        return results

    def run(self, sizes, num_queries, mix="mixed"):
        # Time to start benchmarking.
        self.start_time = time()
        generator = DatasetGenerator(self.seed)
        all_results = {}

        bar = tqdm(sizes)
        for size in bar:
            bar.set_description(f"Benchmarking N={size}")
            data = generator.uniform(size)
            queries = generator.queries(size, num_queries, mix)
            results = self.compare(data, queries)
            self._log(size, results)
            all_results[size] = results

        if self.writer is not None:
            self.writer.flush()
        return all_results, pd.DataFrame(self.log)

    def _log(self, size, results):
        for name, metrics in results.items():
            row = metrics.to_dict()
            self.log["size"].append(size)
            self.log["structure"].append(name)
            for key, value in row.items():
                self.log[key].append(value)

            # To TensorBoard.
            if self.writer is not None:
                for key, value in row.items():
                    if not np.isnan(value):
                        self.writer.add_scalar(f"{key}/{name}", value, size)

        # To CSV.
        if self.csv_path is not None:
            pd.DataFrame(self.log).to_csv(self.csv_path, index=False)

        # Log to standard output.
        print(f"Array size: {size:<8}   Structures: {len(results)}   Time: {self.time}")

    @property
    def time(self):
        return str(timedelta(seconds=int(time() - self.start_time)))
