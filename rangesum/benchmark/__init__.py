from .benchmarker import Benchmarker
from .dataset import MIXES, DatasetGenerator, Operation, apply
from .metrics import PerformanceMetrics
from .report import format_table, summary
