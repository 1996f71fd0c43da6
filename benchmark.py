import argparse
import os
from datetime import datetime

from rangesum.benchmark import MIXES, Benchmarker, format_table, summary


def run(args):
    if args.no_log:
        log_dir = None
    else:
        time = datetime.now().strftime("%Y%m%d-%H%M")
        log_dir = args.log_dir or os.path.join("logs", args.mix, f"seed{args.seed}-{time}")

    benchmarker = Benchmarker(
        log_dir=log_dir,
        naive=args.naive,
        seed=args.seed,
    )
    results, _ = benchmarker.run(
        sizes=args.sizes,
        num_queries=args.num_queries,
        mix=args.mix,
    )

    for size, metrics in results.items():
        print()
        print(format_table(metrics, size))
    print()
    print(summary())


def positive_int(value):
    value = int(value)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"{value} is not a positive integer")
    return value


if __name__ == "__main__":
    p = argparse.ArgumentParser()
    p.add_argument("--sizes", type=positive_int, nargs="+", default=[10 ** 4])
    p.add_argument("--num_queries", type=int, default=1000)
    p.add_argument("--mix", type=str, default="mixed", choices=sorted(MIXES))
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--naive", action="store_true")
    p.add_argument("--log_dir", type=str, default=None)
    p.add_argument("--no_log", action="store_true")
    args = p.parse_args()
    run(args)
