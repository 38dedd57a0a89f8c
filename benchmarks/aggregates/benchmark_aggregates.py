"""Benchmarks min/max/average/sum over a dataset of consecutive integers.

Usage:
    python benchmarks/aggregates/benchmark_aggregates.py [--size SIZE]
    python benchmarks/aggregates/benchmark_aggregates.py --multi-size
    python benchmarks/aggregates/benchmark_aggregates.py --targets current,cpython3.12 --no-memory

Requires the package to be installed ('pip install -e .'); child runtime
targets need it installed in their own interpreter as well.
"""

from aggbench.__main__ import main

if __name__ == "__main__":
    raise SystemExit(main())
