"""Aggregation benchmark suite.

The suite owns a dataset of consecutive integers and exposes four
zero-argument operations which a harness times independently. Class-level
attributes declare the parameters the harness should sweep over.
"""

from aggbench.aggregates import average, integer_range, maximum, minimum, total


class AggregationBenchmarks:
    """Times ``min``, ``max``, ``average`` and ``sum`` over integers 1..size.

    Attributes:
        SIZES: Size parameter values the harness runs the suite with.
        TARGETS: Runtime targets the suite should be measured under.
        MEMORY_DIAGNOSER: Whether per-operation allocations are tracked.
        BENCHMARKS: Names of the benchmarked methods, in run order.
    """

    SIZES: tuple[int, ...] = (9000,)
    TARGETS: tuple[str, ...] = ("current",)
    MEMORY_DIAGNOSER: bool = True
    BENCHMARKS: tuple[str, ...] = ("min", "max", "average", "sum")

    def __init__(self, size: int = 9000) -> None:
        """Initialize the suite.

        Args:
            size (int): Number of elements generated by setup(). Defaults to 9000.

        Raises:
            ValueError: If size is negative.

        """
        if size < 0:
            raise ValueError(f"Invalid size; expected >=0 but got {size}")
        self.size = size
        self._items: tuple[int, ...] | None = None

    @property
    def items(self) -> tuple[int, ...]:
        """The dataset populated by setup()."""
        if self._items is None:
            raise RuntimeError("Dataset not initialized; call setup() first")
        return self._items

    def setup(self) -> None:
        """Populate the dataset with integers 1..size, replacing any previous one."""
        self._items = integer_range(1, self.size)

    def min(self) -> int:
        return minimum(self.items)

    def max(self) -> int:
        return maximum(self.items)

    def average(self) -> float:
        return average(self.items)

    def sum(self) -> int:
        return total(self.items)
