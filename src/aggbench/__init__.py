"""Micro-benchmarks for built-in integer aggregations."""

from .aggregates import (
    EmptySequenceError as EmptySequenceError,
)
from .aggregates import (
    average as average,
)
from .aggregates import (
    integer_range as integer_range,
)
from .aggregates import (
    maximum as maximum,
)
from .aggregates import (
    minimum as minimum,
)
from .aggregates import (
    total as total,
)
from .suite import (
    AggregationBenchmarks as AggregationBenchmarks,
)

# NOTE: The harness and logging packages are accessible through
#       '.harness' and '.logging' to keep the top-level namespace
#       limited to the suite itself.
