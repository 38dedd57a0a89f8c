import pytest

from aggbench.suite import AggregationBenchmarks


def pytest_configure(config: pytest.Config) -> None:
    """Register shared markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture
def suite() -> AggregationBenchmarks:
    """Return a suite with the default dataset already populated."""
    benchmarks = AggregationBenchmarks()
    benchmarks.setup()
    return benchmarks
