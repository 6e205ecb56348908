"""
cmdbench - Command timing harness.

Run a command over and over, report min/avg/max and failures.
"""

from cmdbench.models.bench import BenchConfig, BenchSummary
from cmdbench.scheduler import Benchmark, run_benchmark

__version__ = "0.1.0"
__all__ = ["Benchmark", "BenchConfig", "BenchSummary", "run_benchmark", "__version__"]
