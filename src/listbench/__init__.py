"""
listbench - Sequence container micro-benchmarks

Times seven positional operations against a contiguous-array sequence and a
doubly-linked sequence and prints a side-by-side comparison:

    containers  - SequenceContainer interface plus the ArraySequence and
                  LinkedSequence variants.

    runner      - BenchmarkRunner, which executes the fixed operation battery
                  and returns one OperationResult per phase.

    report      - ReportPrinter for the fixed-width table and conclusions,
                  and a pandas comparison frame for measured summaries.

    config      - BenchmarkConfig defaults and YAML loading.
"""

from .config import BenchmarkConfig, load_config
from .containers import ArraySequence, LinkedSequence, SequenceContainer
from .report import ReportPrinter
from .runner import BenchmarkRunner, OperationResult, run_all

__all__ = [
    "ArraySequence",
    "BenchmarkConfig",
    "BenchmarkRunner",
    "LinkedSequence",
    "OperationResult",
    "ReportPrinter",
    "SequenceContainer",
    "load_config",
    "run_all",
]
