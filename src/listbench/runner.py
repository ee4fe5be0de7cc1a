"""
runner.py - Timed operation battery for sequence containers

Runs seven micro-benchmarks, in a fixed order, against any
:class:`~listbench.containers.SequenceContainer`:

    1. append()     - append N increasing integers at the end
    2. get(i)       - read N elements by index (i mod size)
    3. insert(0)    - insert N elements at the front
    4. remove(0)    - remove N elements from the front
    5. remove(end)  - remove N elements from the end
    6. insert(mid)  - insert N elements at size // 2
    7. remove(mid)  - remove N elements at size // 2

Only the operation loop is timed; clearing and repopulating happen outside
the measured interval.  The phases share one container instance and are not
reorderable: ``get(i)`` reads whatever the append phase left behind.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Tuple

from .config import DEFAULT_OPERATION_COUNT, validate_operation_count
from .containers import SequenceContainer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperationResult:
    """Timing of one phase against one container variant."""

    operation: str
    count: int
    elapsed_ns: int

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_ns / 1e6


class Timer:
    """Context manager measuring wall-clock time in integer nanoseconds."""

    def __enter__(self) -> Timer:
        self.elapsed_ns = 0
        self.start = time.perf_counter_ns()
        return self

    def __exit__(self, *args) -> None:
        self.elapsed_ns = time.perf_counter_ns() - self.start


class BenchmarkRunner:
    """
    Executes the operation battery with a fixed repetition count.

    Every ``time_*`` method prepares the container, times its loop and
    returns the elapsed nanoseconds.  :meth:`run_all` calls them in battery
    order and wraps each timing in an :class:`OperationResult`.

    Parameters
    ----------
    operation_count : int
        Operations performed inside every timed loop.
    """

    def __init__(self, operation_count: int = DEFAULT_OPERATION_COUNT) -> None:
        self.operation_count = validate_operation_count(operation_count)

    # ---- Phases ----------------------------------------------------------

    def time_append_to_end(self, container: SequenceContainer) -> int:
        container.clear()
        with Timer() as t:
            for i in range(self.operation_count):
                container.append(i)
        return t.elapsed_ns

    def time_get(self, container: SequenceContainer) -> int:
        """Indexed reads over the current contents.

        An empty container is first filled by the append phase (untimed).
        Otherwise the existing contents are read as they are.
        """
        if container.is_empty():
            self.time_append_to_end(container)
        with Timer() as t:
            for i in range(self.operation_count):
                container.get(i % container.size())
        return t.elapsed_ns

    def time_insert_at_beginning(self, container: SequenceContainer) -> int:
        container.clear()
        with Timer() as t:
            for i in range(self.operation_count):
                container.insert(0, i)
        return t.elapsed_ns

    def time_remove_from_beginning(self, container: SequenceContainer) -> int:
        container.clear()
        self.time_append_to_end(container)
        with Timer() as t:
            for _ in range(self.operation_count):
                if not container.is_empty():
                    container.remove(0)
        return t.elapsed_ns

    def time_remove_from_end(self, container: SequenceContainer) -> int:
        container.clear()
        self.time_append_to_end(container)
        with Timer() as t:
            for _ in range(self.operation_count):
                if not container.is_empty():
                    container.remove(container.size() - 1)
        return t.elapsed_ns

    def time_insert_at_middle(self, container: SequenceContainer) -> int:
        """Insert the loop counter at ``size // 2`` of the growing container."""
        container.clear()
        self.time_append_to_end(container)
        with Timer() as t:
            for i in range(self.operation_count):
                middle = container.size() // 2
                container.insert(middle, i)
        return t.elapsed_ns

    def time_remove_from_middle(self, container: SequenceContainer) -> int:
        container.clear()
        self.time_append_to_end(container)
        with Timer() as t:
            for _ in range(self.operation_count):
                if not container.is_empty():
                    middle = container.size() // 2
                    container.remove(middle)
        return t.elapsed_ns

    # ---- Orchestration ---------------------------------------------------

    def phases(self) -> List[Tuple[str, Callable[[SequenceContainer], int]]]:
        """Return ``(operation name, timing method)`` pairs in battery order."""
        return [
            ("append()", self.time_append_to_end),
            ("get(i)", self.time_get),
            ("insert(0)", self.time_insert_at_beginning),
            ("remove(0)", self.time_remove_from_beginning),
            ("remove(end)", self.time_remove_from_end),
            ("insert(mid)", self.time_insert_at_middle),
            ("remove(mid)", self.time_remove_from_middle),
        ]

    def run_all(self, container: SequenceContainer) -> List[OperationResult]:
        """
        Run every phase against *container* and collect the timings.

        Returns
        -------
        list of OperationResult
            Seven records in battery order, all with
            ``count == operation_count``.
        """
        label = getattr(container, "label", type(container).__name__)
        logger.info(
            "Running %d phases against %s (%d operations each)",
            len(self.phases()), label, self.operation_count,
        )

        results: List[OperationResult] = []
        for name, phase in self.phases():
            result = OperationResult(name, self.operation_count, phase(container))
            logger.debug(
                "%s %s: %d ns (%.3f ms), left %r",
                label, name, result.elapsed_ns, result.elapsed_ms, container,
            )
            results.append(result)
        return results


def run_all(
    container: SequenceContainer,
    operation_count: int = DEFAULT_OPERATION_COUNT,
) -> List[OperationResult]:
    """Shorthand for ``BenchmarkRunner(operation_count).run_all(container)``."""
    return BenchmarkRunner(operation_count).run_all(container)
