"""
Side-by-side text report for two benchmark result lists.

The table pairs results by position: row *i* combines ``results_a[i]`` and
``results_b[i]`` and takes its operation name and count from
``results_a[i]``.  The conclusions block is fixed text and does not depend
on the measured numbers; :func:`derived_summary` is the measured
counterpart and is only printed on request.
"""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence, TextIO, Tuple

import numpy as np
import pandas as pd

from .runner import OperationResult

CONCLUSIONS = """\
Conclusions:

 ArraySequence is faster at:
   Reading by index (get(i))
   Appending at the end (append())
   Removing from the end (remove(end))
   Iterating over elements

 LinkedSequence is faster at:
   Inserting at the front (insert(0))
   Removing from the front (remove(0))

 Which container to choose?
   Frequent reads and work at the end - ArraySequence
   Frequent work at the front - LinkedSequence
"""

OPERATION_WIDTH = 14
COUNT_WIDTH = 10
MIN_TIME_WIDTH = 11


class ReportPrinter:
    """Renders two result lists as a fixed-width comparison table.

    Parameters
    ----------
    label_a, label_b : str
        Column headings for the two variants, in column order.
    """

    def __init__(self, label_a: str = "ArraySequence", label_b: str = "LinkedSequence") -> None:
        self.label_a = label_a
        self.label_b = label_b
        self._width_a = max(MIN_TIME_WIDTH, len(label_a))
        self._width_b = max(MIN_TIME_WIDTH, len(label_b))

    def _row(self, operation: str, count: str, time_a: str, time_b: str) -> str:
        return (
            f"| {operation:<{OPERATION_WIDTH}} | {count:<{COUNT_WIDTH}} "
            f"| {time_a:<{self._width_a}} | {time_b:<{self._width_b}} |"
        )

    def banner(self) -> List[str]:
        title = f"{self.label_a} vs {self.label_b} performance comparison"
        return [title, "=" * max(62, len(title))]

    def format_table(
        self,
        results_a: Sequence[OperationResult],
        results_b: Sequence[OperationResult],
    ) -> List[str]:
        """Return the table lines: title, header between rules, rows, footer rule."""
        header = self._row("Operation", "Count", self.label_a, self.label_b)
        rule = "-" * len(header)

        lines = ["", "Results (nanoseconds)", rule, header, rule]
        for res_a, res_b in zip(results_a, results_b):
            lines.append(
                self._row(
                    res_a.operation,
                    str(res_a.count),
                    str(res_a.elapsed_ns),
                    str(res_b.elapsed_ns),
                )
            )
        lines.append(rule)
        return lines

    def print_banner(self, stream: Optional[TextIO] = None) -> None:
        """Write the banner on its own, ahead of a run that may take a while."""
        out = stream if stream is not None else sys.stdout
        out.write("\n".join(self.banner()) + "\n")
        out.flush()

    def render(
        self,
        results_a: Sequence[OperationResult],
        results_b: Sequence[OperationResult],
        stream: Optional[TextIO] = None,
        derived: bool = False,
        banner: bool = True,
    ) -> None:
        """Write banner, table and conclusions to *stream* (stdout by default).

        With ``derived=True`` the measured summary follows the static block.
        Pass ``banner=False`` when :meth:`print_banner` already ran.
        """
        out = stream if stream is not None else sys.stdout
        lines = self.banner() if banner else []
        lines += self.format_table(results_a, results_b)
        lines += ["", CONCLUSIONS.rstrip("\n")]
        if derived:
            frame = comparison_frame(results_a, results_b, (self.label_a, self.label_b))
            lines += [""] + derived_summary(frame)
        out.write("\n".join(lines) + "\n")


# ---------------------------------------------------------------------------
# Measured comparison
# ---------------------------------------------------------------------------

def comparison_frame(
    results_a: Sequence[OperationResult],
    results_b: Sequence[OperationResult],
    labels: Tuple[str, str] = ("ArraySequence", "LinkedSequence"),
) -> pd.DataFrame:
    """
    Put two result lists side by side in a DataFrame.

    Rows are paired by position and indexed by the operation names of
    *results_a*.  The ``ratio`` column is ``time_b / time_a``; a value above
    1 means variant A was faster.  A zero timing in A gives ``NaN``.
    """
    label_a, label_b = labels
    if label_a == label_b:
        raise ValueError(f"Variant labels must differ, got {label_a!r} twice")

    pairs = list(zip(results_a, results_b))
    frame = pd.DataFrame(
        {
            "count": [a.count for a, _ in pairs],
            label_a: [a.elapsed_ns for a, _ in pairs],
            label_b: [b.elapsed_ns for _, b in pairs],
        },
        index=pd.Index([a.operation for a, _ in pairs], name="operation"),
    )
    frame["ratio"] = frame[label_b] / frame[label_a].replace(0, np.nan)
    return frame


def derived_summary(frame: pd.DataFrame) -> List[str]:
    """Describe, per operation, which variant the measurements favour."""
    label_a, label_b = frame.columns[1], frame.columns[2]
    lines = ["Measured summary:", ""]
    for operation, row in frame.iterrows():
        ratio = row["ratio"]
        if np.isnan(ratio) or row[label_b] == 0:
            lines.append(f"   {operation}: too fast to compare")
        elif ratio >= 1.0:
            lines.append(f"   {operation}: {label_a} {ratio:.1f}x faster")
        else:
            lines.append(f"   {operation}: {label_b} {1.0 / ratio:.1f}x faster")
    return lines
