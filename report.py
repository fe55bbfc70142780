"""Plain-text rendering of a :class:`~pipeline.GradebookSummary`."""
from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from gradebook import Metric
from pipeline import GradebookSummary
from ranking import TOP_N

NO_DATA = "no data"


def _fmt(value: Optional[float]) -> str:
    if value is None:
        return NO_DATA
    return f"{value:.2f}"


def render_report(summary: GradebookSummary, top_n: int = TOP_N) -> List[str]:
    lines: List[str] = []

    if summary.discrepancies:
        lines.append("Discrepancies found:")
        lines.extend(d.message for d in summary.discrepancies)
    else:
        lines.append("No discrepancies found.")

    lines.append("")
    lines.append("General Averages:")
    for metric in Metric:
        lines.append(f"{metric.label}: {_fmt(summary.general_averages.get(metric))}")

    lines.append("")
    lines.append("Branch-wise Averages (2024 Only):")
    if not summary.branch_averages:
        lines.append("No qualifying branch records.")
    for branch, average in summary.branch_averages:
        lines.append(f"Branch average for {branch} is {_fmt(average)}")

    lines.append("")
    lines.append(f"Top {top_n} Students:")
    for metric in Metric:
        lines.append("")
        lines.append(f"Top {top_n} Students for {metric.label}:")
        for entry in summary.rankings.get(metric, []):
            lines.append(f"{entry.rank}. Emplid: {entry.emplid}, Marks: {entry.score:.2f}")

    return lines


def write_report(
    summary: GradebookSummary, stream: Optional[TextIO] = None, top_n: int = TOP_N
) -> None:
    out = stream if stream is not None else sys.stdout
    for line in render_report(summary, top_n):
        out.write(line + "\n")
