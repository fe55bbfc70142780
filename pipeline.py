"""Single-pass gradebook analysis.

Typical usage:
    from pipeline import analyze_rows
    from sheet_source import read_sheet_rows
    summary = analyze_rows(read_sheet_rows("/path/to/gradebook.xlsx"))

The first row is always treated as the header. Rows that are too short are
ignored; rows with unparseable cells are logged and skipped. Everything else
becomes a :class:`~gradebook.StudentRecord` that feeds the discrepancy check,
the aggregator and, once the pass is done, the rankings.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from aggregation import Aggregator
from gradebook import (
    COLUMN_COUNT,
    Discrepancy,
    Metric,
    ParseError,
    StudentRecord,
    find_discrepancy,
    parse_row,
)
from ranking import TOP_N, RankedEntry, rank_all

LOGGER = logging.getLogger(__name__)


@dataclasses.dataclass
class GradebookSummary:
    """Everything the report needs from one pass over the gradebook."""

    records: Tuple[StudentRecord, ...]
    discrepancies: List[Discrepancy]
    general_averages: Dict[Metric, Optional[float]]
    branch_averages: List[Tuple[str, Optional[float]]]
    rankings: Dict[Metric, List[RankedEntry]]
    skipped_rows: int = 0


def analyze_rows(rows: Iterable[Sequence[str]], top_n: int = TOP_N) -> GradebookSummary:
    records: List[StudentRecord] = []
    discrepancies: List[Discrepancy] = []
    aggregator = Aggregator()
    skipped = 0

    for index, row in enumerate(rows):
        if index == 0:
            continue  # header
        if len(row) < COLUMN_COUNT:
            LOGGER.debug("Skipping row %d with %d cell(s)", index + 1, len(row))
            continue

        try:
            record = parse_row(row)
        except ParseError as exc:
            LOGGER.warning("error parsing row %d: %s", index + 1, exc)
            skipped += 1
            continue

        discrepancy = find_discrepancy(record)
        if discrepancy is not None:
            discrepancies.append(discrepancy)

        records.append(record)
        aggregator.add(record)

    base = tuple(records)
    LOGGER.info(
        "Parsed %d record(s), skipped %d, %d discrepancy(ies)",
        len(base),
        skipped,
        len(discrepancies),
    )
    return GradebookSummary(
        records=base,
        discrepancies=discrepancies,
        general_averages=aggregator.general_averages(),
        branch_averages=aggregator.branch_averages(),
        rankings=rank_all(base, top_n),
        skipped_rows=skipped,
    )
