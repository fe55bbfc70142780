"""Top performers per scoring metric."""
from __future__ import annotations

import dataclasses
from typing import Dict, List, Sequence

from gradebook import Metric, StudentRecord

TOP_N = 3


@dataclasses.dataclass(frozen=True)
class RankedEntry:
    rank: int
    emplid: str
    score: float


def top_records(
    records: Sequence[StudentRecord], metric: Metric, limit: int = TOP_N
) -> List[RankedEntry]:
    """Return the best ``min(limit, len(records))`` records for *metric*.

    Ranking works on a sorted copy, so *records* keeps its order and ties
    stay in input order.
    """

    ordered = sorted(records, key=metric.score, reverse=True)
    return [
        RankedEntry(rank=position, emplid=record.emplid, score=metric.score(record))
        for position, record in enumerate(ordered[:limit], start=1)
    ]


def rank_all(
    records: Sequence[StudentRecord], limit: int = TOP_N
) -> Dict[Metric, List[RankedEntry]]:
    return {metric: top_records(records, metric, limit) for metric in Metric}
