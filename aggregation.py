"""Running sums and averages over parsed gradebook records."""
from __future__ import annotations

import dataclasses
from typing import Dict, List, Optional, Tuple

from branches import BRANCH_CODES, classify_branch
from gradebook import Metric, StudentRecord


@dataclasses.dataclass
class BranchAggregate:
    branch: str
    total: float = 0.0
    count: int = 0

    def add(self, total: float) -> None:
        self.total += total
        self.count += 1

    @property
    def average(self) -> Optional[float]:
        if self.count == 0:
            return None
        return self.total / self.count


@dataclasses.dataclass
class GeneralAggregate:
    """One running sum per metric across every parsed record."""

    sums: Dict[Metric, float] = dataclasses.field(
        default_factory=lambda: {metric: 0.0 for metric in Metric}
    )
    count: int = 0

    def add(self, record: StudentRecord) -> None:
        for metric in Metric:
            self.sums[metric] += metric.score(record)
        self.count += 1

    def averages(self) -> Dict[Metric, Optional[float]]:
        """Mean of each metric, or ``None`` for every metric when no records were added."""
        if self.count == 0:
            return {metric: None for metric in Metric}
        return {metric: self.sums[metric] / self.count for metric in Metric}


class Aggregator:
    """Accumulates general and per-branch statistics in a single pass."""

    def __init__(self) -> None:
        self.general = GeneralAggregate()
        self.branches: Dict[str, BranchAggregate] = {}

    def add(self, record: StudentRecord) -> None:
        self.general.add(record)
        branch = classify_branch(record.campus_id)
        if branch is None:
            return
        aggregate = self.branches.setdefault(branch, BranchAggregate(branch))
        aggregate.add(record.total)

    def general_averages(self) -> Dict[Metric, Optional[float]]:
        return self.general.averages()

    def branch_averages(self) -> List[Tuple[str, Optional[float]]]:
        """Per-branch mean of ``total``, in branch code table order."""
        averages: List[Tuple[str, Optional[float]]] = []
        for branch in BRANCH_CODES.values():
            aggregate = self.branches.get(branch)
            if aggregate is not None:
                averages.append((branch, aggregate.average))
        return averages
