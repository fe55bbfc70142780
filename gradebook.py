"""Student records parsed from fixed-layout gradebook rows.

Each data row of the gradebook carries 11 positional cells:

    sl_no, class_no, emplid, campus_id, quiz, mid_sem, lab_test,
    weekly_labs, pre_compre, compre, total

Additional trailing cells are ignored. The recorded ``total`` is expected to
equal the sum of the six component scores; mismatches are reported as
:class:`Discrepancy` objects but the record itself is kept as-is.
"""
from __future__ import annotations

import dataclasses
import enum
import re
from typing import Optional, Sequence

COLUMN_COUNT = 11

_INT_RE = re.compile(r"[+-]?[0-9]+")
_REAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class ParseError(ValueError):
    """Raised when a single cell of a gradebook row cannot be converted."""

    def __init__(self, field: str, raw: str) -> None:
        self.field = field
        self.raw = raw
        super().__init__(f"invalid {field}: {raw}")


@dataclasses.dataclass(frozen=True)
class StudentRecord:
    sl_no: int
    class_no: int
    emplid: str
    campus_id: str
    quiz: float
    mid_sem: float
    lab_test: float
    weekly_labs: float
    pre_compre: float
    compre: float
    total: float

    @property
    def computed_total(self) -> float:
        """Sum of the six components, added in column order."""
        return (
            self.quiz
            + self.mid_sem
            + self.lab_test
            + self.weekly_labs
            + self.pre_compre
            + self.compre
        )


class Metric(enum.Enum):
    """Scored columns of a :class:`StudentRecord`, in report order."""

    QUIZ = ("Quiz", "quiz")
    MID_SEM = ("Mid-Sem", "mid_sem")
    LAB_TEST = ("Lab Test", "lab_test")
    WEEKLY_LABS = ("Weekly Labs", "weekly_labs")
    PRE_COMPRE = ("Pre-Compre", "pre_compre")
    COMPRE = ("Compre", "compre")
    TOTAL = ("Total", "total")

    def __init__(self, label: str, field_name: str) -> None:
        self.label = label
        self.field_name = field_name

    def score(self, record: StudentRecord) -> float:
        return getattr(record, self.field_name)


@dataclasses.dataclass(frozen=True)
class Discrepancy:
    """A record whose recorded total disagrees with its component sum."""

    emplid: str
    computed: float
    recorded: float

    @property
    def message(self) -> str:
        return (
            f"Discrepancy for {self.emplid}: Computed Total {self.computed:.2f}"
            f" != Recorded Total {self.recorded:.2f}"
        )


def _cell(row: Sequence[str], index: int, field: str) -> str:
    try:
        return row[index]
    except IndexError:
        raise ParseError(field, "<missing>") from None


def _parse_int(row: Sequence[str], index: int, field: str) -> int:
    text = _cell(row, index, field)
    if not _INT_RE.fullmatch(text):
        raise ParseError(field, text)
    return int(text)


def _parse_real(row: Sequence[str], index: int, field: str) -> float:
    text = _cell(row, index, field)
    if not _REAL_RE.fullmatch(text):
        raise ParseError(field, text)
    return float(text)


def parse_row(row: Sequence[str]) -> StudentRecord:
    """Convert one raw gradebook row into a :class:`StudentRecord`.

    Raises :class:`ParseError` naming the first cell that fails to convert.
    Integer cells accept an optional sign and base-10 digits only; score
    cells accept plain decimal notation with an optional exponent. Neither
    tolerates surrounding whitespace.
    """

    sl_no = _parse_int(row, 0, "Sl No")
    class_no = _parse_int(row, 1, "Class No")
    emplid = _cell(row, 2, "Emplid")
    campus_id = _cell(row, 3, "Campus ID")
    scores = [
        _parse_real(row, index, metric.label)
        for index, metric in enumerate(Metric, start=4)
    ]
    return StudentRecord(sl_no, class_no, emplid, campus_id, *scores)


def find_discrepancy(record: StudentRecord) -> Optional[Discrepancy]:
    """Return a :class:`Discrepancy` if the recorded total is not the exact sum."""

    computed = record.computed_total
    if computed != record.total:
        return Discrepancy(record.emplid, computed, record.total)
    return None
