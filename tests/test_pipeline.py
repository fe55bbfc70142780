import logging

import pytest

from conftest import HEADER, make_row
from gradebook import Metric
from pipeline import analyze_rows


def test_scenario_summary(scenario_rows):
    summary = analyze_rows(scenario_rows)

    assert [r.emplid for r in summary.records] == ["E1", "E2", "E3"]
    assert [d.message for d in summary.discrepancies] == [
        "Discrepancy for E2: Computed Total 30.00 != Recorded Total 31.00"
    ]
    assert summary.general_averages[Metric.TOTAL] == pytest.approx(130 / 3)
    assert summary.general_averages[Metric.QUIZ] == pytest.approx(23 / 3)
    assert summary.branch_averages == [("CS", 60.0)]
    assert [e.emplid for e in summary.rankings[Metric.TOTAL]] == ["E1", "E3", "E2"]
    assert summary.skipped_rows == 0


def test_header_skipped_by_position():
    # a data-looking first row is still treated as the header
    rows = [make_row(emplid="H"), make_row(emplid="E1")]
    summary = analyze_rows(rows)
    assert [r.emplid for r in summary.records] == ["E1"]


def test_short_rows_are_silent(caplog):
    caplog.set_level(logging.WARNING)
    summary = analyze_rows([HEADER, make_row()[:10], [], ["1"]])
    assert summary.records == ()
    assert summary.discrepancies == []
    assert summary.skipped_rows == 0
    assert caplog.records == []


def test_bad_row_is_logged_and_skipped(caplog):
    caplog.set_level(logging.WARNING, logger="pipeline")
    bad = make_row(emplid="BAD", scores=("abc", "10", "10", "10", "10", "10"))
    summary = analyze_rows([HEADER, make_row(emplid="E1"), bad, make_row(emplid="E3")])

    assert [r.emplid for r in summary.records] == ["E1", "E3"]
    assert summary.skipped_rows == 1
    assert "error parsing row 3: invalid Quiz: abc" in caplog.text


def test_bad_row_does_not_contribute():
    bad = make_row(emplid="BAD", campus_id="2024A7009", total="oops")
    summary = analyze_rows([HEADER, make_row(emplid="E1", total="61"), bad])
    assert len(summary.discrepancies) == 1
    assert summary.branch_averages == [("CS", 61.0)]
    assert all(e.emplid != "BAD" for entries in summary.rankings.values() for e in entries)


def test_empty_input():
    summary = analyze_rows([])
    assert summary.records == ()
    assert summary.general_averages == {metric: None for metric in Metric}
    assert summary.branch_averages == []
    assert all(entries == [] for entries in summary.rankings.values())
