import pytest

HEADER = [
    "Sl No", "Class No", "Emplid", "Campus ID", "Quiz", "Mid-Sem",
    "Lab Test", "Weekly Labs", "Pre-Compre", "Compre", "Total",
]


def make_row(sl_no="1", class_no="101", emplid="E1", campus_id="2024A7001",
             scores=("10", "10", "10", "10", "10", "10"), total="60"):
    return [sl_no, class_no, emplid, campus_id, *scores, total]


@pytest.fixture
def scenario_rows():
    """Header, three data rows and a trailing short row."""
    return [
        HEADER,
        make_row("1", "101", "E1", "2024A7001", ("10", "10", "10", "10", "10", "10"), "60"),
        # wrong total, older cohort
        make_row("2", "101", "E2", "2023A7002", ("5", "5", "5", "5", "5", "5"), "31"),
        # unmapped branch code
        make_row("3", "102", "E3", "2024ZZ003", ("8", "9", "7", "6", "5", "4"), "39"),
        ["4", "102", "E4"],
    ]
