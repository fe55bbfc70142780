"""Branch lookup for campus identifiers of the admission cohort."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

COHORT_TAG = "2024"

# Two-character code at positions [4, 6) of a campus id.
BRANCH_CODES: Mapping[str, str] = MappingProxyType(
    {
        "A7": "CS",
        "AA": "ECE",
        "A8": "ENI",
        "A3": "EEE",
        "A4": "MECH",
        "A5": "BPHARM",
        "AD": "MANU",
    }
)


def classify_branch(campus_id: str) -> Optional[str]:
    """Return the branch name for *campus_id*, or ``None`` if it does not qualify.

    Only ids of the :data:`COHORT_TAG` cohort whose branch code appears in
    :data:`BRANCH_CODES` qualify, e.g. ``"2024A7001"`` maps to ``"CS"``.
    """

    if len(campus_id) < 6 or campus_id[:4] != COHORT_TAG:
        return None
    return BRANCH_CODES.get(campus_id[4:6])
