"""Scoring primitives shared by the analyzers and the aggregator."""

import math
from typing import Dict, Iterable, Optional

from grimrepo.types import CheckItem, Priority

_PRIORITY_TAGS: Dict[Priority, str] = {
    Priority.REQUIRED: "HIGH",
    Priority.RECOMMENDED: "MEDIUM",
    Priority.OPTIONAL: "LOW",
}


def normalize_dir_path(path: str) -> str:
    """Lowercase, use forward slashes and drop trailing slashes."""
    return path.replace("\\", "/").lower().rstrip("/")


def normalize_file_path(path: str) -> str:
    """Lowercase and use forward slashes."""
    return path.lower().replace("\\", "/")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Python's built-in ``round`` rounds ties to even, so 52.5 would become 52.
    """
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def ratio_score(earned: int, maximum: int) -> int:
    """Percentage of *maximum* covered by *earned*, as an integer 0-100."""
    if maximum <= 0:
        return 0
    return round_half_up(100.0 * earned / maximum)


def total_weight(items: Iterable[CheckItem]) -> int:
    """Sum of priority weights of *items*."""
    return sum(item.priority.weight for item in items)


def score_bracket(score: int) -> str:
    """Name the completeness bracket of a 0-100 score.

    Returns one of ``complete``, ``mostly complete``, ``needs improvement``
    or ``incomplete``.
    """
    if score >= 100:
        return "complete"
    if score >= 80:
        return "mostly complete"
    if score >= 60:
        return "needs improvement"
    return "incomplete"


def format_recommendation(
    check: CheckItem,
    verb: str,
    include_optional: bool = False,
) -> Optional[str]:
    """Remediation line for a missing check, e.g. ``[HIGH] Create src/ for Source code``.

    Optional checks give None unless *include_optional* is set.
    """
    if check.priority is Priority.OPTIONAL and not include_optional:
        return None
    return f"[{_PRIORITY_TAGS[check.priority]}] {verb} {check.path} for {check.purpose}"
