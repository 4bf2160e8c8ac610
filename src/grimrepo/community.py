"""Community standards analysis.

Audits community health files (license, README, contribution and security
policies) against :data:`STANDARD_FILES`.

``LICENSE``, ``LICENSE.txt`` and ``LICENSE.md`` are interchangeable evidence of
a license. Registry rows for any of them share a single scoring slot: the slot
adds its weight to the maximum once and to the earned points at most once, no
matter how many aliases the repository carries.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from grimrepo.registry import LICENSE_ALIASES, RSR_REQUIRED_FILES, STANDARD_FILES
from grimrepo.scoring import (
    format_recommendation,
    normalize_file_path,
    ratio_score,
    score_bracket,
    total_weight,
)
from grimrepo.types import AnalysisResult, CheckItem

logger = logging.getLogger(__name__)


def is_license_check(check: CheckItem) -> bool:
    return normalize_file_path(check.path) in LICENSE_ALIASES


@dataclass(frozen=True)
class LicenseSlot:
    """The license equivalence class resolved against one file listing.

    Attributes:
        checks: Registry rows belonging to the class, in registry order
        weight: Points the class is worth (0 when the registry has no license row)
        found: Caller-supplied license files, in input order
    """
    checks: Tuple[CheckItem, ...]
    weight: int
    found: Tuple[str, ...]

    @property
    def satisfied(self) -> bool:
        return bool(self.found)


def resolve_license_slot(
    existing_files: Sequence[str],
    registry: Tuple[CheckItem, ...] = STANDARD_FILES,
) -> LicenseSlot:
    """Collapse the registry's license rows into one slot and match it."""
    checks = tuple(c for c in registry if is_license_check(c))
    weight = max((c.priority.weight for c in checks), default=0)

    found: List[str] = []
    seen = set()
    for raw in existing_files:
        normalized = normalize_file_path(raw)
        if normalized in LICENSE_ALIASES and normalized not in seen:
            seen.add(normalized)
            found.append(raw)

    return LicenseSlot(checks=checks, weight=weight, found=tuple(found))


def analyze_community_standards(
    existing_files: Sequence[str],
    registry: Tuple[CheckItem, ...] = STANDARD_FILES,
) -> AnalysisResult:
    """Analyze community standards compliance.

    Args:
        existing_files: File paths found in the repository, relative to its root
        registry: File checks to score against

    Returns:
        AnalysisResult. ``present`` lists every license alias supplied, in input
        order, followed by the other matched files in registry order. When no
        alias is supplied every license row is reported missing.
    """
    slot = resolve_license_slot(existing_files, registry)

    maximum = slot.weight
    earned = slot.weight if slot.satisfied else 0
    present: List[str] = list(slot.found)
    missing: List[CheckItem] = []

    seen: Dict[str, str] = {}
    for raw in existing_files:
        seen.setdefault(normalize_file_path(raw), raw)

    for check in registry:
        if check in slot.checks:
            if not slot.satisfied:
                missing.append(check)
            continue

        maximum += check.priority.weight
        raw = seen.get(normalize_file_path(check.path))
        if raw is None:
            missing.append(check)
        else:
            present.append(raw)
            earned += check.priority.weight

    score = ratio_score(earned, maximum)
    logger.debug(
        "Community: %d files present (license %s), %d/%d points, score %d",
        len(present), "found" if slot.satisfied else "missing", earned, maximum, score,
    )
    return AnalysisResult(missing=tuple(missing), present=tuple(present), score=score)


def collapse_license_checks(missing: Sequence[CheckItem]) -> List[CheckItem]:
    """Drop all but the first license row from a list of missing checks."""
    collapsed = []
    license_seen = False
    for check in missing:
        if is_license_check(check):
            if license_seen:
                continue
            license_seen = True
        collapsed.append(check)
    return collapsed


def community_recommendation_lines(
    standards: AnalysisResult,
    include_optional: bool = False,
) -> List[str]:
    """One line per missing file, with the license rows collapsed into one."""
    lines = (
        format_recommendation(c, "Add", include_optional)
        for c in collapse_license_checks(standards.missing)
    )
    return [line for line in lines if line]


def get_community_recommendations(
    standards: AnalysisResult,
    include_optional: bool = False,
) -> List[str]:
    """Human-readable recommendations for a community standards analysis."""
    recommendations = community_recommendation_lines(standards, include_optional)

    bracket = score_bracket(standards.score)
    if bracket == "complete":
        recommendations.append("Community standards are complete!")
    elif bracket == "mostly complete":
        recommendations.append("Community standards are mostly complete")
    elif bracket == "needs improvement":
        recommendations.append("Community standards need improvement")
    else:
        recommendations.append("Community standards are incomplete")

    return recommendations


def check_rsr_compliance(standards: AnalysisResult) -> bool:
    """Check whether the present files meet basic RSR compliance.

    Needs README.md, LICENSE or LICENSE.txt, SECURITY.md, CONTRIBUTING.md and
    CODE_OF_CONDUCT.md, matched case-insensitively.
    """
    present = {normalize_file_path(p) for p in standards.present}
    return all(
        any(alternative in present for alternative in alternatives)
        for alternatives in RSR_REQUIRED_FILES
    )
