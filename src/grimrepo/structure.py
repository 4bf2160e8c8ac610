"""Repository structure analysis.

Checks a listing of directories against :data:`STANDARD_DIRECTORIES` and scores
how much of the expected layout is present, weighting each directory by its
priority.
"""

import logging
from typing import Dict, List, Sequence, Tuple

from grimrepo.registry import STANDARD_DIRECTORIES
from grimrepo.scoring import (
    format_recommendation,
    normalize_dir_path,
    ratio_score,
    score_bracket,
    total_weight,
)
from grimrepo.types import AnalysisResult, CheckItem

logger = logging.getLogger(__name__)


def analyze_structure(
    existing_paths: Sequence[str],
    registry: Tuple[CheckItem, ...] = STANDARD_DIRECTORIES,
) -> AnalysisResult:
    """Analyze repository structure and identify missing directories.

    Args:
        existing_paths: Directory paths found in the repository, in any case,
            with or without trailing slashes. Duplicates are ignored.
        registry: Directory checks to score against

    Returns:
        AnalysisResult whose ``present`` entries are the caller's own strings
    """
    seen: Dict[str, str] = {}
    for raw in existing_paths:
        seen.setdefault(normalize_dir_path(raw), raw)

    missing: List[CheckItem] = []
    present: List[str] = []
    earned = 0

    for check in registry:
        raw = seen.get(normalize_dir_path(check.path))
        if raw is None:
            missing.append(check)
        else:
            present.append(raw)
            earned += check.priority.weight

    score = ratio_score(earned, total_weight(registry))
    logger.debug(
        "Structure: %d/%d directories present, score %d",
        len(present), len(registry), score,
    )
    return AnalysisResult(missing=tuple(missing), present=tuple(present), score=score)


def generate_directory_template(check: CheckItem) -> str:
    """Return scaffold README content for a directory check."""
    if check.template is not None:
        return check.template
    return f"# {check.path}\n\n{check.purpose}\n"


def structure_recommendation_lines(
    structure: AnalysisResult,
    include_optional: bool = False,
) -> List[str]:
    """One ``[HIGH]``/``[MEDIUM]`` line per missing directory, in registry order."""
    lines = (format_recommendation(c, "Create", include_optional) for c in structure.missing)
    return [line for line in lines if line]


def get_structure_recommendations(
    structure: AnalysisResult,
    include_optional: bool = False,
) -> List[str]:
    """Human-readable recommendations for a structure analysis."""
    recommendations = structure_recommendation_lines(structure, include_optional)

    bracket = score_bracket(structure.score)
    if bracket == "complete":
        recommendations.append("Structure is complete!")
    elif bracket == "mostly complete":
        recommendations.append("Structure is mostly complete")
    elif bracket == "needs improvement":
        recommendations.append("Structure needs improvement")
    else:
        recommendations.append("Structure is incomplete")

    return recommendations
