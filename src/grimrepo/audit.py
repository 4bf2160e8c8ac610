"""Repository auditor - combines structure and community analysis.

The overall score weights community files above directory layout. A repository
ranks above raw only when it passes the RSR compliance gate, whatever its score.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from grimrepo.community import (
    analyze_community_standards,
    check_rsr_compliance,
    community_recommendation_lines,
)
from grimrepo.config import GrimRepoConfig, LevelThresholds, get_default_config
from grimrepo.scoring import round_half_up, score_bracket
from grimrepo.structure import analyze_structure, structure_recommendation_lines
from grimrepo.types import AnalysisResult, AuditResult, Level

logger = logging.getLogger(__name__)

_SUMMARY = {
    "complete": "Repository is complete!",
    "mostly complete": "Repository is mostly complete",
    "needs improvement": "Repository needs improvement",
    "incomplete": "Repository is incomplete",
}


def determine_level(
    overall_score: int,
    compliant: bool,
    thresholds: Optional[LevelThresholds] = None,
) -> Level:
    """Map an overall score and the RSR gate to a quality level.

    Tiers are checked from rhodium down and the first match wins. Without RSR
    compliance the result is always raw.
    """
    if not compliant:
        return Level.RAW
    t = thresholds or LevelThresholds()
    if overall_score >= t.rhodium:
        return Level.RHODIUM
    if overall_score >= t.gold:
        return Level.GOLD
    if overall_score >= t.silver:
        return Level.SILVER
    if overall_score >= t.bronze:
        return Level.BRONZE
    return Level.RAW


class AuditScorer:
    """Audits repositories with a fixed configuration.

    The scorer holds no per-call state; :meth:`audit` may be called any number
    of times and returns a fresh :class:`AuditResult` each time.
    """

    def __init__(self, config: Optional[GrimRepoConfig] = None):
        """Initialize the auditor.

        Args:
            config: Optional configuration. If None, uses the defaults.

        Raises:
            ValueError: If the weights are negative or do not sum to 1.0, or if
                the level thresholds are out of order
        """
        self.config = config or get_default_config()

        w = self.config.weights
        if w.structure < 0 or w.community < 0:
            raise ValueError("structure and community weights must be non-negative")
        if abs(w.structure + w.community - 1.0) > 1e-9:
            raise ValueError(
                f"structure + community weights must be 1.0, got {w.structure + w.community}"
            )

        t = self.config.thresholds
        if not 0 <= t.bronze <= t.silver <= t.gold <= t.rhodium <= 100:
            raise ValueError("level thresholds must satisfy 0 <= bronze <= silver <= gold <= rhodium <= 100")

        self.directory_registry = self.config.directory_registry
        self.file_registry = self.config.file_registry

    def overall_score(self, structure_score: int, community_score: int) -> int:
        w = self.config.weights
        return round_half_up(structure_score * w.structure + community_score * w.community)

    def recommendations(
        self,
        structure: AnalysisResult,
        community: AnalysisResult,
        overall_score: int,
    ) -> List[str]:
        """Remediation lines for missing checks plus one overall summary line.

        Structure checks come first, then community files with the license
        rows collapsed into one.
        """
        lines: List[str] = []
        if self.config.auto_suggest:
            strict = self.config.strict_mode
            lines += structure_recommendation_lines(structure, strict)
            lines += community_recommendation_lines(community, strict)
        lines.append(_SUMMARY[score_bracket(overall_score)])
        return lines

    def audit(self, paths: Sequence[str], files: Sequence[str]) -> AuditResult:
        """Run a full repository audit.

        Args:
            paths: Directory paths present in the repository
            files: File paths present in the repository

        Returns:
            AuditResult with both analyses, the overall score, level and
            recommendations
        """
        structure = analyze_structure(paths, self.directory_registry)
        community = analyze_community_standards(files, self.file_registry)

        overall = self.overall_score(structure.score, community.score)
        compliant = check_rsr_compliance(community)
        level = determine_level(overall, compliant, self.config.thresholds)

        logger.info(
            "Audit: structure=%d, community=%d, overall=%d, rsr=%s, level=%s",
            structure.score, community.score, overall, compliant, level.value,
        )

        return AuditResult(
            structure=structure,
            community=community,
            overall_score=overall,
            level=level,
            recommendations=tuple(self.recommendations(structure, community, overall)),
        )


def audit_repository(
    paths: Sequence[str],
    files: Sequence[str],
    config: Optional[GrimRepoConfig] = None,
) -> AuditResult:
    """Audit a repository from its directory and file listings."""
    return AuditScorer(config).audit(paths, files)


def _bullets(items: Sequence[str]) -> List[str]:
    return [f"- {item}" for item in items] if items else ["- none"]


def _analysis_section(title: str, analysis: AnalysisResult) -> List[str]:
    lines = [f"## {title}", "", f"Score: {analysis.score}/100", "", "### Present", ""]
    lines += _bullets([f"`{p}`" for p in analysis.present])
    lines += ["", "### Missing", ""]
    lines += _bullets([
        f"`{c.path}` ({c.priority.value}): {c.purpose}" for c in analysis.missing
    ])
    lines.append("")
    return lines


def generate_audit_report(audit: AuditResult) -> str:
    """Render an audit as a markdown document."""
    compliant = check_rsr_compliance(audit.community)
    lines = [
        "# GrimRepo Audit Report",
        "",
        "## Overall Score",
        "",
        f"**{audit.overall_score}/100**",
        "",
        "## Quality Level",
        "",
        f"**{audit.level.value.upper()}**",
        "",
        f"RSR compliant: {'yes' if compliant else 'no'}",
        "",
    ]
    lines += _analysis_section("Structure Analysis", audit.structure)
    lines += _analysis_section("Community Standards Analysis", audit.community)
    lines += ["## Recommendations", ""]
    lines += _bullets(list(audit.recommendations))
    return "\n".join(lines) + "\n"


def generate_json_report(audit: AuditResult) -> str:
    """Serialize an audit to JSON, keeping every field."""
    return audit.to_json(indent=2)


def run_audit(paths: Sequence[str], files: Sequence[str]) -> str:
    """Audit the given listings and return the markdown report."""
    return generate_audit_report(audit_repository(paths, files))
