"""Tests for the repository auditor and its reports."""

import json

import pytest

from grimrepo.audit import (
    AuditScorer,
    audit_repository,
    determine_level,
    generate_audit_report,
    generate_json_report,
    run_audit,
)
from grimrepo.config import GrimRepoConfig, LevelThresholds, ScoringWeights
from grimrepo.types import AuditResult, CheckItem, Level, Priority


def test_combines_structure_and_community():
    result = audit_repository(["src/", "tests/"], ["README.md", "LICENSE.txt"])
    assert result.structure.score == 53
    assert result.community.score == 43
    # round(0.4 * 53 + 0.6 * 43) = round(47.0)
    assert result.overall_score == 47


def test_empty_repository_is_raw():
    result = audit_repository([], [])
    assert result.overall_score == 0
    assert result.level is Level.RAW
    assert len(result.recommendations) > 0
    assert result.recommendations[-1] == "Repository is incomplete"


def test_rsr_compliant_repository_reaches_bronze(rsr_files):
    result = audit_repository(["src/", "tests/"], rsr_files)
    assert result.community.score == 76
    assert result.overall_score == 67
    assert result.level is Level.BRONZE


def test_more_complete_repository_ranks_higher():
    paths = ["src/", "tests/", "docs/", ".well-known/"]
    files = [
        "README.md",
        "LICENSE.txt",
        "SECURITY.md",
        "CONTRIBUTING.md",
        "CODE_OF_CONDUCT.md",
        "CHANGELOG.md",
    ]
    result = audit_repository(paths, files)
    assert result.overall_score == 84
    assert result.level is Level.SILVER


def test_full_repository_is_rhodium(full_dirs, full_files):
    result = audit_repository(full_dirs, full_files)
    assert result.structure.score == 100
    assert result.community.score == 100
    assert result.overall_score == 100
    assert result.level is Level.RHODIUM
    assert result.recommendations == ("Repository is complete!",)


def test_high_score_without_compliance_stays_raw(full_dirs, full_files):
    files = [f for f in full_files if f != "CODE_OF_CONDUCT.md"]
    result = audit_repository(full_dirs, files)
    assert result.overall_score == 93
    assert result.level is Level.RAW


@pytest.mark.parametrize(
    "score,level",
    [
        (100, Level.RHODIUM),
        (95, Level.RHODIUM),
        (94, Level.GOLD),
        (85, Level.GOLD),
        (84, Level.SILVER),
        (75, Level.SILVER),
        (74, Level.BRONZE),
        (60, Level.BRONZE),
        (59, Level.RAW),
        (0, Level.RAW),
    ],
)
def test_determine_level_thresholds(score, level):
    assert determine_level(score, True) is level


def test_determine_level_requires_compliance():
    assert determine_level(96, False) is Level.RAW


def test_recommendations_order_and_priority():
    recs = audit_repository([], []).recommendations
    assert recs[:5] == (
        "[HIGH] Create src/ for Source code",
        "[HIGH] Create tests/ for Test files",
        "[MEDIUM] Create docs/ for Documentation",
        "[MEDIUM] Create scripts/ for Build and automation scripts",
        "[MEDIUM] Create .well-known/ for RFC-compliant metadata",
    )
    assert recs[5] == "[HIGH] Add LICENSE for License terms"
    assert len(recs) == 13
    assert not any("LICENSE.txt" in r for r in recs)
    assert not any(r.startswith("[LOW]") for r in recs)


def test_strict_mode_recommends_optional_items():
    scorer = AuditScorer(GrimRepoConfig(strict_mode=True))
    recs = scorer.audit([], []).recommendations
    assert "[LOW] Create examples/ for Example code" in recs
    assert "[LOW] Add MAINTAINERS.md for Project maintainers" in recs
    assert len(recs) == 17


def test_auto_suggest_off_keeps_only_summary():
    result = audit_repository([], [], GrimRepoConfig(auto_suggest=False))
    assert result.recommendations == ("Repository is incomplete",)


@pytest.mark.parametrize(
    "dirs,overall,summary",
    [
        (["src/", "tests/", "docs/", "scripts/", ".well-known/"], 97, "Repository is mostly complete"),
        (["src/", "tests/"], 81, "Repository is mostly complete"),
        ([], 60, "Repository needs improvement"),
    ],
)
def test_summary_brackets(full_files, dirs, overall, summary):
    result = audit_repository(dirs, full_files)
    assert result.overall_score == overall
    assert result.recommendations[-1] == summary


def test_custom_weights(full_dirs):
    config = GrimRepoConfig(weights=ScoringWeights(structure=1.0, community=0.0))
    result = audit_repository(full_dirs, [], config)
    assert result.overall_score == 100
    assert result.level is Level.RAW


def test_custom_thresholds(rsr_files):
    config = GrimRepoConfig(thresholds=LevelThresholds(rhodium=90, gold=80, silver=70, bronze=65))
    result = audit_repository(["src/", "tests/"], rsr_files, config)
    assert result.overall_score == 67
    assert result.level is Level.BRONZE


def test_custom_directories_join_registry():
    config = GrimRepoConfig(custom_dirs=[CheckItem("ci/", "CI configuration", Priority.REQUIRED)])
    result = audit_repository(["ci/"], [], config)
    # 10 of 48 points
    assert result.structure.score == 21
    assert result.structure.present == ("ci/",)


@pytest.mark.parametrize(
    "weights",
    [ScoringWeights(structure=0.5, community=0.6), ScoringWeights(structure=-0.2, community=1.2)],
)
def test_invalid_weights_rejected(weights):
    with pytest.raises(ValueError):
        AuditScorer(GrimRepoConfig(weights=weights))


def test_unordered_thresholds_rejected():
    with pytest.raises(ValueError):
        AuditScorer(GrimRepoConfig(thresholds=LevelThresholds(rhodium=80, gold=90)))


def test_audit_is_repeatable(rsr_files):
    scorer = AuditScorer()
    assert scorer.audit(["src/"], rsr_files) == scorer.audit(["src/"], rsr_files)


def test_markdown_report_sections():
    audit = audit_repository(["src/"], ["README.md"])
    report = generate_audit_report(audit)
    for header in (
        "# GrimRepo Audit Report",
        "## Overall Score",
        "## Quality Level",
        "## Structure Analysis",
        "## Community Standards Analysis",
        "## Recommendations",
    ):
        assert header in report
    assert f"**{audit.overall_score}/100**" in report
    assert "**RAW**" in report
    assert "- `src/`" in report
    assert "`tests/` (required): Test files" in report


def test_markdown_report_for_complete_repository(full_dirs, full_files):
    report = run_audit(full_dirs, full_files)
    assert "**100/100**" in report
    assert "**RHODIUM**" in report
    assert "RSR compliant: yes" in report


def test_json_report_keeps_every_field():
    audit = audit_repository(["src/"], ["README.md"])
    parsed = json.loads(generate_json_report(audit))
    assert set(parsed) == {"structure", "community", "overallScore", "level", "recommendations"}
    assert parsed["level"] == "raw"
    assert parsed["structure"]["present"] == ["src/"]
    assert parsed["structure"]["missing"][0] == {
        "path": "tests/",
        "purpose": "Test files",
        "priority": "required",
        "template": "# Tests\n\nTest suites and test utilities go here.",
    }


def test_json_report_parses_back(rsr_files):
    audit = audit_repository(["src/", "tests/"], rsr_files)
    assert AuditResult.from_json(generate_json_report(audit)) == audit
