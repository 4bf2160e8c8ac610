"""GrimRepo: audit-grade checks for narratable, scaffolded and legible repositories.

This package scores a repository's directory layout and community health files,
and ranks it on a raw/bronze/silver/gold/rhodium scale.
"""

__version__ = "1.0.0"

# Core components
from grimrepo.types import (
    AnalysisResult,
    AuditResult,
    CheckItem,
    Level,
    Priority,
)
from grimrepo.structure import analyze_structure
from grimrepo.community import analyze_community_standards, check_rsr_compliance
from grimrepo.audit import (
    AuditScorer,
    audit_repository,
    generate_audit_report,
    generate_json_report,
)

__all__ = [
    "AnalysisResult",
    "AuditResult",
    "CheckItem",
    "Level",
    "Priority",
    "analyze_structure",
    "analyze_community_standards",
    "check_rsr_compliance",
    "AuditScorer",
    "audit_repository",
    "generate_audit_report",
    "generate_json_report",
]
