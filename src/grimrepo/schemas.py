"""JSON schemas for GrimRepo configuration files and JSON audit reports.

The audit report schema describes the serialized form written by
:func:`grimrepo.audit.generate_json_report` (``overallScore``, lowercase
levels and priorities), not the attribute names of :class:`AuditResult`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from jsonschema import Draft202012Validator, exceptions as jsonschema_exceptions
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .config import GrimRepoConfig
from .types import Level, Priority


class CheckRecord(BaseModel):
    """A serialized :class:`~grimrepo.types.CheckItem`."""
    model_config = ConfigDict(extra="forbid")

    path: str
    purpose: str
    priority: Priority
    template: Optional[str] = None


class AnalysisRecord(BaseModel):
    """A serialized :class:`~grimrepo.types.AnalysisResult`."""
    model_config = ConfigDict(extra="forbid")

    missing: List[CheckRecord]
    present: List[str]
    score: int = Field(ge=0, le=100)


class AuditReport(BaseModel):
    """A serialized :class:`~grimrepo.types.AuditResult`."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    structure: AnalysisRecord
    community: AnalysisRecord
    overall_score: int = Field(alias="overallScore", ge=0, le=100)
    level: Level
    recommendations: List[str]


def _schema_for(cls: Type) -> dict:
    """Generate a JSON schema for a dataclass using Pydantic type adapters."""
    return TypeAdapter(cls).json_schema()


def config_schema() -> Dict[str, Any]:
    """Schema of a GrimRepo YAML configuration, once parsed."""
    return _schema_for(GrimRepoConfig)


def audit_report_schema() -> Dict[str, Any]:
    """Schema of the JSON audit report."""
    return AuditReport.model_json_schema(by_alias=True)


def validate_report(report: Union[str, Mapping[str, Any]]) -> Mapping[str, Any]:
    """Validate a JSON audit report against :func:`audit_report_schema`.

    Args:
        report: The JSON text or its parsed mapping

    Returns:
        The parsed report

    Raises:
        ValueError: If the report is not JSON or does not match the schema
    """
    if isinstance(report, str):
        try:
            payload = json.loads(report)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON report: {exc}") from exc
    else:
        payload = report

    try:
        Draft202012Validator(audit_report_schema()).validate(payload)
    except jsonschema_exceptions.ValidationError as exc:
        raise ValueError(f"Audit report does not match schema: {exc.message}") from exc
    return payload


def export(output_dir: Path) -> None:
    """Export JSON schemas for the configuration and audit report to *output_dir*."""
    output_dir.mkdir(parents=True, exist_ok=True)
    schemas = {
        "grimrepo_config.schema.json": config_schema(),
        "audit_result.schema.json": audit_report_schema(),
    }
    for name, schema in schemas.items():
        with open(output_dir / name, "w", encoding="utf-8") as f:
            json.dump(schema, f, indent=2)


if __name__ == "__main__":  # pragma: no cover - manual execution
    export(Path("docs/schemas"))
