"""Shared data types for repository audits."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


class Priority(Enum):
    """How much a missing check matters."""
    REQUIRED = "required"
    RECOMMENDED = "recommended"
    OPTIONAL = "optional"

    @classmethod
    def from_str(cls, name: str) -> 'Priority':
        """Create from string representation."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown priority {name!r}; expected one of "
                f"{', '.join(p.value for p in cls)}"
            ) from None

    @property
    def weight(self) -> int:
        """Points this priority contributes to a score."""
        return _PRIORITY_WEIGHTS[self]


_PRIORITY_WEIGHTS: Dict[Priority, int] = {
    Priority.REQUIRED: 10,
    Priority.RECOMMENDED: 5,
    Priority.OPTIONAL: 1,
}


class Level(Enum):
    """Quality tier of an audited repository, lowest first."""
    RAW = "raw"
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    RHODIUM = "rhodium"


@dataclass(frozen=True)
class CheckItem:
    """A directory or file the auditor expects to find.

    Attributes:
        path: Canonical path, e.g. ``"src/"`` or ``"README.md"``
        purpose: Human readable description
        priority: Scoring weight class
        template: Optional scaffold content for the path
    """
    path: str
    purpose: str
    priority: Priority = Priority.RECOMMENDED
    template: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "path": self.path,
            "purpose": self.purpose,
            "priority": self.priority.value,
        }
        if self.template is not None:
            data["template"] = self.template
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CheckItem':
        """Create a CheckItem from a dictionary.

        Raises:
            ValueError: If *data* is not a mapping, ``path`` is missing, the
                priority is unknown or the template is not a string
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Check entry must be a mapping, got {data!r}")
        if not data.get("path"):
            raise ValueError(f"Check entry without a path: {data!r}")
        template = data.get("template")
        if template is not None and not isinstance(template, str):
            raise ValueError(f"Check template for {data['path']!r} must be a string")
        priority = data.get("priority", Priority.RECOMMENDED)
        if not isinstance(priority, Priority):
            priority = Priority.from_str(str(priority))
        return cls(
            path=str(data["path"]),
            purpose=str(data.get("purpose", "")),
            priority=priority,
            template=template,
        )


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one analyzer pass.

    Attributes:
        missing: Registry checks not found among the inputs
        present: Caller-supplied paths that satisfied a check, as given
        score: Weighted completeness, 0-100
    """
    missing: Tuple[CheckItem, ...] = ()
    present: Tuple[str, ...] = ()
    score: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "missing": [item.to_dict() for item in self.missing],
            "present": list(self.present),
            "score": self.score,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AnalysisResult':
        return cls(
            missing=tuple(CheckItem.from_dict(d) for d in data.get("missing", [])),
            present=tuple(str(p) for p in data.get("present", [])),
            score=int(data.get("score", 0)),
        )


@dataclass(frozen=True)
class AuditResult:
    """Combined structure and community audit."""
    structure: AnalysisResult
    community: AnalysisResult
    overall_score: int
    level: Level
    recommendations: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary using the serialized field names."""
        return {
            "structure": self.structure.to_dict(),
            "community": self.community.to_dict(),
            "overallScore": self.overall_score,
            "level": self.level.value,
            "recommendations": list(self.recommendations),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AuditResult':
        """Create an AuditResult from the output of :meth:`to_dict`."""
        return cls(
            structure=AnalysisResult.from_dict(data.get("structure", {})),
            community=AnalysisResult.from_dict(data.get("community", {})),
            overall_score=int(data.get("overallScore", 0)),
            level=Level(data.get("level", Level.RAW.value)),
            recommendations=tuple(data.get("recommendations", [])),
        )

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> 'AuditResult':
        return cls.from_dict(json.loads(text))
