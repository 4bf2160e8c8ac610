"""Configuration management for GrimRepo."""

import copy
import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple, Union

import yaml

from grimrepo.registry import STANDARD_DIRECTORIES, STANDARD_FILES, extend_registry
from grimrepo.scoring import normalize_file_path
from grimrepo.types import CheckItem

logger = logging.getLogger(__name__)


def _check_type(name: str, value: Any, expected: Any) -> None:
    """Raise ValueError unless *value* suits a field annotated *expected*."""
    if expected is bool:
        if not isinstance(value, bool):
            raise ValueError(f"'{name}' must be true or false, got {value!r}")
    elif expected in (int, float):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"'{name}' must be a number, got {value!r}")


@dataclass
class ScoringWeights:
    """Share of the overall score contributed by each analyzer."""
    structure: float = 0.4
    community: float = 0.6


@dataclass
class LevelThresholds:
    """Minimum overall score for each level above raw."""
    rhodium: int = 95
    gold: int = 85
    silver: int = 75
    bronze: int = 60


@dataclass
class GrimRepoConfig:
    """Top-level GrimRepo configuration."""
    enabled: bool = True
    auto_suggest: bool = True
    strict_mode: bool = False  # optional checks produce recommendations too
    custom_dirs: List[CheckItem] = field(default_factory=list)
    custom_files: List[CheckItem] = field(default_factory=list)
    weights: ScoringWeights = field(default_factory=ScoringWeights)
    thresholds: LevelThresholds = field(default_factory=LevelThresholds)

    @property
    def directory_registry(self) -> Tuple[CheckItem, ...]:
        """Standard directories plus ``custom_dirs``."""
        return extend_registry(STANDARD_DIRECTORIES, self.custom_dirs)

    @property
    def file_registry(self) -> Tuple[CheckItem, ...]:
        """Standard community files plus ``custom_files``."""
        return extend_registry(STANDARD_FILES, self.custom_files, normalize_file_path)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'GrimRepoConfig':
        """Load configuration from a YAML file."""
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
        logger.debug("Loaded configuration from %s", path)
        if data is not None and not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping at the top level")
        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GrimRepoConfig':
        """Create a GrimRepoConfig from a dictionary.

        Unknown keys are ignored with a warning.

        Raises:
            ValueError: If a section is not a mapping, a value has the wrong
                type, or a custom check entry is malformed
        """
        def create_instance(klass, d, section):
            if d is None:
                return klass()
            if not isinstance(d, Mapping):
                raise ValueError(f"'{section}' must be a mapping, got {type(d).__name__}")
            names = {f.name: f for f in dataclasses.fields(klass) if f.init}
            unknown = sorted(str(k) for k in d if k not in names)
            if unknown:
                logger.warning("Ignoring unknown %s keys: %s", klass.__name__, ", ".join(unknown))
            values = {}
            for k, v in d.items():
                if k in names:
                    _check_type(f"{section}.{k}" if section else k, v, names[k].type)
                    values[k] = v
            return klass(**values)

        def create_checks(section):
            entries = data.get(section)
            if entries is None:
                return []
            if not isinstance(entries, list):
                raise ValueError(f"'{section}' must be a list of checks, got {type(entries).__name__}")
            return [CheckItem.from_dict(d) for d in entries]

        if not isinstance(data, Mapping):
            raise ValueError(f"configuration must be a mapping, got {type(data).__name__}")

        nested = {'custom_dirs', 'custom_files', 'weights', 'thresholds'}
        top = create_instance(cls, {k: v for k, v in data.items() if k not in nested}, '')
        top.custom_dirs = create_checks('custom_dirs')
        top.custom_files = create_checks('custom_files')
        top.weights = create_instance(ScoringWeights, data.get('weights'), 'weights')
        top.thresholds = create_instance(LevelThresholds, data.get('thresholds'), 'thresholds')
        return top

    def to_dict(self) -> dict:
        """Convert the configuration to a dictionary."""
        return {
            'enabled': self.enabled,
            'auto_suggest': self.auto_suggest,
            'strict_mode': self.strict_mode,
            'custom_dirs': [c.to_dict() for c in self.custom_dirs],
            'custom_files': [c.to_dict() for c in self.custom_files],
            'weights': dataclasses.asdict(self.weights),
            'thresholds': dataclasses.asdict(self.thresholds),
        }

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Save the configuration to a YAML file."""
        with open(path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


# Default configuration
default_config = GrimRepoConfig()


def get_default_config() -> GrimRepoConfig:
    """Get a deep copy of the default configuration."""
    return copy.deepcopy(default_config)
