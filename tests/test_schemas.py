import json
from pathlib import Path

import pytest
from jsonschema import Draft202012Validator, exceptions as jsonschema_exceptions

from grimrepo import schemas
from grimrepo.audit import audit_repository, generate_json_report


def test_export_schemas(tmp_path: Path) -> None:
    out = tmp_path / "schemas"
    schemas.export(out)
    assert (out / "grimrepo_config.schema.json").exists()
    assert (out / "audit_result.schema.json").exists()


def test_json_report_matches_exported_schema(tmp_path: Path, full_dirs, full_files) -> None:
    out = tmp_path / "schemas"
    schemas.export(out)
    schema = json.loads((out / "audit_result.schema.json").read_text(encoding="utf-8"))
    validator = Draft202012Validator(schema)

    for dirs, files in ((["src/"], ["README.md"]), ([], []), (full_dirs, full_files)):
        validator.validate(json.loads(generate_json_report(audit_repository(dirs, files))))


def test_schema_uses_serialized_field_names() -> None:
    schema = schemas.audit_report_schema()
    assert "overallScore" in schema["properties"]
    assert "overall_score" not in schema["properties"]

    payload = json.loads(generate_json_report(audit_repository(["src/"], ["README.md"])))
    payload["overall_score"] = payload.pop("overallScore")
    with pytest.raises(jsonschema_exceptions.ValidationError):
        Draft202012Validator(schema).validate(payload)


def test_validate_report() -> None:
    report = generate_json_report(audit_repository(["src/", "tests/"], ["README.md", "LICENSE"]))
    assert schemas.validate_report(report)["level"] == "raw"

    bad = json.loads(report)
    bad["level"] = "platinum"
    with pytest.raises(ValueError, match="does not match schema"):
        schemas.validate_report(bad)

    with pytest.raises(ValueError, match="Invalid JSON"):
        schemas.validate_report("{not json")
