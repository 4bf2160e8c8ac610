#!/usr/bin/env python3
"""Audit this repository with GrimRepo, as used by the CI gatekeeper."""

from __future__ import annotations

import json
import sys
from pathlib import Path

from grimrepo.audit import audit_repository
from grimrepo.cli import collect_listing
from grimrepo.types import Level


def main() -> int:
    repo = Path(__file__).resolve().parent.parent
    dirs, files = collect_listing(repo)
    result = audit_repository(dirs, files)
    json.dump(result.to_dict(), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0 if result.level is not Level.RAW else 1


if __name__ == "__main__":  # pragma: no cover - script entry
    sys.exit(main())
