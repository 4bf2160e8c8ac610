"""Checklists of directories and community files an audited repository should carry."""

from typing import Callable, Iterable, Tuple

from grimrepo.scoring import normalize_dir_path
from grimrepo.types import CheckItem, Priority

# Standard directory structure for modern repositories
STANDARD_DIRECTORIES: Tuple[CheckItem, ...] = (
    CheckItem(
        path="src/",
        purpose="Source code",
        priority=Priority.REQUIRED,
        template="# Source Code\n\nMain application source code goes here.",
    ),
    CheckItem(
        path="tests/",
        purpose="Test files",
        priority=Priority.REQUIRED,
        template="# Tests\n\nTest suites and test utilities go here.",
    ),
    CheckItem(
        path="docs/",
        purpose="Documentation",
        priority=Priority.RECOMMENDED,
        template="# Documentation\n\nDetailed documentation, guides, and API references.",
    ),
    CheckItem(
        path="examples/",
        purpose="Example code",
        priority=Priority.OPTIONAL,
        template="# Examples\n\nUsage examples and sample applications.",
    ),
    CheckItem(path=".gitlab/", purpose="GitLab CI/CD config", priority=Priority.OPTIONAL),
    CheckItem(path=".github/", purpose="GitHub-specific config", priority=Priority.OPTIONAL),
    CheckItem(path="scripts/", purpose="Build and automation scripts", priority=Priority.RECOMMENDED),
    CheckItem(path=".well-known/", purpose="RFC-compliant metadata", priority=Priority.RECOMMENDED),
)

# Standard community health files
STANDARD_FILES: Tuple[CheckItem, ...] = (
    CheckItem(path="LICENSE", purpose="License terms", priority=Priority.REQUIRED),
    CheckItem(path="LICENSE.txt", purpose="License terms (alternative)", priority=Priority.REQUIRED),
    CheckItem(path="README.md", purpose="Project overview", priority=Priority.REQUIRED),
    CheckItem(path="CONTRIBUTING.md", purpose="Contribution guidelines", priority=Priority.RECOMMENDED),
    CheckItem(path="CODE_OF_CONDUCT.md", purpose="Community conduct standards", priority=Priority.RECOMMENDED),
    CheckItem(path="SECURITY.md", purpose="Security policies", priority=Priority.RECOMMENDED),
    CheckItem(path="CHANGELOG.md", purpose="Version history", priority=Priority.RECOMMENDED),
    CheckItem(path="MAINTAINERS.md", purpose="Project maintainers", priority=Priority.OPTIONAL),
    CheckItem(
        path=".well-known/security.txt",
        purpose="RFC 9116 security contact",
        priority=Priority.RECOMMENDED,
    ),
)

# Normalized names accepted as evidence of a license; one scoring slot
LICENSE_ALIASES: Tuple[str, ...] = ("license", "license.txt", "license.md")

# Files a repository needs before it can rank above raw. Each entry is a set of
# normalized alternatives, any one of which satisfies it.
RSR_REQUIRED_FILES: Tuple[Tuple[str, ...], ...] = (
    ("readme.md",),
    ("license", "license.txt"),
    ("security.md",),
    ("contributing.md",),
    ("code_of_conduct.md",),
)


def extend_registry(
    base: Tuple[CheckItem, ...],
    extra: Iterable[CheckItem],
    normalize: Callable[[str], str] = normalize_dir_path,
) -> Tuple[CheckItem, ...]:
    """Return *base* with *extra* appended, skipping paths already listed.

    Paths are compared after *normalize*, the same normalizer the analyzer
    applies to the registry.
    """
    seen = {normalize(item.path) for item in base}
    added = []
    for item in extra:
        key = normalize(item.path)
        if key in seen:
            continue
        seen.add(key)
        added.append(item)
    return base + tuple(added)
