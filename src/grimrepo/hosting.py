"""Code-hosting platform detection from repository URLs."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, Optional
from urllib.parse import urlparse


class Platform(Enum):
    """Supported code-hosting platforms."""
    GITLAB = "gitlab"
    GITHUB = "github"
    BITBUCKET = "bitbucket"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class PlatformContext:
    """Where in a hosted repository a URL points."""
    platform: Platform
    repo_owner: str
    repo_name: str
    current_path: str

    def to_dict(self) -> Dict[str, str]:
        data = asdict(self)
        data["platform"] = self.platform.value
        return data


def detect_platform(hostname: str) -> Platform:
    """Detect the platform from a hostname such as ``gitlab.example.org``."""
    host = hostname.lower()
    for platform in (Platform.GITLAB, Platform.GITHUB, Platform.BITBUCKET):
        if platform.value in host:
            return platform
    return Platform.UNKNOWN


def get_repository_context(url: str) -> Optional[PlatformContext]:
    """Extract the repository context from a URL.

    Returns None for unknown platforms and for URLs that do not name both an
    owner and a repository.
    """
    parsed = urlparse(url if "://" in url else f"https://{url}")
    platform = detect_platform(parsed.hostname or "")
    if platform is Platform.UNKNOWN:
        return None

    parts = [p for p in parsed.path.split("/") if p]
    if len(parts) < 2:
        return None

    return PlatformContext(
        platform=platform,
        repo_owner=parts[0],
        repo_name=parts[1],
        current_path="/" + "/".join(parts[2:]),
    )
