"""Build version information and semantic version helpers."""

from __future__ import annotations

import os
import platform
import re
import sys
from dataclasses import dataclass

# Replaced at release time; the placeholders mark a development build.
_GIT_VERSION = "v0.0.0-main+$Format:%h$"
_GIT_COMMIT = "$Format:%H$"
_BUILD_DATE = "1970-01-01T00:00:00Z"


@dataclass(frozen=True)
class Info:
    """Versioning information for the running build."""

    git_version: str
    git_commit: str
    build_date: str
    python_version: str
    compiler: str
    platform: str

    def __str__(self) -> str:
        return self.git_version


def get() -> Info:
    """Return the version information of this build."""
    git_version, git_commit = _GIT_VERSION, _GIT_COMMIT
    if "$Format" in git_version:
        git_version = os.environ.get("KUTTL_DEV_VERSION") or "dev"
        git_commit = "dev"
    return Info(
        git_version=git_version,
        git_commit=git_commit,
        build_date=_BUILD_DATE,
        python_version=platform.python_version(),
        compiler=platform.python_implementation(),
        platform=f"{sys.platform}/{platform.machine()}",
    )


_SEMVER = re.compile(
    r"v?([0-9]+)(?:\.([0-9]+))?(?:\.([0-9]+))?"
    r"(?:-([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
)


@dataclass(frozen=True)
class Version:
    """A parsed semantic version."""

    major: int
    minor: int
    patch: int
    prerelease: str = ""
    metadata: str = ""
    original: str = ""

    def compare_major_minor(self, other: Version) -> int:
        """Compare only major and minor parts: -1, 0 or 1."""
        mine, theirs = (self.major, self.minor), (other.major, other.minor)
        return (mine > theirs) - (mine < theirs)

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += f"-{self.prerelease}"
        if self.metadata:
            text += f"+{self.metadata}"
        return text


def parse(text: str) -> Version:
    """Parse a semantic version, allowing a leading "v" and missing parts."""
    match = _SEMVER.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid semantic version: {text!r}")
    major, minor, patch, prerelease, metadata = match.groups()
    prerelease = prerelease or ""
    for segment in filter(None, prerelease.split(".")):
        if segment.isdigit() and len(segment) > 1 and segment.startswith("0"):
            raise ValueError(f"version segment starts with 0: {segment!r}")
    return Version(
        major=int(major),
        minor=int(minor or 0),
        patch=int(patch or 0),
        prerelease=prerelease,
        metadata=metadata or "",
        original=text,
    )


def from_github_version(text: str) -> Version:
    """Parse a release tag such as ``v1.5.2``."""
    return parse(clean(text))


def clean(text: str) -> str:
    """Return the version without a leading "v"."""
    return text[1:] if text.startswith("v") else text