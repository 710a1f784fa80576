"""Version string of the package and semantic-version helpers."""

from __future__ import annotations

import re

_VERSION = "dev"
_DEV_VERSIONS = ("dev", "")
_NUMBER = re.compile(r"[+-]?[0-9]+")


def current() -> str:
    """Return the version string of the running package."""
    return _VERSION


def parse(v: str) -> tuple[int, int, int]:
    """Split a "v1.2.3" or "1.2.3" string into (major, minor, patch).

    Raises ValueError for dev, empty or non-semver strings.
    """
    if v.startswith("v"):
        v = v[1:]
    if v in _DEV_VERSIONS:
        raise ValueError("cannot parse dev or empty version")

    parts = v.split(".")
    if len(parts) != 3:
        raise ValueError(f"invalid version format: {v!r}")

    numbers = []
    for label, part in zip(("major", "minor", "patch"), parts):
        if not _NUMBER.fullmatch(part):
            raise ValueError(f"invalid {label} version: {part!r}")
        numbers.append(int(part))
    major, minor, patch = numbers
    return major, minor, patch


def compare(v1: str, v2: str) -> int:
    """Compare two versions: negative if v1 < v2, zero if equal, positive if v1 > v2.

    A dev (or empty) version sorts before every release. Strings that are not
    semantic versions are compared as plain strings.
    """
    is_dev1 = v1 in _DEV_VERSIONS
    is_dev2 = v2 in _DEV_VERSIONS
    if is_dev1 and is_dev2:
        return 0
    if is_dev1:
        return -1
    if is_dev2:
        return 1

    try:
        first = parse(v1)
        second = parse(v2)
    except ValueError:
        return (v1 > v2) - (v1 < v2)

    for a, b in zip(first, second):
        if a != b:
            return a - b
    return 0