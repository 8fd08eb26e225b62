"""Matching requested reference versions against the versions a resource has."""

import logging
from typing import Collection

import nodesemver

log = logging.getLogger(__name__)

LATEST = "latest"


def is_semver(version: str) -> bool:
    """Check whether a version string is a valid semantic version."""
    return version != LATEST and nodesemver.valid(version, False) is not None


def is_version_satisfied(requested: str | None, available: Collection[str]) -> bool:
    """Decide whether a requested version is met by any available version.

    The requested token may be absent, ``latest``, an exact version string,
    a semver range (``^1.0.0``, ``~1.2.0``, ``>=1.0.0 <2.0.0``) or an
    x-pattern such as ``0.0.x``. Exact string matches are tried before any
    semantic interpretation, so non-semver versions still resolve verbatim.

    Args:
        requested: The version a reference asks for, or None.
        available: Every version the target resource is known under.

    Returns:
        True if the reference resolves.
    """
    if not available:
        return False

    if not requested or requested == LATEST:
        return True

    if requested in available:
        return True

    try:
        candidates = [v for v in available if is_semver(v)]

        if any(nodesemver.satisfies(v, requested, False) for v in candidates):
            return True

        # x-patterns fall back to a plain prefix match: 0.1.x -> "0.1"
        if ".x" in requested:
            prefix = requested.replace(".x", "")
            return any(v.startswith(prefix) for v in candidates)

        return False
    except (ValueError, TypeError) as e:
        log.debug("Cannot interpret version %r as a range: %s", requested, e)
        return requested in available
