"""Glob matching for catalog-relative file paths."""

import re


def _glob_to_regex(pattern: str) -> re.Pattern:
    # ** spans directories, * stays within one path segment
    parts = pattern.split("**")
    body = ".*".join(
        "[^/]*".join(re.escape(chunk) for chunk in part.split("*")) for part in parts
    )
    return re.compile(body)


def matches_any(path: str, patterns: list[str]) -> bool:
    """Check whether a path matches any of the glob patterns."""
    normalized = path.replace("\\", "/")
    return any(_glob_to_regex(p).search(normalized) for p in patterns)


def should_ignore_file(path: str, ignore_patterns: list[str]) -> bool:
    """Check whether a catalog file should be skipped."""
    if not ignore_patterns:
        return False
    return matches_any(path, ignore_patterns)
