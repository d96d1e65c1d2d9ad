"""
Exclusion Filter

Decides which reported paths are noise (build output, dependencies, VCS
metadata, coverage, lock files) and should never reach review.
"""

from collections.abc import Iterable

# Matched as plain substrings / prefixes of the reported path
EXCLUDED_PATTERNS = frozenset(
    {
        "dist",
        "bun.lock",
        "node_modules",
        ".git",
        "coverage",
    }
)


def exclusion_set(extra_patterns: Iterable[str] | None = None) -> frozenset[str]:
    """Union of the built-in patterns and caller additions."""
    if not extra_patterns:
        return EXCLUDED_PATTERNS
    # An empty pattern would match every path
    return EXCLUDED_PATTERNS | {p for p in extra_patterns if p}


def is_excluded(path: str, extra_patterns: Iterable[str] | None = None) -> bool:
    """Check whether a path contains or starts with any exclusion pattern."""
    if not path:
        return False
    return any(
        pattern in path or path.startswith(pattern)
        for pattern in exclusion_set(extra_patterns)
    )
