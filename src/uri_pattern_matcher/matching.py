"""Pick the most specific template for a candidate path.

Typical use is routing: keep every template that matches the candidate, then
take the maximum by specificity score.

    >>> best_match(["/api/{foo}/bar/{zzz}", "/api/{foo}/{bar}/zzz"], "/api/x/bar/zzz")
    UriPattern(value='/api/{foo}/bar/{zzz}')
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Union

from uri_pattern_matcher.pattern import UriPattern

logger = logging.getLogger(__name__)

PatternLike = Union[UriPattern, str]


def _as_pattern(pattern: PatternLike) -> UriPattern:
    if isinstance(pattern, UriPattern):
        return pattern
    return UriPattern(pattern)


def templates_equivalent(a: PatternLike, b: PatternLike) -> bool:
    """True if two templates differ at most in placeholder names.

    Stricter than ``==``, which ignores literal text too.
    """
    return _as_pattern(a).normalized == _as_pattern(b).normalized


@dataclass(frozen=True)
class PatternMatch:
    pattern: UriPattern
    candidate: str
    normalized: str


def matching_patterns(patterns: Iterable[PatternLike], candidate: str) -> list[UriPattern]:
    """All patterns matching ``candidate``, in input order."""
    return [p for p in map(_as_pattern, patterns) if p.is_match(candidate)]


def best_match(patterns: Iterable[PatternLike], candidate: str) -> UriPattern | None:
    """Most specific pattern matching ``candidate``, or None.

    Ties between equally specific patterns go to the first one given.
    """
    matches = matching_patterns(patterns, candidate)
    if not matches:
        logger.debug(f"No pattern matched {candidate!r}")
        return None
    best = max(matches)
    logger.debug(
        f"Selected {best.value!r} for {candidate!r} out of {len(matches)} matching pattern(s)"
    )
    return best


def find_best_match(patterns: Iterable[PatternLike], candidate: str) -> PatternMatch | None:
    """Like ``best_match`` but returns a ``PatternMatch`` record."""
    best = best_match(patterns, candidate)
    if best is None:
        return None
    return PatternMatch(pattern=best, candidate=candidate, normalized=best.normalized)


def sort_by_specificity(
    patterns: Iterable[PatternLike], *, descending: bool = True
) -> list[UriPattern]:
    """Stable sort by score; most specific first unless ``descending=False``."""
    return sorted(map(_as_pattern, patterns), reverse=descending)
