"""Patterns from an OpenAPI document's ``paths`` object.

The document must already be loaded (e.g. from JSON or YAML) into a mapping;
this module never reads files.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

from uri_pattern_matcher.matching import best_match
from uri_pattern_matcher.pattern import UriPattern

logger = logging.getLogger(__name__)


def patterns_from_openapi(document: Mapping[str, Any]) -> list[UriPattern]:
    """One ``UriPattern`` per ``paths`` key, in sorted key order."""
    paths = document.get("paths")
    if paths is None:
        return []
    if not isinstance(paths, Mapping):
        raise TypeError(f"OpenAPI 'paths' must be a mapping, got {type(paths).__name__}")
    patterns = [UriPattern(path) for path in sorted(paths)]
    logger.debug(f"Read {len(patterns)} path template(s) from OpenAPI document")
    return patterns


def route_for(document: Mapping[str, Any], candidate: str) -> str | None:
    """Template text of the most specific OpenAPI path matching ``candidate``."""
    best = best_match(patterns_from_openapi(document), candidate)
    return best.value if best is not None else None
