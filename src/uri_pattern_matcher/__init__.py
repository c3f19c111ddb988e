"""uri_pattern_matcher — match paths against ``/foo/{bar}`` templates and rank templates by specificity."""

__all__ = [
    "__version__",
    "UriPattern",
    "PatternScore",
    # Segments
    "Literal",
    "Placeholder",
    "Segment",
    "SEPARATOR",
    "parse_segment",
    "parse_segments",
    "split_segments",
    # Selection
    "PatternMatch",
    "best_match",
    "find_best_match",
    "matching_patterns",
    "sort_by_specificity",
    "templates_equivalent",
    # OpenAPI
    "patterns_from_openapi",
    "route_for",
]
__version__ = "0.1.0"

from uri_pattern_matcher.segment import (  # noqa: E402, F401
    SEPARATOR,
    Literal,
    Placeholder,
    Segment,
    parse_segment,
    parse_segments,
    split_segments,
)
from uri_pattern_matcher.score import PatternScore  # noqa: E402, F401
from uri_pattern_matcher.pattern import UriPattern  # noqa: E402, F401
from uri_pattern_matcher.matching import (  # noqa: E402, F401
    PatternMatch,
    best_match,
    find_best_match,
    matching_patterns,
    sort_by_specificity,
    templates_equivalent,
)
from uri_pattern_matcher.openapi import patterns_from_openapi, route_for  # noqa: E402, F401
