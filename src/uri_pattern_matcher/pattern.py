"""UriPattern: a parsed path template.

    >>> pattern = UriPattern("/api/{resource}/{id}/details")
    >>> pattern.is_match("/api/customer/John/details")
    True

Equality and ordering are structural: they compare specificity scores, not
template text, so ``/a/{b}`` and ``/x/{y}`` are equal patterns.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from uri_pattern_matcher.score import PatternScore
from uri_pattern_matcher.segment import (
    PLACEHOLDER_CLOSE,
    PLACEHOLDER_OPEN,
    SEPARATOR,
    Segment,
    parse_segments,
    split_segments,
)


@dataclass(frozen=True, slots=True, eq=False)
class UriPattern:
    """Immutable template text plus its parsed segments.

    Attributes:
        value: The template exactly as given.
        segments: One ``Literal`` or ``Placeholder`` per ``/``-separated part.
        score: Cached ``PatternScore`` used for ``==``, ``<`` and ``hash``.
    """

    value: str
    segments: tuple[Segment, ...] = field(init=False, repr=False)
    score: PatternScore = field(init=False, repr=False)

    def __post_init__(self) -> None:
        segments = parse_segments(self.value)
        object.__setattr__(self, "segments", segments)
        object.__setattr__(self, "score", PatternScore.from_segments(segments))

    @classmethod
    def from_str(cls, value: str) -> UriPattern:
        return cls(value)

    def is_match(self, candidate: str) -> bool:
        """True if ``candidate`` has the same segment count and every segment matches."""
        parts = split_segments(candidate)
        if len(parts) != len(self.segments):
            return False
        return all(seg.matches(part) for seg, part in zip(self.segments, parts))

    @property
    def normalized(self) -> str:
        """Template with placeholder names dropped: ``/a/{x}/b`` -> ``/a/{}/b``."""
        empty = PLACEHOLDER_OPEN + PLACEHOLDER_CLOSE
        return SEPARATOR.join(
            str(seg) if seg.is_literal else empty for seg in self.segments
        )

    @property
    def literal_count(self) -> int:
        return sum(1 for seg in self.segments if seg.is_literal)

    @property
    def placeholder_count(self) -> int:
        return len(self.segments) - self.literal_count

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return self.value

    # Structural comparisons

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UriPattern):
            return NotImplemented
        return self.score == other.score

    def __hash__(self) -> int:
        return hash(self.score)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, UriPattern):
            return NotImplemented
        return self.score < other.score

    def __le__(self, other: object) -> bool:
        if not isinstance(other, UriPattern):
            return NotImplemented
        return self.score <= other.score

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, UriPattern):
            return NotImplemented
        return self.score > other.score

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, UriPattern):
            return NotImplemented
        return self.score >= other.score
