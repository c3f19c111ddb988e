"""Path template segments.

A template such as ``/api/{resource}/{id}`` is split on ``/`` into segments.
Each segment is either a literal that must match byte-for-byte, or a
placeholder that matches any single segment:

    ""          -> Literal("")
    "api"       -> Literal("api")
    "{id}"      -> Placeholder("{id}")
    "{}"        -> Placeholder("{}")
    "{id"       -> Literal("{id")

Parsing never fails; anything that is not wrapped in braces is a literal.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


SEPARATOR = "/"
PLACEHOLDER_OPEN = "{"
PLACEHOLDER_CLOSE = "}"


@dataclass(frozen=True, slots=True)
class Literal:
    """A segment that only matches identical text."""

    text: str

    @property
    def is_literal(self) -> bool:
        return True

    def matches(self, candidate: str) -> bool:
        return self.text == candidate

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A segment that matches any single candidate segment, including ``""``.

    ``name`` keeps the raw ``{...}`` text for display only; all placeholders
    compare equal regardless of it.
    """

    name: str = field(default="{}", compare=False)

    @property
    def is_literal(self) -> bool:
        return False

    def matches(self, candidate: str) -> bool:
        return True

    def __str__(self) -> str:
        return self.name


Segment = Union[Literal, Placeholder]


def _is_placeholder(text: str) -> bool:
    return (
        len(text) >= 2
        and text.startswith(PLACEHOLDER_OPEN)
        and text.endswith(PLACEHOLDER_CLOSE)
    )


def parse_segment(text: str) -> Segment:
    """Classify a single segment's text."""
    if _is_placeholder(text):
        return Placeholder(text)
    return Literal(text)


def split_segments(text: str) -> list[str]:
    """Split a template or candidate on the separator.

    Empty segments are kept, so ``""`` gives ``[""]`` and ``"/a/"`` gives
    ``["", "a", ""]``.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return text.split(SEPARATOR)


def parse_segments(template: str) -> tuple[Segment, ...]:
    return tuple(parse_segment(part) for part in split_segments(template))
