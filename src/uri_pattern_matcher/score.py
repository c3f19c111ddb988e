"""Specificity score for path templates.

A score is the tuple of per-segment "is literal" flags. Scores compare
lexicographically, earliest position first, with a literal ranking above a
placeholder at the same position. When one score is a prefix of the other the
longer one ranks higher:

    P L L  <  L P L
    L P L  <  L L P
    L L    <  L L L

Literal text never affects the score, only where literals sit.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from uri_pattern_matcher.segment import Segment


@dataclass(frozen=True, slots=True, order=True)
class PatternScore:
    flags: tuple[bool, ...]

    @classmethod
    def from_segments(cls, segments: Iterable[Segment]) -> PatternScore:
        return cls(tuple(seg.is_literal for seg in segments))

    def __len__(self) -> int:
        return len(self.flags)

    @property
    def shape(self) -> str:
        """Compact ``L``/``P`` rendering, e.g. ``"LLPL"``."""
        return "".join("L" if flag else "P" for flag in self.flags)
