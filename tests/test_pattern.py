"""Unit tests for UriPattern matching and structural comparison."""
from __future__ import annotations

import pytest

from uri_pattern_matcher import UriPattern
from uri_pattern_matcher.segment import Literal, Placeholder


class TestConstruction:
    def test_keeps_original_text(self):
        pattern = UriPattern("/api/{resource}/{id}")
        assert pattern.value == "/api/{resource}/{id}"
        assert str(pattern) == "/api/{resource}/{id}"
        assert repr(pattern) == "UriPattern(value='/api/{resource}/{id}')"

    def test_from_str_is_equivalent_to_constructor(self):
        pattern = UriPattern.from_str("/a/{b}")
        assert pattern.value == "/a/{b}"
        assert pattern.segments == UriPattern("/a/{b}").segments

    def test_segments(self):
        pattern = UriPattern("/api/{id}")
        assert pattern.segments == (Literal(""), Literal("api"), Placeholder("{id}"))
        assert len(pattern) == 3
        assert pattern.literal_count == 2
        assert pattern.placeholder_count == 1

    def test_is_immutable(self):
        pattern = UriPattern("/a")
        with pytest.raises(AttributeError):
            pattern.value = "/b"  # type: ignore[misc]

    def test_normalized_drops_placeholder_names(self):
        assert UriPattern("/items/{id}").normalized == "/items/{}"
        assert UriPattern("/a/{x}/b/{y}").normalized == "/a/{}/b/{}"
        assert UriPattern("/a/{").normalized == "/a/{"


class TestIsMatch:
    def test_placeholders_match_any_segment(self):
        pattern = UriPattern("/api/{resource}/{id}/details")
        assert pattern.is_match("/api/resource/id1/details")
        assert pattern.is_match("/api/customer/John/details")

    def test_parsing_example(self):
        assert UriPattern("/a/{b}/{c}/d").is_match("/a/resource/test/d")

    def test_literal_mismatch(self):
        assert not UriPattern("/api/{id}").is_match("/apx/1")
        assert not UriPattern("/api/{id}").is_match("/API/1")

    @pytest.mark.parametrize(
        "candidate",
        ["/api", "/api/1/2", "/api/1/", "api/1", ""],
    )
    def test_segment_count_must_match(self, candidate: str):
        assert UriPattern("/api/{id}").is_match(candidate) is False

    def test_literal_only_template_matches_itself(self):
        for text in ["/a/b/c", "", "/", "a//b", "{x", "/trailing/"]:
            assert UriPattern(text).is_match(text)

    def test_placeholder_matches_empty_segment(self):
        assert UriPattern("/a/{}").is_match("/a/")
        assert UriPattern("{}").is_match("")

    def test_trailing_slash_is_significant(self):
        assert not UriPattern("/a/b").is_match("/a/b/")
        assert not UriPattern("/a/b/").is_match("/a/b")

    def test_empty_template(self):
        pattern = UriPattern("")
        assert pattern.is_match("") is True
        assert pattern.is_match("x") is False

    def test_lone_open_brace_is_literal(self):
        pattern = UriPattern("{")
        assert pattern.is_match("{") is True
        assert pattern.is_match("x") is False

    def test_is_deterministic(self):
        pattern = UriPattern("/api/{id}")
        results = {pattern.is_match("/api/42") for _ in range(5)}
        assert results == {True}


class TestComparison:
    def test_equality_is_structural(self):
        assert UriPattern("/a/{b}/{c}/d") == UriPattern("/api/{resource}/{id}/details")
        assert UriPattern("/a/{b}/{c}/d") == UriPattern("/x/{y}/{z}/w")

    def test_non_equality(self):
        assert UriPattern("/a/{b}/{c}/d") != UriPattern("/a/{b}/c/{d}")

    def test_ordering_follows_earliest_literal(self):
        assert UriPattern("/a/{b}/c/{d}") > UriPattern("/a/{b}/{c}/d")
        assert not UriPattern("/a/{b}/{c}/d") > UriPattern("/a/{b}/c/{d}")
        assert UriPattern("/a/{b}/{c}/d") < UriPattern("/a/{b}/c/{d}")

    def test_longer_wins_when_prefix_equal(self):
        assert UriPattern("a/b") < UriPattern("a/b/c")
        assert UriPattern("a/b/c") >= UriPattern("a/b")

    def test_reflexive(self):
        pattern = UriPattern("/a/{b}")
        assert pattern == pattern
        assert pattern <= pattern
        assert pattern >= pattern

    def test_replacing_placeholder_with_literal_raises_rank(self):
        base = UriPattern("/{a}/{b}/{c}")
        for i, upgraded in enumerate(["/a/{b}/{c}", "/{a}/b/{c}", "/{a}/{b}/c"]):
            assert UriPattern(upgraded) > base, i

    def test_hash_consistent_with_equality(self):
        assert hash(UriPattern("/a/{b}")) == hash(UriPattern("/x/{y}"))
        assert len({UriPattern("/a/{b}"), UriPattern("/x/{y}"), UriPattern("/a/b")}) == 2

    def test_comparison_with_other_types(self):
        pattern = UriPattern("/a")
        assert (pattern == "/a") is False
        with pytest.raises(TypeError):
            pattern < "/a"  # noqa: B015

    def test_sorting(self):
        patterns = [UriPattern(t) for t in ["/{a}/b", "/a/b", "/a/{b}", "/{a}/{b}"]]
        assert [p.value for p in sorted(patterns)] == ["/{a}/{b}", "/{a}/b", "/a/{b}", "/a/b"]
