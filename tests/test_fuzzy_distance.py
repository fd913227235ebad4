"""Tests for Jaro distance between translation keys."""

from __future__ import annotations

import pytest

from polexengine.fuzzy import jaro_distance, similarity


class TestJaroDistance:
    """Known values of the Jaro metric."""

    @pytest.mark.parametrize(
        ("s1", "s2", "expected"),
        [
            ("martha", "marhta", 0.9444),
            ("dwayne", "duane", 0.8222),
            ("dixon", "dicksonx", 0.7667),
            ("jones", "johnson", 0.7905),
            ("fvie", "ten", 0.0),
            ("abc", "xyz", 0.0),
        ],
    )
    def test_known_values(self, s1: str, s2: str, expected: float) -> None:
        """Standard Jaro reference values."""
        assert jaro_distance(s1, s2) == pytest.approx(expected, abs=1e-4)

    def test_identical(self) -> None:
        """Identical strings score 1.0."""
        assert jaro_distance("Hello world", "Hello world") == 1.0

    def test_both_empty(self) -> None:
        """Two empty strings are identical."""
        assert jaro_distance("", "") == 1.0

    @pytest.mark.parametrize(("s1", "s2"), [("", "a"), ("abc", "")])
    def test_one_empty(self, s1: str, s2: str) -> None:
        """Empty against non-empty scores 0.0."""
        assert jaro_distance(s1, s2) == 0.0

    def test_single_characters(self) -> None:
        """Different single characters have no common characters."""
        assert jaro_distance("a", "b") == 0.0

    def test_unicode(self) -> None:
        """Comparison is per code point."""
        assert jaro_distance("Äpfel", "Äpfel!") > jaro_distance("Äpfel", "Apfel!")

    def test_similarity_alias(self) -> None:
        """similarity is jaro_distance."""
        assert similarity is jaro_distance


class TestJaroDistanceKeys:
    """Only the msgid of a key is compared."""

    def test_plural_left(self) -> None:
        """msgid_plural of the first key is ignored."""
        assert jaro_distance(("cat", "cats"), "cat2") == jaro_distance("cat", "cat2")

    def test_plural_right(self) -> None:
        """msgid_plural of the second key is ignored."""
        assert jaro_distance("cat2", ("cat", "cats")) == jaro_distance("cat2", "cat")

    def test_both_plural_different_plural_forms(self) -> None:
        """Very different msgid_plurals still match perfectly."""
        assert jaro_distance(("file", "files"), ("file", "zzzzzzzz")) == 1.0

    def test_plural_with_empty_plural(self) -> None:
        """Empty msgid_plural has no effect."""
        assert jaro_distance(("abc", ""), "abd") == jaro_distance("abc", "abd")
