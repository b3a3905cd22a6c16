"""Property-based tests for ranges, checksums and text shapes."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st
from strategies import decimals, finite_bounds, seeds, word_counts

from klaw_faker import Factory, Generator


def _isbn10_valid(code: str) -> bool:
    values = [10 if c == 'X' else int(c) for c in code]
    return sum((i + 1) * v for i, v in enumerate(values)) % 11 == 0


def _ean_valid(code: str) -> bool:
    """EAN-13 and ISBN-13 share the 1-3-1 weighting."""
    weights = [1, 3] * 6 + [1]
    return sum(int(c) * w for c, w in zip(code, weights, strict=True)) % 10 == 0


class TestFloatRanges:
    """float() stays inside its bounds for any seed."""

    @given(seed=seeds)
    def test_upper_bound_only(self, seed: int) -> None:
        value = Factory.create('en_US', seed=seed).float(max=100)
        assert 0 <= value <= 100

    @given(seed=seeds, low=finite_bounds, high=finite_bounds, places=decimals)
    def test_arbitrary_bounds(self, seed: int, low: float, high: float, places: int | None) -> None:
        value = Factory.create('en_US', seed=seed).float(places, low, high)
        assert isinstance(value, float)
        assert min(low, high) <= value <= max(low, high)

    @given(seed=seeds, places=st.integers(min_value=0, max_value=9))
    def test_rounded_to_requested_places(self, seed: int, places: int) -> None:
        value = Factory.create('en_US', seed=seed).float(places, 0, 1000)
        assert round(value, places) == value


class TestCoordinates:
    @given(seed=seeds)
    def test_latitude_in_range(self, seed: int) -> None:
        assert -90 <= Factory.create('en_US', seed=seed).latitude() <= 90

    @given(seed=seeds)
    def test_longitude_in_range(self, seed: int) -> None:
        assert -180 <= Factory.create('en_US', seed=seed).longitude() <= 180

    @given(seed=seeds, low=finite_bounds, high=finite_bounds)
    def test_latitude_with_any_bounds(self, seed: int, low: float, high: float) -> None:
        assert -90 <= Factory.create('en_US', seed=seed).latitude(low, high) <= 90


class TestChecksums:
    """Generated codes carry valid check digits."""

    @given(seed=seeds)
    def test_ean13(self, seed: int) -> None:
        code = Factory.create('en_US', seed=seed).ean13()
        assert len(code) == 13
        assert _ean_valid(code)

    @given(seed=seeds)
    def test_isbn10(self, seed: int) -> None:
        code = Factory.create('en_US', seed=seed).isbn10()
        assert len(code) == 10
        assert code[:9].isdigit()
        assert _isbn10_valid(code)

    @given(seed=seeds)
    def test_isbn13(self, seed: int) -> None:
        code = Factory.create('en_US', seed=seed).isbn13()
        assert code.startswith(('978', '979'))
        assert _ean_valid(code)


class TestTextShapes:
    """List and joined forms of the text methods."""

    @given(seed=seeds, nb=word_counts)
    def test_words_list(self, seed: int, nb: int) -> None:
        words = Factory.create('en_US', seed=seed).words(nb)
        assert isinstance(words, list)
        assert len(words) == nb
        assert all(isinstance(w, str) and w for w in words)

    @given(seed=seeds, nb=word_counts)
    def test_words_as_text(self, seed: int, nb: int) -> None:
        a = Factory.create('en_US', seed=seed)
        b = Factory.create('en_US', seed=seed)
        assert a.words(nb, as_text=True) == ' '.join(b.words(nb))

    def test_words_three(self, gen: Generator) -> None:
        words = gen.words(3)
        assert len(words) == 3
        assert isinstance(gen.words(3, as_text=True), str)

    def test_sentences_and_paragraphs_as_text(self, gen: Generator) -> None:
        assert isinstance(gen.sentences(2, as_text=True), str)
        assert '\n\n' in gen.paragraphs(2, as_text=True)

    def test_zero_words_is_none(self, gen: Generator) -> None:
        assert gen.sentence(0) is None
        assert gen.words(0, as_text=True) is None
        assert gen.words(0) == []

    @given(seed=seeds)
    def test_text_respects_limit(self, seed: int) -> None:
        text = Factory.create('en_US', seed=seed).text(50)
        assert text is not None
        assert len(text) <= 50

    def test_text_below_minimum_raises(self, gen: Generator) -> None:
        with pytest.raises(ValueError):
            gen.text(4)

    def test_word_is_text(self, gen: Generator) -> None:
        assert isinstance(gen.word(), str)
