"""Tests for formulas module."""

from datetime import date

import pytest

from app.errors import InvalidInputError
from helpers import formulas


class TestClamp:
    def test_inside(self):
        assert formulas.clamp(0.4, 0.0, 1.0) == 0.4

    def test_bounds(self):
        assert formulas.clamp(-1, 0.0, 1.0) == 0.0
        assert formulas.clamp(2, 0.0, 1.0) == 1.0


class TestWeightedAverage:
    def test_equal_weights(self):
        assert formulas.weighted_average([1, 0], [1, 1]) == 0.5

    def test_uneven_weights(self):
        assert formulas.weighted_average([1, 0], [3, 1]) == 0.75

    def test_length_mismatch(self):
        with pytest.raises(InvalidInputError):
            formulas.weighted_average([1, 0], [1])

    def test_empty(self):
        with pytest.raises(InvalidInputError):
            formulas.weighted_average([], [])

    def test_zero_weight(self):
        with pytest.raises(InvalidInputError):
            formulas.weighted_average([1, 0], [0, 0])


class TestMean:
    def test_empty(self):
        assert formulas.mean([]) == 0.0

    def test_values(self):
        assert formulas.mean([1, 2, 3]) == 2.0


class TestKeywords:
    def test_stop_words_and_short_tokens(self):
        assert formulas.extract_keywords("The Right to an Affordable Home!") == ["right", "affordable", "home"]

    def test_overlap_full(self):
        assert formulas.keyword_overlap(["water", "bond"], ["bond", "water"]) == 1.0

    def test_overlap_uses_longer_list(self):
        assert formulas.keyword_overlap(["water"], ["water", "bond", "act", "fund"]) == 0.25

    def test_overlap_empty(self):
        assert formulas.keyword_overlap([], []) == 0.0


class TestReadability:
    def test_syllables(self):
        assert formulas.count_syllables("cat") == 1
        assert formulas.count_syllables("make") == 1
        assert formulas.count_syllables("water") == 2

    def test_simple_text_is_easy(self):
        assert formulas.flesch_reading_ease("The cat sat. The dog ran.") > 90

    def test_bounded(self):
        text = "Notwithstanding constitutional appropriations, intergovernmental reimbursements accumulate."
        assert 0.0 <= formulas.flesch_reading_ease(text) <= 100.0


class TestDates:
    def test_add_months(self):
        assert formulas.add_months(date(2024, 11, 5), 2) == date(2025, 1, 5)

    def test_add_months_backwards(self):
        assert formulas.add_months(date(2024, 3, 5), -3) == date(2023, 12, 5)

    def test_add_months_pins_day(self):
        assert formulas.add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)

    def test_presidential_year(self):
        assert formulas.is_presidential_year(2024)
        assert not formulas.is_presidential_year(2022)
