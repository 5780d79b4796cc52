"""Tests for historical similarity matching."""

import pytest

from app.errors import InvalidInputError
from app.models.prediction import ComparisonResult
from app.models.proposition import PropositionCategory
from app.services.similarity import calculate_similarity, find_similar, parse_proposition_id


class TestParseId:
    def test_valid(self):
        assert parse_proposition_id("2024-1") == (2024, "1")
        assert parse_proposition_id("2022-30A") == (2022, "30A")

    @pytest.mark.parametrize("bad", ["", "2024", "24-1", "2024-", "prop-1", "2024-1-2"])
    def test_invalid(self, bad):
        with pytest.raises(InvalidInputError):
            parse_proposition_id(bad)


class TestCalculateSimilarity:
    def test_different_category_is_zero(self, make_proposition):
        a = make_proposition(title="Water Bond", category=PropositionCategory.ENVIRONMENT)
        b = make_proposition(title="Water Bond", category=PropositionCategory.TAXATION)
        assert calculate_similarity(a, b) == 0.0

    def test_identical_is_one(self, make_proposition):
        a = make_proposition()
        assert calculate_similarity(a, make_proposition(id="2024-2")) == 1.0

    def test_recency_fades(self, make_proposition):
        target = make_proposition(title="Alpha")
        assert calculate_similarity(target, make_proposition(title="Beta", year=2022)) == pytest.approx(0.66)
        assert calculate_similarity(target, make_proposition(title="Beta", year=2014)) == pytest.approx(0.6)


class TestFindSimilar:
    def test_ranking(self, make_proposition, make_result):
        target = make_proposition()
        pool = [
            make_proposition(id="2016-2", year=2016, title="Housing Bond", result=make_result(True, 55)),
            make_proposition(id="2022-5", year=2022, title="Housing Bond", result=make_result(False, 48)),
            make_proposition(id="2020-9", year=2020, title="Housing Bond", result=make_result(True, 60)),
        ]
        result = find_similar(target, pool)
        assert [c.proposition_id for c in result] == ["2022-5", "2020-9", "2016-2"]
        assert result[0].result == ComparisonResult.FAILED
        assert all(a.similarity >= b.similarity for a, b in zip(result, result[1:]))

    def test_ties_prefer_recent(self, make_proposition, make_result):
        target = make_proposition(year=2030)
        pool = [
            make_proposition(id="2010-1", year=2010, result=make_result(True, 55)),
            make_proposition(id="2012-1", year=2012, result=make_result(True, 55)),
        ]
        result = find_similar(target, pool)
        assert result[0].similarity == result[1].similarity
        assert [c.year for c in result] == [2012, 2010]

    def test_skips_unresolved_and_self(self, make_proposition, make_result):
        target = make_proposition()
        pool = [target, make_proposition(id="2022-1", year=2022)]
        assert find_similar(target, pool) == []

    def test_min_similarity(self, make_proposition, make_result):
        target = make_proposition()
        pool = [make_proposition(id="2020-1", category=PropositionCategory.LABOR, result=make_result(True, 51))]
        assert find_similar(target, pool) == []
        assert find_similar(target, pool, min_similarity=0.0)[0].similarity == 0.0

    def test_limit(self, make_proposition, make_result):
        target = make_proposition()
        pool = [make_proposition(id=f"2020-{i}", year=2020, result=make_result(True, 55)) for i in range(8)]
        assert len(find_similar(target, pool, limit=3)) == 3
