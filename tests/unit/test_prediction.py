"""Tests for the prediction aggregator."""

import pytest

from app.errors import InvalidInputError, NotFoundError
from app.models.prediction import DataQuality, FactorName, ImpactDirection, PredictionFactor
from app.services.prediction import PredictionInputs, calculate_confidence, data_quality_for
from app.services.prediction.service import PredictionService


def _factor(name, value, weight, real=True):
    return PredictionFactor(name, weight, value, ImpactDirection.NEUTRAL, "", "", real)


class TestAggregate:
    def test_all_neutral(self):
        factor_list = [_factor(n, 0.5, 0.2) for n in FactorName]
        assert PredictionService.aggregate(factor_list) == pytest.approx(0.5)

    def test_missing_factors_renormalized(self):
        factor_list = [
            _factor(FactorName.CAMPAIGN_FINANCE, 0.8, 0.25),
            _factor(FactorName.TIMING, 0.6, 0.25),
            _factor(FactorName.OPPOSITION, 0.0, 0.5, real=False),
        ]
        assert PredictionService.aggregate(factor_list) == pytest.approx(0.7)

    def test_no_real_factors(self):
        with pytest.raises(InvalidInputError):
            PredictionService.aggregate([_factor(FactorName.TIMING, 0.5, 0.1, real=False)])

    def test_zero_weights(self):
        with pytest.raises(InvalidInputError):
            PredictionService.aggregate([_factor(FactorName.TIMING, 0.5, 0.0)])

    @pytest.mark.parametrize("values", [[1.0, 1.0], [0.0, 0.0], [0.2, 0.9]])
    def test_bounded(self, values):
        factor_list = [_factor(n, v, 0.3) for n, v in zip(FactorName, values)]
        assert 0.0 <= PredictionService.aggregate(factor_list) <= 1.0


class TestDataQuality:
    def test_labels(self):
        assert data_quality_for(5) == DataQuality.STRONG
        assert data_quality_for(4) == DataQuality.STRONG
        assert data_quality_for(3) == DataQuality.MODERATE
        assert data_quality_for(2) == DataQuality.MODERATE
        assert data_quality_for(1) == DataQuality.LIMITED

    def test_confidence_bounds(self, finance):
        low = calculate_confidence([], None, [])
        high = calculate_confidence([_factor(n, 0.5, 0.1) for n in FactorName], finance, [object()] * 3)
        assert low == 0.5
        assert high == 0.9

    def test_comparison_bonus(self):
        assert calculate_confidence([], None, [object()]) == pytest.approx(0.52)
        assert calculate_confidence([], None, [object()] * 2) == pytest.approx(0.52)
        assert calculate_confidence([], None, [object()] * 3) == pytest.approx(0.55)


class TestGeneratePrediction:
    def test_end_to_end(self, prediction_service, proposition, finance, supportive_demographics):
        prediction = prediction_service.generate_prediction(
            proposition, finance=finance, demographics=supportive_demographics
        )
        names = {f.name for f in prediction.factors}

        assert prediction.passage_probability > 0.5
        assert prediction.data_quality in (DataQuality.MODERATE, DataQuality.LIMITED)
        assert not prediction.factor(FactorName.BALLOT_WORDING).has_real_data
        assert {
            FactorName.CAMPAIGN_FINANCE,
            FactorName.DEMOGRAPHICS,
            FactorName.TIMING,
            FactorName.OPPOSITION,
        } <= names
        assert prediction.weights_version == "2024.1"

    def test_data_sources_follow_real_factors(self, prediction_service, inputs):
        prediction = prediction_service.predict(inputs)
        assert len(prediction.data_sources) == prediction.real_data_count == 3

    def test_deterministic(self, prediction_service, inputs):
        assert prediction_service.predict(inputs) == prediction_service.predict(inputs)

    def test_missing_proposition(self, prediction_service):
        with pytest.raises(NotFoundError):
            prediction_service.generate_prediction(None)

    def test_no_data_at_all(self, prediction_service, make_proposition):
        with pytest.raises(InvalidInputError):
            prediction_service.generate_prediction(make_proposition(election_date=None))

    def test_historical_pool(self, prediction_service, proposition, make_proposition, make_result):
        pool = [
            make_proposition(id="2020-15", number="15", year=2020, title="Housing Bond Act", result=make_result(True, 58)),
            make_proposition(id="2018-3", number="3", year=2018, title="Water Bond", result=make_result(False, 45)),
        ]
        prediction = prediction_service.generate_prediction(proposition, historical_pool=pool)
        assert [c.proposition_id for c in prediction.historical_comparison] == ["2020-15", "2018-3"]
        assert prediction.factor(FactorName.HISTORICAL_SIMILARITY).has_real_data


class TestWeights:
    def test_custom_weights(self, prediction_service, proposition, finance, supportive_demographics):
        prediction = prediction_service.generate_prediction(
            proposition,
            finance=finance,
            demographics=supportive_demographics,
            custom_weights={"campaign_finance": 0.5},
        )
        assert prediction.weights_version == "2024.1+custom"
        assert prediction.factor(FactorName.CAMPAIGN_FINANCE).weight == 0.5

    def test_unknown_weight(self, prediction_service):
        with pytest.raises(InvalidInputError):
            prediction_service.set_weights({"luck": 1.0})

    def test_set_and_reset(self):
        service = PredictionService()
        service.set_weights({"timing": 0.3})
        assert service.weights.timing == 0.3
        service.reset_weights()
        assert service.weights.timing == 0.10

    def test_zero_weights_rejected(self, inputs):
        service = PredictionService()
        service.set_weights({n.value: 0.0 for n in FactorName})
        with pytest.raises(InvalidInputError):
            service.predict(PredictionInputs(proposition=inputs.proposition, finance=inputs.finance))
