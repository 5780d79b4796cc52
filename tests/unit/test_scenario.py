"""Tests for the scenario simulator and scenario service."""

from dataclasses import replace
from datetime import date

import pytest

from app.errors import InvalidInputError, NotFoundError
from app.models.prediction import FactorName
from app.models.proposition import BallotAnalysis, Complexity
from app.models.scenario import (
    ElectionType,
    EndorsementChange,
    EndorsementType,
    FramingScenario,
    FundingScenario,
    OppositionScenario,
    OrganizationLevel,
    ScenarioParameters,
    Stance,
    SummaryComplexity,
    TimingScenario,
    TurnoutScenario,
)
from app.services.scenario import ScenarioService, ScenarioSimulator, confidence_interval, parameters_from_dict
from app.services.scenario.simulator import SENSITIVITY_GRIDS, endorsement_shift


@pytest.fixture
def simulator(prediction_service):
    return ScenarioSimulator(prediction_service)


@pytest.fixture
def scenario_service(simulator):
    return ScenarioService(simulator)


def _analysis():
    return BallotAnalysis("2024-1", 120, 50, 0.0, Complexity.MODERATE)


class TestIdentity:
    def test_identity_reproduces_baseline(self, simulator, inputs):
        results = simulator.simulate(inputs, ScenarioParameters())
        assert results.new_probability == results.original_probability
        assert results.probability_delta == 0.0
        assert all(c.contribution == 0.0 for c in results.factor_contributions)

    def test_inputs_untouched(self, simulator, inputs):
        before = (replace(inputs.proposition), replace(inputs.finance))
        simulator.simulate(
            inputs,
            ScenarioParameters(
                funding=FundingScenario(support_multiplier=3.0),
                timing=TimingScenario(ElectionType.SPECIAL, month_offset=2),
            ),
        )
        assert (inputs.proposition, inputs.finance) == before

    def test_uses_given_baseline(self, simulator, prediction_service, inputs):
        baseline = prediction_service.predict(inputs)
        results = simulator.simulate(inputs, ScenarioParameters(), baseline)
        assert results.original_probability == baseline.passage_probability

    def test_custom_weight_baseline_identity(self, simulator, prediction_service, inputs):
        baseline = prediction_service.generate_prediction(
            inputs.proposition,
            inputs.finance,
            demographics=inputs.demographics,
            custom_weights={"campaign_finance": 0.9},
        )
        results = simulator.simulate(inputs, ScenarioParameters(), baseline)
        assert results.new_probability == baseline.passage_probability
        assert results.probability_delta == 0.0
        assert all(c.contribution == 0.0 for c in results.factor_contributions)


class TestOverrides:
    def test_more_support_money(self, simulator, inputs):
        results = simulator.simulate(inputs, ScenarioParameters(funding=FundingScenario(support_multiplier=2.0)))
        assert results.probability_delta > 0

    def test_custom_amounts(self, simulator, inputs):
        params = ScenarioParameters(funding=FundingScenario(custom_support_amount=0, custom_opposition_amount=1e6))
        prediction = simulator.run(inputs, params)
        assert prediction.factor(FactorName.CAMPAIGN_FINANCE).value == pytest.approx(0.2)

    def test_intense_opposition(self, simulator, inputs, committee_finance):
        inputs = replace(inputs, finance=committee_finance)
        params = ScenarioParameters(opposition=OppositionScenario(organization_level=OrganizationLevel.INTENSE))
        prediction = simulator.run(inputs, params)
        assert prediction.factor(FactorName.OPPOSITION).value == pytest.approx(0.37)
        assert simulator.simulate(inputs, params).probability_delta < 0

    def test_opposition_without_data_has_no_effect(self, simulator, inputs):
        params = ScenarioParameters(opposition=OppositionScenario(organization_level=OrganizationLevel.INTENSE))
        assert simulator.simulate(inputs, params).probability_delta == 0.0

    def test_endorsement_shift(self):
        change = EndorsementChange("Governor", EndorsementType.POLITICAL, Stance.OPPOSITION, Stance.SUPPORT, 0.8)
        assert endorsement_shift(OppositionScenario(endorsements=[change])) == pytest.approx(0.08)

    def test_turnout_feeds_timing(self, simulator, inputs):
        prediction = simulator.run(inputs, ScenarioParameters(turnout=TurnoutScenario(overall_multiplier=1.3)))
        assert prediction.factor(FactorName.TIMING).value == pytest.approx(0.63)

    def test_timing(self, simulator, inputs):
        params = ScenarioParameters(timing=TimingScenario(ElectionType.SPECIAL, month_offset=1))
        adjusted, adjustments = simulator.apply(inputs, params)
        assert adjusted.proposition.election_date == date(2024, 12, 5)
        assert adjustments.election_type == ElectionType.SPECIAL
        assert simulator.run(inputs, params).factor(FactorName.TIMING).value == 0.5

    def test_custom_title_adds_wording_data(self, simulator, inputs):
        params = ScenarioParameters(framing=FramingScenario(custom_title="Protect Affordable Homes"))
        prediction = simulator.run(inputs, params)
        assert prediction.factor(FactorName.BALLOT_WORDING).has_real_data

    def test_reframing(self, simulator, inputs):
        inputs = replace(inputs, ballot_analysis=_analysis())
        params = ScenarioParameters(
            framing=FramingScenario(title_sentiment=0.2, summary_complexity=SummaryComplexity.SIMPLER)
        )
        adjusted, _ = simulator.apply(inputs, params)
        assert adjusted.ballot_analysis.sentiment_score == pytest.approx(0.2)
        assert adjusted.ballot_analysis.complexity == Complexity.SIMPLE
        assert adjusted.ballot_analysis.readability_score == 60
        assert simulator.simulate(inputs, params).probability_delta > 0

    def test_sentiment_clamped(self, simulator, inputs):
        inputs = replace(inputs, ballot_analysis=replace(_analysis(), sentiment_score=0.9))
        adjusted, _ = simulator.apply(inputs, ScenarioParameters(framing=FramingScenario(title_sentiment=0.5)))
        assert adjusted.ballot_analysis.sentiment_score == 1.0

    @pytest.mark.parametrize(
        "params",
        [
            ScenarioParameters(funding=FundingScenario(support_multiplier=0)),
            ScenarioParameters(turnout=TurnoutScenario(overall_multiplier=-1)),
            ScenarioParameters(opposition=OppositionScenario(media_spend_ratio=0)),
            ScenarioParameters(funding=FundingScenario(custom_support_amount=-5)),
        ],
    )
    def test_invalid_parameters(self, simulator, inputs, params):
        with pytest.raises(InvalidInputError):
            simulator.simulate(inputs, params)


class TestResults:
    def test_confidence_interval(self):
        ci = confidence_interval(0.6, 0.8)
        assert ci.lower == pytest.approx(0.5)
        assert ci.upper == pytest.approx(0.7)

    def test_confidence_interval_clamped(self):
        ci = confidence_interval(0.95, 0.3)
        assert ci.upper == 1.0

    def test_contributions(self, simulator, inputs):
        results = simulator.simulate(inputs, ScenarioParameters(funding=FundingScenario(support_multiplier=2.0)))
        by_factor = {c.factor: c for c in results.factor_contributions}
        assert len(by_factor) == 6
        assert by_factor["campaign_finance"].contribution > 0
        assert by_factor["timing"].contribution == 0.0

    def test_sensitivity(self, simulator, inputs):
        results = simulator.simulate(inputs, ScenarioParameters())
        assert len(results.sensitivity_analysis) == sum(len(g) for g in SENSITIVITY_GRIDS.values())

        support = [p.probability for p in results.sensitivity_analysis if p.parameter == "support_multiplier"]
        assert support == sorted(support)


class TestParameters:
    def test_from_dict(self):
        params = parameters_from_dict({
            "framing": {"summary_complexity": "simpler"},
            "timing": {"election_type": "general", "competing_measures": 3},
        })
        assert params.framing.summary_complexity == SummaryComplexity.SIMPLER
        assert params.timing.election_type == ElectionType.GENERAL
        assert params.funding == FundingScenario()

    def test_from_dict_invalid(self):
        with pytest.raises(InvalidInputError):
            parameters_from_dict({"timing": {"election_type": "runoff"}})

    def test_merge_layers(self):
        merged = ScenarioService.merge_parameters(
            {"funding": {"support_multiplier": 2.0}},
            {"funding": {"opposition_multiplier": 1.5}, "timing": {"election_type": "special"}},
            {"timing": {"election_type": "general", "month_offset": 1}},
        )
        assert merged.funding.support_multiplier == 2.0
        assert merged.funding.opposition_multiplier == 1.5
        assert merged.timing == TimingScenario(ElectionType.GENERAL, month_offset=1)

    def test_numeric_strings_coerced(self):
        merged = ScenarioService.merge_parameters({"funding": {"support_multiplier": "2"}})
        assert merged.funding.support_multiplier == 2.0
        assert isinstance(merged.funding.support_multiplier, float)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"funding": {"support_multiplier": "lots"}},
            {"funding": {"support_multiplier": 0}},
            {"funding": {"custom_opposition_amount": -1}},
            {"turnout": {"overall_multiplier": -0.5}},
            {"turnout": {"regional_adjustments": [{"region": "Bay Area", "multiplier": 0}]}},
            {"opposition": {"media_spend_ratio": "high"}},
            {"funding": {"support": 2.0}},
        ],
    )
    def test_merge_rejects_bad_values(self, overrides):
        with pytest.raises(InvalidInputError):
            ScenarioService.merge_parameters(overrides)

    def test_merge_dataclass(self):
        base = ScenarioParameters(funding=FundingScenario(support_multiplier=2.0))
        merged = ScenarioService.merge_parameters(base, {"turnout": {"overall_multiplier": 1.2}})
        assert merged.funding.support_multiplier == 2.0
        assert merged.turnout.overall_multiplier == 1.2


class TestScenarioService:
    def test_create(self, scenario_service):
        scenario = scenario_service.create("2024-1")
        assert scenario.name == "Scenario 1"
        assert scenario.parameters == ScenarioParameters()
        assert scenario_service.get_by_id(scenario.id) is scenario

    def test_presets(self, scenario_service):
        ids = [p.id for p in scenario_service.get_presets()]
        assert ids == ["high-turnout", "low-turnout", "well-funded-support", "contested", "simplified-framing"]

    def test_create_from_preset(self, scenario_service):
        scenario = scenario_service.create_from_preset(
            "2024-1", "contested", {"funding": {"support_multiplier": 3.0}}
        )
        assert scenario.name == "Highly Contested"
        assert scenario.parameters.funding.support_multiplier == 3.0
        assert scenario.parameters.funding.opposition_multiplier == 2.5
        assert scenario.parameters.opposition.organization_level == OrganizationLevel.INTENSE

    def test_unknown_preset(self, scenario_service):
        assert scenario_service.create_from_preset("2024-1", "landslide") is None

    def test_run_stores_results(self, scenario_service, inputs):
        scenario = scenario_service.create_from_preset("2024-1", "high-turnout")
        results = scenario_service.run(scenario.id, inputs)
        assert scenario_service.get_by_id(scenario.id).results == results

    def test_run_errors(self, scenario_service, inputs):
        with pytest.raises(NotFoundError):
            scenario_service.run("missing", inputs)

        scenario = scenario_service.create("2022-5")
        with pytest.raises(InvalidInputError):
            scenario_service.run(scenario.id, inputs)

    def test_duplicate_and_update(self, scenario_service, inputs):
        scenario = scenario_service.create("2024-1", name="Base")
        scenario_service.run(scenario.id, inputs)

        copy = scenario_service.duplicate(scenario.id)
        assert copy.id != scenario.id
        assert copy.name == "Base (Copy)"
        assert copy.results is None

        updated = scenario_service.update_parameters(scenario.id, {"turnout": {"overall_multiplier": 1.1}})
        assert updated.parameters.turnout.overall_multiplier == 1.1
        assert updated.results is None
        assert scenario_service.duplicate("missing") is None
        assert scenario_service.update_parameters("missing", {}) is None

    def test_by_proposition_and_delete(self, scenario_service):
        a = scenario_service.create("2024-1")
        scenario_service.create("2024-2")
        assert [s.id for s in scenario_service.get_by_proposition("2024-1")] == [a.id]
        assert scenario_service.delete(a.id)
        assert not scenario_service.delete(a.id)
        assert scenario_service.get_by_proposition("2024-1") == []

    def test_compare(self, scenario_service, inputs):
        low = scenario_service.create_from_preset("2024-1", "low-turnout")
        high = scenario_service.create_from_preset("2024-1", "well-funded-support")
        pending = scenario_service.create("2024-1")
        for s in (low, high):
            scenario_service.run(s.id, inputs)

        comparison = scenario_service.compare_scenarios(scenario_service.get_by_proposition("2024-1"))
        assert pending.id not in [s.id for s in comparison.scenarios]
        assert comparison.best_case.id == high.id
        assert comparison.worst_case.id == low.id
        assert comparison.probability_range[0] <= comparison.average_probability <= comparison.probability_range[1]

    def test_compare_empty(self):
        comparison = ScenarioService.compare_scenarios([])
        assert comparison.best_case is None
        assert comparison.probability_range == (0.0, 0.0)
