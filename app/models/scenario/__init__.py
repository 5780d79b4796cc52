"""Scenario domain models."""

from app.models.scenario.entities import (
    ConfidenceInterval,
    DemographicCategory,
    DemographicTurnoutAdjustment,
    ElectionType,
    EmphasisShift,
    EndorsementChange,
    EndorsementType,
    FactorContribution,
    FramingScenario,
    FundingScenario,
    OppositionScenario,
    OrganizationLevel,
    RegionalTurnoutAdjustment,
    Scenario,
    ScenarioComparison,
    ScenarioParameters,
    ScenarioPreset,
    ScenarioResults,
    SensitivityPoint,
    Stance,
    SummaryComplexity,
    TimingScenario,
    TurnoutScenario,
)

__all__ = [
    "ConfidenceInterval",
    "DemographicCategory",
    "DemographicTurnoutAdjustment",
    "ElectionType",
    "EmphasisShift",
    "EndorsementChange",
    "EndorsementType",
    "FactorContribution",
    "FramingScenario",
    "FundingScenario",
    "OppositionScenario",
    "OrganizationLevel",
    "RegionalTurnoutAdjustment",
    "Scenario",
    "ScenarioComparison",
    "ScenarioParameters",
    "ScenarioPreset",
    "ScenarioResults",
    "SensitivityPoint",
    "Stance",
    "SummaryComplexity",
    "TimingScenario",
    "TurnoutScenario",
]
