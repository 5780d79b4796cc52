"""Scenario parameter schemas - validation of incoming override bundles."""

from pydantic import BaseModel, ConfigDict, Field

from app.models.scenario import (
    DemographicCategory,
    DemographicTurnoutAdjustment,
    ElectionType,
    EmphasisShift,
    EndorsementChange,
    EndorsementType,
    FramingScenario,
    FundingScenario,
    OppositionScenario,
    OrganizationLevel,
    RegionalTurnoutAdjustment,
    ScenarioParameters,
    Stance,
    SummaryComplexity,
    TimingScenario,
    TurnoutScenario,
)


class _Section(BaseModel):
    model_config = ConfigDict(extra="forbid")


class FundingSchema(_Section):
    support_multiplier: float = Field(default=1.0, gt=0)
    opposition_multiplier: float = Field(default=1.0, gt=0)
    custom_support_amount: float | None = Field(default=None, ge=0)
    custom_opposition_amount: float | None = Field(default=None, ge=0)

    def to_entity(self) -> FundingScenario:
        return FundingScenario(**self.model_dump())


class DemographicAdjustmentSchema(_Section):
    demographic: str
    category: DemographicCategory
    multiplier: float = Field(gt=0)

    def to_entity(self) -> DemographicTurnoutAdjustment:
        return DemographicTurnoutAdjustment(**self.model_dump())


class RegionalAdjustmentSchema(_Section):
    region: str
    multiplier: float = Field(gt=0)

    def to_entity(self) -> RegionalTurnoutAdjustment:
        return RegionalTurnoutAdjustment(**self.model_dump())


class TurnoutSchema(_Section):
    overall_multiplier: float = Field(default=1.0, gt=0)
    demographic_adjustments: list[DemographicAdjustmentSchema] = []
    regional_adjustments: list[RegionalAdjustmentSchema] = []

    def to_entity(self) -> TurnoutScenario:
        return TurnoutScenario(
            overall_multiplier=self.overall_multiplier,
            demographic_adjustments=[a.to_entity() for a in self.demographic_adjustments],
            regional_adjustments=[a.to_entity() for a in self.regional_adjustments],
        )


class FramingSchema(_Section):
    title_sentiment: float = 0.0
    summary_complexity: SummaryComplexity = SummaryComplexity.UNCHANGED
    emphasis_shift: EmphasisShift = EmphasisShift.NONE
    custom_title: str | None = None
    custom_summary: str | None = None

    def to_entity(self) -> FramingScenario:
        return FramingScenario(**self.model_dump())


class TimingSchema(_Section):
    election_type: ElectionType
    month_offset: int = 0
    competing_measures: int = Field(default=0, ge=0)

    def to_entity(self) -> TimingScenario:
        return TimingScenario(**self.model_dump())


class EndorsementSchema(_Section):
    entity: str
    type: EndorsementType
    original_position: Stance
    new_position: Stance
    influence: float

    def to_entity(self) -> EndorsementChange:
        return EndorsementChange(**self.model_dump())


class OppositionSchema(_Section):
    organization_level: OrganizationLevel = OrganizationLevel.MODERATE
    media_spend_ratio: float = Field(default=1.0, gt=0)
    endorsements: list[EndorsementSchema] = []

    def to_entity(self) -> OppositionScenario:
        return OppositionScenario(
            organization_level=self.organization_level,
            media_spend_ratio=self.media_spend_ratio,
            endorsements=[e.to_entity() for e in self.endorsements],
        )


class ScenarioParametersSchema(_Section):
    """Full override bundle; omitted sections fall back to identity."""

    funding: FundingSchema = FundingSchema()
    turnout: TurnoutSchema = TurnoutSchema()
    framing: FramingSchema = FramingSchema()
    timing: TimingSchema | None = None
    opposition: OppositionSchema | None = None

    def to_entity(self) -> ScenarioParameters:
        return ScenarioParameters(
            funding=self.funding.to_entity(),
            turnout=self.turnout.to_entity(),
            framing=self.framing.to_entity(),
            timing=self.timing.to_entity() if self.timing else None,
            opposition=self.opposition.to_entity() if self.opposition else None,
        )
