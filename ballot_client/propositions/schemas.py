"""Proposition API schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.proposition import (
    Committee,
    Donor,
    DonorType,
    Position,
    Proposition,
    PropositionCategory,
    PropositionFinance,
    PropositionResult,
    PropositionStatus,
)


class PropositionResultSchema(BaseModel):
    """Certified result of a measure."""

    model_config = ConfigDict(populate_by_name=True)

    yes_votes: int = Field(alias="yesVotes")
    no_votes: int = Field(alias="noVotes")
    yes_percentage: float = Field(alias="yesPercentage")
    no_percentage: float = Field(alias="noPercentage")
    total_votes: int = Field(alias="totalVotes")
    turnout: float = 0.0
    passed: bool

    def to_entity(self) -> PropositionResult:
        return PropositionResult(**self.model_dump())


class PropositionSchema(BaseModel):
    """Statewide ballot measure."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    number: str
    year: int
    election_date: date | None = Field(alias="electionDate", default=None)
    title: str
    summary: str = ""
    full_text: str | None = Field(alias="fullText", default=None)
    status: PropositionStatus
    category: PropositionCategory = PropositionCategory.OTHER
    result: PropositionResultSchema | None = None
    sponsors: list[str] = []
    opponents: list[str] | None = None

    def to_entity(self) -> Proposition:
        return Proposition(
            id=self.id,
            number=self.number,
            year=self.year,
            title=self.title,
            summary=self.summary,
            status=self.status,
            category=self.category,
            election_date=self.election_date,
            result=self.result.to_entity() if self.result else None,
            full_text=self.full_text,
            sponsors=list(self.sponsors),
            opponents=list(self.opponents) if self.opponents is not None else None,
        )


class CommitteeSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    position: Position
    total_raised: float = Field(alias="totalRaised", default=0.0)
    total_spent: float = Field(alias="totalSpent", default=0.0)


class DonorSchema(BaseModel):
    name: str
    amount: float
    position: Position
    type: DonorType


class FinanceSchema(BaseModel):
    """Campaign finance aggregate for a measure."""

    model_config = ConfigDict(populate_by_name=True)

    proposition_id: str = Field(alias="propositionId")
    total_support: float = Field(alias="totalSupport", default=0.0)
    total_opposition: float = Field(alias="totalOpposition", default=0.0)
    support_committees: list[CommitteeSchema] = Field(alias="supportCommittees", default=[])
    opposition_committees: list[CommitteeSchema] = Field(alias="oppositionCommittees", default=[])
    top_donors: list[DonorSchema] = Field(alias="topDonors", default=[])
    last_updated: datetime | None = Field(alias="lastUpdated", default=None)

    def to_entity(self) -> PropositionFinance:
        return PropositionFinance(
            proposition_id=self.proposition_id,
            total_support=self.total_support,
            total_opposition=self.total_opposition,
            support_committees=[Committee(**c.model_dump()) for c in self.support_committees],
            opposition_committees=[Committee(**c.model_dump()) for c in self.opposition_committees],
            top_donors=[Donor(**d.model_dump()) for d in self.top_donors],
            last_updated=self.last_updated,
        )
