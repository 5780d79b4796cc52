"""Proposition domain models."""

from app.models.proposition.entities import (
    BallotAnalysis,
    Committee,
    Complexity,
    DemographicBreakdown,
    DemographicImpact,
    Donor,
    DonorType,
    Position,
    Proposition,
    PropositionCategory,
    PropositionFinance,
    PropositionResult,
    PropositionStatus,
    RegionalDemographics,
    VotingPattern,
)

__all__ = [
    "BallotAnalysis",
    "Committee",
    "Complexity",
    "DemographicBreakdown",
    "DemographicImpact",
    "Donor",
    "DonorType",
    "Position",
    "Proposition",
    "PropositionCategory",
    "PropositionFinance",
    "PropositionResult",
    "PropositionStatus",
    "RegionalDemographics",
    "VotingPattern",
]
