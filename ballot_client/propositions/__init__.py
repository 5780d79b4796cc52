"""Proposition API client and schemas."""

from ballot_client.propositions.client import PropositionClient
from ballot_client.propositions.schemas import (
    CommitteeSchema,
    DonorSchema,
    FinanceSchema,
    PropositionResultSchema,
    PropositionSchema,
)

__all__ = [
    "PropositionClient",
    "PropositionSchema",
    "PropositionResultSchema",
    "FinanceSchema",
    "CommitteeSchema",
    "DonorSchema",
]
