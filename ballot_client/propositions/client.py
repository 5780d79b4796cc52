"""Proposition API client."""

from app.models.proposition import Proposition, PropositionFinance
from ballot_client.base import BaseClient
from ballot_client.propositions.schemas import FinanceSchema, PropositionSchema


class PropositionClient(BaseClient):
    """Client for already-normalized proposition endpoints."""

    async def propositions(self, year: int) -> list[dict]:
        """GET /propositions?year={year} - measures on the ballot in a year."""
        return await self._get("propositions", params={"year": year})

    async def finance(self, proposition_id: str) -> dict:
        """GET /propositions/{id}/finance - campaign finance aggregate."""
        return await self._get(f"propositions/{proposition_id}/finance")

    async def propositions_by_year(self, year: int) -> list[Proposition]:
        """Validated propositions for a year."""
        return [PropositionSchema.model_validate(p).to_entity() for p in await self.propositions(year)]

    async def proposition_finance(self, proposition_id: str) -> PropositionFinance:
        """Validated finance aggregate for a proposition."""
        return FinanceSchema.model_validate(await self.finance(proposition_id)).to_entity()
