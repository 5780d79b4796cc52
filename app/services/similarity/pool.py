"""Historical pool loading - bounded, failure-tolerant fetch of past years."""

import asyncio
from typing import Protocol

from loguru import logger

from app.models.proposition import Proposition
from ballot_client import safe_request
from settings import HISTORY_LOOKBACK_YEARS, HISTORY_MAX_YEARS


class HistoricalSource(Protocol):
    """Anything that can list the propositions of an election year."""

    async def propositions_by_year(self, year: int) -> list[Proposition]: ...


def years_to_search(target_year: int, current_year: int, lookback: int = HISTORY_LOOKBACK_YEARS) -> list[int]:
    """Even (statewide election) years plus the last two, newest first, target excluded."""
    return [
        y
        for y in range(current_year, current_year - lookback - 1, -1)
        if y != target_year and (y % 2 == 0 or y >= current_year - 1)
    ]


async def load_historical_pool(
    source: HistoricalSource,
    target_year: int,
    current_year: int,
    lookback: int = HISTORY_LOOKBACK_YEARS,
    max_years: int = HISTORY_MAX_YEARS,
) -> list[Proposition]:
    """Fetch at most `max_years` past years concurrently; a failed year contributes nothing."""
    years = years_to_search(target_year, current_year, lookback)[:max_years]

    batches = await asyncio.gather(
        *(safe_request(source.propositions_by_year(y), []) for y in years)
    )

    pool = [p for batch in batches for p in batch]
    logger.info("Historical pool: {} propositions from years {}", len(pool), years)
    return pool
