"""Similarity service - resolve a target by id and rank its historical matches."""

from loguru import logger

from app.errors import NotFoundError
from app.models.prediction import HistoricalComparison
from app.services.similarity.matcher import find_similar, parse_proposition_id
from app.services.similarity.pool import HistoricalSource, load_historical_pool
from settings import SIMILAR_LIMIT, SIMILAR_MIN_SCORE


class SimilarityService:
    """Historical comparisons for propositions served by a source."""

    def __init__(self, source: HistoricalSource):
        self._source = source
        logger.debug("SimilarityService initialized")

    async def find_similar_by_id(
        self,
        proposition_id: str,
        current_year: int,
        limit: int = SIMILAR_LIMIT,
        min_similarity: float = SIMILAR_MIN_SCORE,
    ) -> list[HistoricalComparison]:
        """Similar past propositions for "<year>-<number>"."""
        year, number = parse_proposition_id(proposition_id)

        candidates = await self._source.propositions_by_year(year)
        target = next((p for p in candidates if p.number == number), None)
        if target is None:
            raise NotFoundError(f"Proposition {proposition_id} not found")

        pool = await load_historical_pool(self._source, year, current_year)
        result = find_similar(target, pool, limit, min_similarity)
        logger.info("Found {} similar propositions for {}", len(result), proposition_id)
        return result
