"""Similarity services."""

from app.services.similarity.matcher import calculate_similarity, find_similar, parse_proposition_id
from app.services.similarity.pool import HistoricalSource, load_historical_pool, years_to_search
from app.services.similarity.service import SimilarityService

__all__ = [
    "calculate_similarity",
    "find_similar",
    "parse_proposition_id",
    "HistoricalSource",
    "load_historical_pool",
    "years_to_search",
    "SimilarityService",
]
