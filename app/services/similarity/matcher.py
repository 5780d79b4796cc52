"""Historical similarity - rank past propositions by resemblance to a target."""

import re

from loguru import logger

from app.errors import InvalidInputError
from app.models.prediction import ComparisonResult, HistoricalComparison
from app.models.proposition import Proposition
from helpers import formulas
from settings import SIMILAR_LIMIT, SIMILAR_MIN_SCORE

CATEGORY_BASE = 0.6
KEYWORD_WEIGHT = 0.3
RECENCY_MAX = 0.1
RECENCY_DECAY = 0.02

_ID_PATTERN = re.compile(r"^(\d{4})-([A-Za-z0-9]+)$")


def parse_proposition_id(proposition_id: str) -> tuple[int, str]:
    """Split a "<year>-<number>" id. Raises InvalidInputError when malformed."""
    match = _ID_PATTERN.match(proposition_id or "")
    if not match:
        raise InvalidInputError(f"Invalid proposition ID: {proposition_id!r}")
    return int(match.group(1)), match.group(2)


def calculate_similarity(target: Proposition, candidate: Proposition) -> float:
    """Category gate, then keyword overlap and recency. Always in [0, 1]."""
    if target.category != candidate.category:
        return 0.0

    score = CATEGORY_BASE
    score += formulas.keyword_overlap(
        formulas.extract_keywords(target.title),
        formulas.extract_keywords(candidate.title),
    ) * KEYWORD_WEIGHT
    score += max(0.0, RECENCY_MAX - RECENCY_DECAY * abs(target.year - candidate.year))

    # Rounded so that exact matches land on 1.0 despite float accumulation
    return formulas.clamp(round(score, 10), 0.0, 1.0)


def find_similar(
    target: Proposition,
    pool: list[Proposition],
    limit: int = SIMILAR_LIMIT,
    min_similarity: float = SIMILAR_MIN_SCORE,
) -> list[HistoricalComparison]:
    """Past propositions with a recorded result, best match first.

    Ties on similarity go to the more recent year, then to proposition id.
    """
    comparisons = []
    for candidate in pool:
        if candidate.result is None or candidate.id == target.id:
            continue

        similarity = calculate_similarity(target, candidate)
        if similarity < min_similarity:
            continue

        comparisons.append(
            HistoricalComparison(
                proposition_id=candidate.id,
                proposition_number=candidate.number,
                year=candidate.year,
                similarity=similarity,
                result=ComparisonResult.PASSED if candidate.result.passed else ComparisonResult.FAILED,
                yes_percentage=candidate.result.yes_percentage,
            )
        )

    comparisons.sort(key=lambda c: (-c.similarity, -c.year, c.proposition_id))
    logger.debug("{} of {} candidates similar to {}", len(comparisons), len(pool), target.id)
    return comparisons[:limit]
