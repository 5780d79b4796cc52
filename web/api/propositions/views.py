"""Proposition API views - thin layer over services."""

from datetime import date

from app.container import container
from settings import SIMILAR_LIMIT
from web.api.errors import api_view
from web.api.schemas import ApiResponse

from .schemas import SimilarItem


@api_view
async def get_similar(proposition_id: str, limit: int = SIMILAR_LIMIT, current_year: int | None = None) -> ApiResponse:
    """Historical propositions most similar to "<year>-<number>"."""
    data = await container.similarity.find_similar_by_id(
        proposition_id,
        current_year=current_year or date.today().year,
        limit=limit,
    )
    items = [SimilarItem.model_validate(c.to_dict()) for c in data]
    return ApiResponse.ok(items, proposition_id=proposition_id, count=len(items))
