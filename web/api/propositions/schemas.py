"""Proposition API response schemas."""

from pydantic import BaseModel


class SimilarItem(BaseModel):
    """Historical proposition similar to the requested one."""

    proposition_id: str
    proposition_number: str
    year: int
    similarity: float
    result: str
    yes_percentage: float
