"""Proposition API."""

from web.api.propositions.views import get_similar

__all__ = ["get_similar"]
