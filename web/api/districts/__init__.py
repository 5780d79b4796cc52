"""District API."""

from web.api.districts.views import get_proposition_impact, get_region_aggregates

__all__ = ["get_proposition_impact", "get_region_aggregates"]
