"""District impact projection."""

from app.services.district import partisan
from app.services.district.impact import DistrictImpactService, regions_for

__all__ = ["DistrictImpactService", "partisan", "regions_for"]
