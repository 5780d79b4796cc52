"""District API views - thin layer over services."""

from app.container import container
from app.models.district import District
from web.api.errors import api_view, validate_proposition_id
from web.api.schemas import ApiResponse

from .schemas import DistrictImpactItem, ImpactResponse, PartisanItem, RegionItem, StatewideItem


@api_view
def get_proposition_impact(proposition_id: str, districts: list[District]) -> ApiResponse:
    """District-level partisan impact of passage."""
    validate_proposition_id(proposition_id)
    impact = container.district_impact.analyze_proposition_impact(proposition_id, districts)

    items = [
        DistrictImpactItem(
            district_id=d.district_id,
            district_name=d.district_name,
            district_type=d.district_type,
            current_partisan=PartisanItem.model_validate(d.current_partisan.to_dict()),
            projected_partisan=PartisanItem.model_validate(d.projected_partisan.to_dict()),
            balance_shift=d.change.balance_shift,
            direction=d.change.direction,
            significance=d.change.significance,
            driver_factors=d.change.driver_factors,
        )
        for d in impact.districts
    ]

    data = ImpactResponse(
        proposition_id=proposition_id,
        statewide=StatewideItem.model_validate(impact.statewide.to_dict()),
        districts=items,
        impacted_districts=impact.summary.impacted_districts,
        shift_distribution=impact.summary.shift_distribution,
        representation_impact=impact.summary.representation_impact,
        skipped_districts=impact.skipped_districts,
    )
    return ApiResponse.ok(data, total_districts=impact.summary.total_districts)


@api_view
def get_region_aggregates(proposition_id: str, districts: list[District]) -> ApiResponse:
    """Impact rolled up to the nine California regions."""
    validate_proposition_id(proposition_id)
    service = container.district_impact
    details = [service.calculate_district_impact(d) for d in districts]

    items = [RegionItem.model_validate(r.to_dict()) for r in service.get_region_aggregates(details).values()]
    return ApiResponse.ok(items, proposition_id=proposition_id)
