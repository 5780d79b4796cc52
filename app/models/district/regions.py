"""Fixed California regions and their member counties."""

from enum import StrEnum


class CaliforniaRegion(StrEnum):
    BAY_AREA = "Bay Area"
    LOS_ANGELES = "Los Angeles"
    SAN_DIEGO = "San Diego"
    CENTRAL_VALLEY = "Central Valley"
    CENTRAL_COAST = "Central Coast"
    INLAND_EMPIRE = "Inland Empire"
    SACRAMENTO = "Sacramento"
    NORTH_COAST = "North Coast"
    SIERRA_NEVADA = "Sierra Nevada"


CALIFORNIA_REGIONS: dict[CaliforniaRegion, tuple[str, ...]] = {
    CaliforniaRegion.BAY_AREA: (
        "San Francisco", "San Mateo", "Santa Clara", "Alameda", "Contra Costa",
        "Marin", "Sonoma", "Napa", "Solano",
    ),
    CaliforniaRegion.LOS_ANGELES: ("Los Angeles", "Ventura"),
    CaliforniaRegion.SAN_DIEGO: ("San Diego", "Imperial"),
    CaliforniaRegion.CENTRAL_VALLEY: (
        "Fresno", "Kern", "Tulare", "Stanislaus", "San Joaquin", "Merced", "Madera", "Kings",
    ),
    CaliforniaRegion.CENTRAL_COAST: ("Santa Barbara", "San Luis Obispo", "Monterey", "Santa Cruz"),
    CaliforniaRegion.INLAND_EMPIRE: ("Riverside", "San Bernardino"),
    CaliforniaRegion.SACRAMENTO: ("Sacramento", "Placer", "El Dorado", "Yolo"),
    CaliforniaRegion.NORTH_COAST: ("Humboldt", "Mendocino", "Del Norte", "Lake"),
    CaliforniaRegion.SIERRA_NEVADA: (
        "Nevada", "Tuolumne", "Calaveras", "Amador", "Alpine", "Mono", "Inyo",
    ),
}
