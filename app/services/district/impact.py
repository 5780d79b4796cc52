"""District impact service - statewide, summary and regional aggregation."""

import re
from concurrent.futures import ThreadPoolExecutor

import polars as pl
from loguru import logger

from app.errors import InvalidInputError
from app.models.district import (
    CALIFORNIA_REGIONS,
    CaliforniaRegion,
    District,
    DistrictImpactDetail,
    ImpactSummary,
    NetDirection,
    PropositionImpact,
    RegionAggregate,
    ShiftDirection,
    Significance,
    StatewideImpact,
)
from app.services.district import partisan
from helpers import formulas
from settings import DISTRICT_WORKERS

NO_IMPACT_SUMMARY = "Minimal impact on district-level representation expected."

_COUNTY_PATTERNS: dict[CaliforniaRegion, list[re.Pattern]] = {
    region: [re.compile(rf"\b{re.escape(county)}\b", re.IGNORECASE) for county in counties]
    for region, counties in CALIFORNIA_REGIONS.items()
}


def regions_for(name: str, counties: list[str]) -> list[CaliforniaRegion]:
    """Regions a district belongs to: listed counties first, whole-word name match otherwise."""
    if counties:
        listed = {c.strip().casefold() for c in counties}
        return [
            region
            for region, members in CALIFORNIA_REGIONS.items()
            if any(m.casefold() in listed for m in members)
        ]

    return [
        region
        for region, patterns in _COUNTY_PATTERNS.items()
        if any(p.search(name) for p in patterns)
    ]


class DistrictImpactService:
    """Projects how passage of a proposition shifts district partisan balance."""

    def __init__(self, max_workers: int = DISTRICT_WORKERS):
        self._max_workers = max(1, max_workers)
        logger.debug("DistrictImpactService initialized (workers={})", self._max_workers)

    def analyze_proposition_impact(self, proposition_id: str, districts: list[District]) -> PropositionImpact:
        if not districts:
            raise InvalidInputError("At least one district is required")

        skipped = [d.id for d in districts if d.demographics.voter_registration.total <= 0]
        if skipped:
            logger.warning("Skipping districts without registered voters: {}", skipped)
            districts = [d for d in districts if d.demographics.voter_registration.total > 0]
        if not districts:
            raise InvalidInputError("No district has registered voters")

        # Executor.map keeps input order, so aggregation sees the same sequence either way
        if self._max_workers > 1:
            with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
                details = list(pool.map(self.calculate_district_impact, districts))
        else:
            details = [self.calculate_district_impact(d) for d in districts]

        statewide = self.calculate_statewide_impact(details)
        summary = self.generate_impact_summary(details)

        logger.info(
            "Impact for {}: {} districts, {} affected, net {}",
            proposition_id,
            len(details),
            statewide.total_affected_districts,
            statewide.net_direction,
        )
        return PropositionImpact(
            proposition_id=proposition_id,
            statewide=statewide,
            districts=details,
            summary=summary,
            skipped_districts=skipped,
        )

    def calculate_district_impact(self, district: District) -> DistrictImpactDetail:
        current = partisan.calculate_partisan_metrics(district)
        projected = partisan.project_post_passage_metrics(current, district)
        change = partisan.calculate_change(current, projected)

        return DistrictImpactDetail(
            district_id=district.id,
            district_name=district.name,
            district_type=district.type,
            current_partisan=current,
            projected_partisan=projected,
            change=change,
            key_factors=partisan.identify_key_factors(district, change),
            counties=list(district.counties),
            population=district.population,
        )

    @staticmethod
    def calculate_statewide_impact(details: list[DistrictImpactDetail]) -> StatewideImpact:
        if not details:
            raise InvalidInputError("Statewide impact needs at least one district")

        affected = sum(1 for d in details if d.change.significance != Significance.MINIMAL)
        dem = sum(1 for d in details if d.change.direction == ShiftDirection.DEMOCRATIC)
        rep = sum(1 for d in details if d.change.direction == ShiftDirection.REPUBLICAN)

        if dem > rep and dem >= rep * 1.5:
            net = NetDirection.DEMOCRATIC
        elif rep > dem and rep >= dem * 1.5:
            net = NetDirection.REPUBLICAN
        else:
            net = NetDirection.MIXED

        return StatewideImpact(
            total_affected_districts=affected,
            average_balance_shift=formulas.mean([d.change.balance_shift for d in details]),
            net_direction=net,
            competitiveness_change=formulas.mean([d.competitiveness_delta for d in details]),
        )

    @staticmethod
    def generate_impact_summary(details: list[DistrictImpactDetail]) -> ImpactSummary:
        impacted = {s.value: 0 for s in (Significance.SIGNIFICANT, Significance.MODERATE, Significance.MINIMAL)}
        shifts = {"democratic": 0, "republican": 0, "unchanged": 0}
        competitiveness = {"more_competitive": 0, "less_competitive": 0, "unchanged": 0}

        for d in details:
            impacted[d.change.significance.value] += 1

            if d.change.direction == ShiftDirection.NEUTRAL:
                shifts["unchanged"] += 1
            else:
                shifts[d.change.direction.value] += 1

            delta = d.competitiveness_delta
            if delta > 0:
                competitiveness["more_competitive"] += 1
            elif delta < 0:
                competitiveness["less_competitive"] += 1
            else:
                competitiveness["unchanged"] += 1

        return ImpactSummary(
            total_districts=len(details),
            impacted_districts=impacted,
            shift_distribution=shifts,
            competitiveness_change=competitiveness,
            representation_impact=representation_summary(impacted, shifts),
        )

    @staticmethod
    def get_region_aggregates(details: list[DistrictImpactDetail]) -> dict[CaliforniaRegion, RegionAggregate]:
        """Per-region totals and averages; unmatched districts are left out."""
        rows = [
            {
                "region": region.value,
                "district_id": d.district_id,
                "population": d.population,
                "balance": d.current_partisan.democratic_advantage,
                "turnout": d.current_partisan.voter_engagement,
                "impact": abs(d.change.balance_shift),
            }
            for d in details
            for region in regions_for(d.district_name, d.counties)
        ]

        unmatched = sum(1 for d in details if not regions_for(d.district_name, d.counties))
        if unmatched:
            logger.debug("{} districts matched no region", unmatched)
        if not rows:
            return {}

        grouped = (
            pl.DataFrame(rows)
            .group_by("region", maintain_order=True)
            .agg(
                pl.col("district_id"),
                pl.col("population").sum().alias("total_population"),
                pl.col("balance").mean().alias("avg_partisan_balance"),
                pl.col("turnout").mean().alias("avg_turnout"),
                pl.col("impact").sum().alias("total_impact"),
            )
        )

        by_region = {row["region"]: row for row in grouped.iter_rows(named=True)}
        return {
            region: RegionAggregate(
                region_name=region.value,
                districts=list(row["district_id"]),
                total_population=int(row["total_population"]),
                avg_partisan_balance=float(row["avg_partisan_balance"]),
                avg_turnout=float(row["avg_turnout"]),
                total_impact=float(row["total_impact"]),
            )
            for region in CaliforniaRegion
            if (row := by_region.get(region.value)) is not None
        }


def representation_summary(impacted: dict[str, int], shifts: dict[str, int]) -> str:
    significant = impacted.get(Significance.SIGNIFICANT.value, 0)
    total = significant + impacted.get(Significance.MODERATE.value, 0)
    if total == 0:
        return NO_IMPACT_SUMMARY

    dominant = "Democratic" if shifts["democratic"] > shifts["republican"] else "Republican"
    magnitude = "Substantial" if significant > 5 else "Moderate"
    return f"{magnitude} shifts in {total} districts, favoring {dominant} representation."
