"""Centralized calculation engine - deterministic, Decimal only. Rates are CAD per hour, costs are USD."""
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from release_planner.config import Settings, get_settings
from release_planner.engine.calendar import months_in_range
from release_planner.models import Allocation, Location, PlanWarning, Release, Resource, WarningCode
from release_planner.schemas.calculation import CostBreakdown, PortfolioCost, ReleaseCost


def _to_decimal(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


class CalculationEngine:
    """Cost model and per-release aggregation."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    @staticmethod
    def _round(value: Decimal, places: int = 2) -> Decimal:
        quantize = Decimal(10) ** -places
        return value.quantize(quantize, rounding=ROUND_HALF_UP)

    def daily_hours(self, location: Location) -> int:
        if location == Location.ONSITE:
            return self.settings.hours_onsite
        return self.settings.hours_offshore

    def monthly_hours(self, resource: Resource) -> Decimal:
        """Days per month × daily hours for the resource's location."""
        return Decimal(self.settings.days_per_month * self.daily_hours(resource.location))

    def rate_usd(self, resource: Resource) -> Decimal:
        return resource.rate_cad / _to_decimal(self.settings.usd_to_cad)

    def monthly_cost_usd(self, resource: Resource, allocation_fraction) -> Decimal:
        """Monthly Cost = (rate CAD / USD_TO_CAD) × monthly hours × fraction, in cents.

        Each cell is rounded half-up to cents before any summing, so release totals may
        differ from a sum of unrounded products by up to half a cent per allocation.

        The fraction is not clamped; negative or zero values propagate.
        """
        cost = self.rate_usd(resource) * self.monthly_hours(resource) * _to_decimal(allocation_fraction)
        return self._round(cost)

    def release_cost_breakdown(
        self,
        release: Release,
        resources: Iterable[Resource],
        allocations: Iterable[Allocation],
    ) -> CostBreakdown:
        """Total, per-month and per-resource cost of a release.

        Every month in range and every known resource is present (0 when unallocated).
        Allocations outside the range or pointing at a missing resource are skipped
        and reported in `skipped`.
        """
        months = months_in_range(release.start_month, release.end_month)
        by_id = {r.id: r for r in resources}
        by_month = {m: Decimal(0) for m in months}
        by_resource = {rid: Decimal(0) for rid in by_id}
        total = Decimal(0)
        skipped: list[PlanWarning] = []

        for alloc in allocations:
            if alloc.release_id != release.id:
                continue
            if alloc.month_str not in by_month:
                skipped.append(PlanWarning(
                    code=WarningCode.OUT_OF_RANGE,
                    message=f"Month {alloc.month_str} is outside {release.start_month}..{release.end_month}",
                    entity_id=alloc.id,
                ))
                continue
            resource = by_id.get(alloc.resource_id)
            if resource is None:
                skipped.append(PlanWarning(
                    code=WarningCode.MISSING_RESOURCE,
                    message=f"Resource {alloc.resource_id} not found",
                    entity_id=alloc.id,
                ))
                continue
            cost = self.monthly_cost_usd(resource, alloc.percentage)
            total += cost
            by_month[alloc.month_str] += cost
            by_resource[resource.id] += cost

        return CostBreakdown(
            release_id=release.id,
            total=total,
            by_month=by_month,
            by_resource=by_resource,
            skipped=skipped,
        )

    def release_total_cost_usd(
        self,
        release: Release,
        resources: Iterable[Resource],
        allocations: Iterable[Allocation],
    ) -> Decimal:
        """Same total as release_cost_breakdown, without seeding the month/resource maps."""
        months = set(months_in_range(release.start_month, release.end_month))
        by_id = {r.id: r for r in resources}
        total = Decimal(0)
        for alloc in allocations:
            if alloc.release_id != release.id or alloc.month_str not in months:
                continue
            resource = by_id.get(alloc.resource_id)
            if resource:
                total += self.monthly_cost_usd(resource, alloc.percentage)
        return total

    def portfolio_cost(
        self,
        releases: Iterable[Release],
        resources: Iterable[Resource],
        allocations: Iterable[Allocation],
    ) -> PortfolioCost:
        resources = list(resources)
        allocations = list(allocations)
        items = [
            ReleaseCost(
                release_id=r.id,
                name=r.name,
                total=self.release_total_cost_usd(r, resources, allocations),
            )
            for r in releases
        ]
        return PortfolioCost(total=sum((i.total for i in items), Decimal(0)), releases=items)

    def portfolio_total_cost_usd(
        self,
        releases: Iterable[Release],
        resources: Iterable[Resource],
        allocations: Iterable[Allocation],
    ) -> Decimal:
        """Σ release_total_cost_usd over all releases."""
        return self.portfolio_cost(releases, resources, allocations).total
