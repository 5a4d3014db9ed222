"""Collection operations over releases, resources and allocations.

Every function takes the current collections and returns new tuples; inputs are
never mutated. Entity ids come from the injected id factory.
"""
from decimal import Decimal
from typing import Iterable

from release_planner.engine.calendar import months_in_range
from release_planner.engine.ids import IdFactory
from release_planner.models import Allocation, Location, Release, Resource


def create_release(
    releases: Iterable[Release],
    name: str,
    start_month: str,
    end_month: str,
    new_id: IdFactory,
) -> tuple[tuple[Release, ...], Release]:
    release = Release(id=new_id(), name=name, start_month=start_month, end_month=end_month)
    return (*releases, release), release


def update_release(
    releases: Iterable[Release],
    release_id: str,
    **changes,
) -> tuple[Release, ...]:
    """Rename or re-range a release. Allocations are left alone; the aggregator
    ignores months that fall outside the new range."""
    changes = {k: v for k, v in changes.items() if v is not None}
    return tuple(
        r.model_copy(update=changes) if r.id == release_id else r
        for r in releases
    )


def delete_release(
    releases: Iterable[Release],
    allocations: Iterable[Allocation],
    release_id: str,
) -> tuple[tuple[Release, ...], tuple[Allocation, ...]]:
    """Remove a release and every allocation referencing it. Unknown ids are a no-op."""
    return (
        tuple(r for r in releases if r.id != release_id),
        tuple(a for a in allocations if a.release_id != release_id),
    )


def create_resource(
    resources: Iterable[Resource],
    name: str,
    role: str,
    location: Location,
    rate_cad: Decimal,
    new_id: IdFactory,
) -> tuple[tuple[Resource, ...], Resource]:
    resource = Resource(id=new_id(), name=name, role=role, location=location, rate_cad=rate_cad)
    return (*resources, resource), resource


def delete_resource(
    resources: Iterable[Resource],
    allocations: Iterable[Allocation],
    resource_id: str,
) -> tuple[tuple[Resource, ...], tuple[Allocation, ...]]:
    """Remove a resource and cascade to its allocations across all releases."""
    return (
        tuple(r for r in resources if r.id != resource_id),
        tuple(a for a in allocations if a.resource_id != resource_id),
    )


def assigned_resource_ids(release_id: str, allocations: Iterable[Allocation]) -> list[str]:
    """Resources with at least one allocation under the release, in first-seen order."""
    seen: dict[str, None] = {}
    for a in allocations:
        if a.release_id == release_id:
            seen.setdefault(a.resource_id, None)
    return list(seen)


def assign_resource(
    release: Release,
    resource_id: str,
    allocations: Iterable[Allocation],
    new_id: IdFactory,
    percentage: Decimal = Decimal(1),
) -> tuple[Allocation, ...]:
    """Add one allocation per month of the release span.

    Months that already hold an allocation for this (release, resource) pair are kept as is.
    """
    allocations = tuple(allocations)
    existing = {
        a.month_str
        for a in allocations
        if a.release_id == release.id and a.resource_id == resource_id
    }
    added = [
        Allocation(
            id=new_id(),
            release_id=release.id,
            resource_id=resource_id,
            month_str=month,
            percentage=percentage,
        )
        for month in months_in_range(release.start_month, release.end_month)
        if month not in existing
    ]
    return (*allocations, *added)


def remove_resource_from_release(
    allocations: Iterable[Allocation],
    release_id: str,
    resource_id: str,
) -> tuple[Allocation, ...]:
    return tuple(
        a for a in allocations
        if not (a.release_id == release_id and a.resource_id == resource_id)
    )


def upsert_allocation(
    allocations: Iterable[Allocation],
    release_id: str,
    resource_id: str,
    month_str: str,
    percentage: Decimal,
    new_id: IdFactory,
) -> tuple[tuple[Allocation, ...], Allocation]:
    """Set the fraction for one (release, resource, month) cell.

    An existing cell keeps its id and position; a new cell is appended.
    """
    allocations = list(allocations)
    percentage = Decimal(str(percentage))
    for i, a in enumerate(allocations):
        if a.release_id == release_id and a.resource_id == resource_id and a.month_str == month_str:
            updated = a.model_copy(update={"percentage": percentage})
            allocations[i] = updated
            return tuple(allocations), updated
    created = Allocation(
        id=new_id(),
        release_id=release_id,
        resource_id=resource_id,
        month_str=month_str,
        percentage=percentage,
    )
    allocations.append(created)
    return tuple(allocations), created
