"""
CSV export/import of the whole plan.

One header row, then one row per (release, assigned resource, month):
Release Name,Start Month,End Month,Resource Name,Role,Location,Rate (CAD),Month,Allocation %,Monthly Cost (USD)
"""

import csv
import io
import logging
from decimal import Decimal, InvalidOperation
from typing import Iterable

from release_planner.engine.calculator import CalculationEngine
from release_planner.engine.calendar import months_in_range
from release_planner.engine.ids import IdFactory
from release_planner.models import Allocation, Location, PlanWarning, Release, Resource, WarningCode
from release_planner.schemas.transfer import TableImport
from release_planner.services.planning import assigned_resource_ids

logger = logging.getLogger(__name__)

HEADERS = [
    "Release Name",
    "Start Month",
    "End Month",
    "Resource Name",
    "Role",
    "Location",
    "Rate (CAD)",
    "Month",
    "Allocation %",
    "Monthly Cost (USD)",
]

# Cost column is derived, so import only needs the first nine
_MIN_FIELDS = 9


def to_table(
    releases: Iterable[Release],
    resources: Iterable[Resource],
    allocations: Iterable[Allocation],
    engine: CalculationEngine | None = None,
) -> str:
    """Serialize the plan. Months without an allocation emit percentage 0 and cost 0.00."""
    engine = engine or CalculationEngine()
    allocations = list(allocations)
    by_id = {r.id: r for r in resources}
    cells: dict[tuple[str, str, str], Decimal] = {}
    for a in allocations:
        cells.setdefault((a.release_id, a.resource_id, a.month_str), a.percentage)

    buf = io.StringIO()
    # Non-numeric fields (names, role, months, location) are always quoted
    writer = csv.writer(buf, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    writer.writerow(HEADERS)
    for rel in releases:
        months = months_in_range(rel.start_month, rel.end_month)
        for res_id in assigned_resource_ids(rel.id, allocations):
            res = by_id.get(res_id)
            if res is None:
                continue
            for month in months:
                pct = cells.get((rel.id, res.id, month), Decimal(0))
                writer.writerow([
                    rel.name,
                    rel.start_month,
                    rel.end_month,
                    res.name,
                    res.role,
                    res.location.value,
                    res.rate_cad,
                    month,
                    pct,
                    engine.monthly_cost_usd(res, pct),
                ])
    return buf.getvalue().rstrip("\n")


def _parse_decimal(s: str) -> Decimal | None:
    try:
        value = Decimal(s.strip())
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def from_table(text: str, new_id: IdFactory) -> TableImport:
    """Rebuild releases, resources and allocations from exported CSV text.

    Releases and resources are deduplicated by name within the import; every
    data row yields a new allocation. Problem rows are reported as warnings.
    """
    releases: dict[str, Release] = {}
    resources: dict[str, Resource] = {}
    allocations: list[Allocation] = []
    warnings: list[PlanWarning] = []
    collided: set[tuple[str, str]] = set()

    def warn(code: WarningCode, message: str, line: int, entity_id: str | None = None) -> None:
        warnings.append(PlanWarning(code=code, message=message, line=line, entity_id=entity_id))

    reader = csv.reader(io.StringIO(text.lstrip("\ufeff").strip()))
    next(reader, None)  # header

    for row in reader:
        line = reader.line_num
        if not any(field.strip() for field in row):
            continue
        if len(row) < _MIN_FIELDS:
            warn(WarningCode.MALFORMED_ROW, f"Expected {_MIN_FIELDS} fields, got {len(row)}", line)
            continue

        rel_name, start_month, end_month, res_name, role, loc, rate_s, month, pct_s = (
            f.strip() for f in row[:_MIN_FIELDS]
        )
        if not rel_name or not res_name:
            warn(WarningCode.MISSING_NAME, "Release and resource names are required", line)
            continue

        rate = _parse_decimal(rate_s)
        if rate is None:
            warn(WarningCode.INVALID_RATE, f"Rate {rate_s!r} is not a number; using 0", line)
            rate = Decimal(0)
        pct = _parse_decimal(pct_s)
        if pct is None:
            warn(WarningCode.INVALID_PERCENTAGE, f"Allocation {pct_s!r} is not a number; using 0", line)
            pct = Decimal(0)
        try:
            location = Location(loc)
        except ValueError:
            warn(WarningCode.INVALID_LOCATION, f"Location {loc!r} is unknown; using Offshore", line)
            location = Location.OFFSHORE

        release = releases.get(rel_name)
        if release is None:
            release = Release(id=new_id(), name=rel_name, start_month=start_month, end_month=end_month)
            releases[rel_name] = release
        elif (release.start_month, release.end_month) != (start_month, end_month) and (
            ("release", rel_name) not in collided
        ):
            collided.add(("release", rel_name))
            warn(
                WarningCode.NAME_COLLISION,
                f"Release {rel_name!r} appears with different date ranges; merged into the first",
                line,
                release.id,
            )

        resource = resources.get(res_name)
        if resource is None:
            resource = Resource(id=new_id(), name=res_name, role=role, location=location, rate_cad=rate)
            resources[res_name] = resource
        elif (resource.role, resource.location, resource.rate_cad) != (role, location, rate) and (
            ("resource", res_name) not in collided
        ):
            collided.add(("resource", res_name))
            warn(
                WarningCode.NAME_COLLISION,
                f"Resource {res_name!r} appears with different attributes; merged into the first",
                line,
                resource.id,
            )

        allocations.append(Allocation(
            id=new_id(),
            release_id=release.id,
            resource_id=resource.id,
            month_str=month,
            percentage=pct,
        ))

    for w in warnings:
        logger.debug("Import line %s: %s (%s)", w.line, w.message, w.code.value)
    logger.info(
        "Imported %d releases, %d resources, %d allocations with %d warnings",
        len(releases), len(resources), len(allocations), len(warnings),
    )
    return TableImport(
        releases=list(releases.values()),
        resources=list(resources.values()),
        allocations=allocations,
        warnings=warnings,
    )
