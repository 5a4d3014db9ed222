"""
Tests for the cost model and release aggregation.
"""
from decimal import Decimal

from conftest import alloc
from release_planner.engine.currency import format_currency
from release_planner.models import Location, Release, Resource, WarningCode


class TestMonthlyCost:
    """Tests for CalculationEngine.monthly_cost_usd."""

    def test_onsite_full_allocation(self, engine, onsite):
        assert engine.rate_usd(onsite) == Decimal("100")
        assert engine.monthly_hours(onsite) == Decimal(168)
        assert engine.monthly_cost_usd(onsite, Decimal("1")) == Decimal("16800.00")

    def test_onsite_half_allocation(self, engine, onsite):
        assert engine.monthly_cost_usd(onsite, Decimal("0.5")) == Decimal("8400.00")

    def test_offshore_costs_more_at_equal_rate(self, engine, onsite, offshore):
        assert engine.monthly_hours(offshore) == Decimal(189)
        assert engine.monthly_cost_usd(offshore, 1) == Decimal("18900.00")
        assert engine.monthly_cost_usd(offshore, 1) > engine.monthly_cost_usd(onsite, 1)

    def test_float_fraction_accepted(self, engine, onsite):
        assert engine.monthly_cost_usd(onsite, 0.25) == Decimal("4200.00")

    def test_rounds_to_cents(self, engine):
        res = Resource(id="r", name="R", role="Dev", location=Location.ONSITE, rate_cad=Decimal("100"))
        # 100 / 1.32 * 168 = 12727.2727...
        assert engine.monthly_cost_usd(res, 1) == Decimal("12727.27")

    def test_rounds_each_cell_before_summing(self, engine, release):
        res = Resource(id="r", name="R", role="Dev", location=Location.ONSITE, rate_cad=Decimal("100"))
        allocations = [alloc("a1", "rel-1", "r", "2024-01", 0.5), alloc("a2", "rel-1", "r", "2024-02", 0.5)]
        # 6363.6363... per month rounds to 6363.64; unrounded sum would be 12727.27
        assert engine.monthly_cost_usd(res, Decimal("0.5")) == Decimal("6363.64")
        assert engine.release_total_cost_usd(release, [res], allocations) == Decimal("12727.28")

    def test_negative_and_zero_propagate(self, engine, onsite):
        assert engine.monthly_cost_usd(onsite, Decimal("-1")) == Decimal("-16800.00")
        assert engine.monthly_cost_usd(onsite, 0) == Decimal("0")

    def test_constants_come_from_settings(self, settings, onsite):
        from release_planner.engine.calculator import CalculationEngine

        engine = CalculationEngine(settings.model_copy(update={"days_per_month": 20}))
        assert engine.monthly_cost_usd(onsite, 1) == Decimal("16000.00")


class TestReleaseCostBreakdown:
    """Tests for release_cost_breakdown and release_total_cost_usd."""

    def test_maps_seeded_with_zero(self, engine, release, onsite, offshore):
        result = engine.release_cost_breakdown(release, [onsite, offshore], [])
        assert result.total == 0
        assert result.by_month == {"2024-01": 0, "2024-02": 0, "2024-03": 0}
        assert result.by_resource == {"res-on": 0, "res-off": 0}
        assert result.skipped == []

    def test_accumulates_by_month_and_resource(self, engine, release, onsite, offshore):
        allocations = [
            alloc("a1", "rel-1", "res-on", "2024-01", 1),
            alloc("a2", "rel-1", "res-on", "2024-02", 0.5),
            alloc("a3", "rel-1", "res-off", "2024-02", 1),
        ]
        result = engine.release_cost_breakdown(release, [onsite, offshore], allocations)
        assert result.total == Decimal("44100.00")
        assert result.by_month["2024-01"] == Decimal("16800.00")
        assert result.by_month["2024-02"] == Decimal("27300.00")
        assert result.by_month["2024-03"] == 0
        assert result.by_resource["res-on"] == Decimal("25200.00")
        assert result.by_resource["res-off"] == Decimal("18900.00")

    def test_conservation(self, engine):
        release = Release(id="rel", name="R", start_month="2024-01", end_month="2024-06")
        resources = [
            Resource(id=f"r{i}", name=f"R{i}", role="Dev", location=loc, rate_cad=Decimal(rate))
            for i, (loc, rate) in enumerate([
                (Location.ONSITE, "97.13"),
                (Location.OFFSHORE, "41.7"),
                (Location.ONSITE, "155"),
            ])
        ]
        allocations = [
            alloc(f"a{i}-{m}", "rel", r.id, f"2024-0{m}", pct)
            for i, (r, pct) in enumerate(zip(resources, ["0.33", "0.7", "0.125"]))
            for m in range(1, 7)
        ]
        result = engine.release_cost_breakdown(release, resources, allocations)
        assert result.total == sum(result.by_month.values())
        assert result.total == sum(result.by_resource.values())
        assert result.total == engine.release_total_cost_usd(release, resources, allocations)

    def test_out_of_range_month_contributes_nothing(self, engine, release, onsite):
        allocations = [
            alloc("a1", "rel-1", "res-on", "2024-01", 1),
            alloc("stale", "rel-1", "res-on", "2024-07", 1),
        ]
        result = engine.release_cost_breakdown(release, [onsite], allocations)
        assert result.total == Decimal("16800.00")
        assert "2024-07" not in result.by_month
        assert [(w.code, w.entity_id) for w in result.skipped] == [(WarningCode.OUT_OF_RANGE, "stale")]
        assert engine.release_total_cost_usd(release, [onsite], allocations) == Decimal("16800.00")

    def test_missing_resource_skipped(self, engine, release, onsite):
        allocations = [
            alloc("a1", "rel-1", "res-on", "2024-01", 1),
            alloc("orphan", "rel-1", "gone", "2024-01", 1),
        ]
        result = engine.release_cost_breakdown(release, [onsite], allocations)
        assert result.total == Decimal("16800.00")
        assert "gone" not in result.by_resource
        assert [(w.code, w.entity_id) for w in result.skipped] == [(WarningCode.MISSING_RESOURCE, "orphan")]

    def test_other_releases_ignored(self, engine, release, onsite):
        allocations = [alloc("a1", "rel-2", "res-on", "2024-01", 1)]
        result = engine.release_cost_breakdown(release, [onsite], allocations)
        assert result.total == 0
        assert result.skipped == []

    def test_empty_range(self, engine, onsite):
        release = Release(id="rel-1", name="Backwards", start_month="2024-05", end_month="2024-01")
        allocations = [alloc("a1", "rel-1", "res-on", "2024-03", 1)]
        result = engine.release_cost_breakdown(release, [onsite], allocations)
        assert result.total == 0
        assert result.by_month == {}


class TestPortfolioCost:
    """Tests for portfolio totals."""

    def test_sums_release_totals(self, engine, onsite, offshore):
        releases = [
            Release(id="a", name="A", start_month="2024-01", end_month="2024-01"),
            Release(id="b", name="B", start_month="2024-02", end_month="2024-03"),
        ]
        allocations = [
            alloc("1", "a", "res-on", "2024-01", 1),
            alloc("2", "b", "res-off", "2024-02", 1),
            alloc("3", "b", "res-off", "2024-03", 0.5),
        ]
        result = engine.portfolio_cost(releases, [onsite, offshore], allocations)
        assert [r.total for r in result.releases] == [Decimal("16800.00"), Decimal("28350.00")]
        assert result.total == Decimal("45150.00")
        assert engine.portfolio_total_cost_usd(releases, [onsite, offshore], allocations) == result.total


class TestFormatCurrency:
    """Tests for format_currency."""

    def test_usd(self):
        assert format_currency(Decimal("16800"), "USD") == "$16,800.00"

    def test_cad(self):
        assert format_currency(132, "CAD") == "CA$132.00"

    def test_negative(self):
        assert format_currency(Decimal("-1234.5"), "USD") == "-$1,234.50"

    def test_unknown_code_prefixed(self):
        assert format_currency(1, "EUR") == "EUR 1.00"
