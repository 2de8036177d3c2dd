"""Tests for engine.reporting: tables, chart series and CSV export."""

from __future__ import annotations

import pytest

from engine.escalation.catalog import EnergyCarrier
from engine.escalation.projection import ConsumptionLineItem, project
from engine.reporting.chart_data import comparison_series, stacked_area_series
from engine.reporting.csv_export import (
    COMPARISON_HEADER,
    TRAJECTORY_HEADER,
    comparison_to_csv,
    trajectory_to_csv,
)
from engine.reporting.formatting import (
    escalation_descriptor,
    format_decimal,
    format_signed_pct,
)
from engine.reporting.tables import comparison_table, projection_table


@pytest.fixture
def e2e_trajectory(electricity_item):
    return project(2024, 3, [electricity_item], {EnergyCarrier.ELECTRICITY: 4.0})


# ======================================================================
# Formatting
# ======================================================================


class TestFormatting:
    def test_decimal_comma(self):
        assert format_decimal(1081.6, 2) == "1081,60"

    def test_decimal_dot(self):
        assert format_decimal(0.2205, 4, ".") == "0.2205"

    def test_signed_pct(self):
        assert format_signed_pct(4.0) == "+4,0"
        assert format_signed_pct(-2.5) == "-2,5"
        assert format_signed_pct(0.0) == "+0,0"

    def test_descriptor(self, mixed_bill, rates, catalog):
        t = project(2024, 1, mixed_bill, rates)
        assert escalation_descriptor(t, catalog) == "Electricity +4,0 %/yr | Natural gas +6,0 %/yr"


# ======================================================================
# Tables
# ======================================================================


class TestProjectionTable:
    def test_rows(self, e2e_trajectory, catalog):
        rows = projection_table(e2e_trajectory, catalog)
        assert [r["total_cost"] for r in rows] == [1000.0, 1040.0, 1081.6, 1124.86]
        assert rows[0]["trend"] is None
        assert rows[0]["delta_vs_previous"] == 0.0
        assert rows[1]["delta_vs_previous"] == 40.0
        assert rows[1]["percent_vs_previous"] == 4.0
        assert rows[1]["trend"] == "up"

    def test_detail(self, e2e_trajectory, catalog):
        rows = projection_table(e2e_trajectory, catalog, currency="EUR")
        assert rows[1]["detail"] == ["5000 kWh Electricity × 0,2080 EUR/kWh"]

    def test_down_and_flat_trend(self, catalog):
        item = ConsumptionLineItem(EnergyCarrier.FUEL_OIL, 1000.0, 0.1)
        falling = projection_table(project(2024, 1, [item], {EnergyCarrier.FUEL_OIL: -5.0}), catalog)
        flat = projection_table(project(2024, 1, [item], {EnergyCarrier.FUEL_OIL: 0.0}), catalog)
        assert falling[1]["trend"] == "down"
        assert flat[1]["trend"] == "flat"


class TestComparisonTable:
    def test_rows(self, mixed_bill, pellet_bill, rates, catalog):
        base = project(2024, 2, mixed_bill, rates)
        alt = project(2024, 2, pellet_bill, rates)
        rows = comparison_table(base, alt, catalog)
        assert len(rows) == 3
        assert rows[0]["year"] == 2024
        assert rows[0]["outcome"] == "economy"
        assert rows[0]["economy"] == pytest.approx(round(2673.0 - 2339.52, 2))
        assert rows[0]["alternative_detail"] == [
            "4700 kWh Electricity",
            "13000 kWh Wood pellets",
        ]

    def test_equal_and_extra_cost(self, electricity_item, catalog):
        rates = {EnergyCarrier.ELECTRICITY: 3.0}
        base = project(2024, 1, [electricity_item], rates)
        pricier = project(
            2024, 1, [ConsumptionLineItem(EnergyCarrier.ELECTRICITY, 6000.0, 0.20)], rates
        )
        assert comparison_table(base, base, catalog)[0]["outcome"] == "equal"
        assert comparison_table(base, pricier, catalog)[0]["outcome"] == "extra_cost"


# ======================================================================
# Chart series
# ======================================================================


class TestChartSeries:
    def test_stacked_bands(self, mixed_bill, rates, catalog):
        t = project(2024, 4, mixed_bill, rates)
        bands = stacked_area_series(t, catalog)
        assert [b["carrier"] for b in bands] == ["electricity", "natural_gas"]
        assert bands[0]["color"] == "#60a5fa"
        for i, row in enumerate(t):
            assert bands[0]["points"][i]["lower"] == 0.0
            assert bands[1]["points"][i]["lower"] == pytest.approx(bands[0]["points"][i]["upper"])
            assert bands[-1]["points"][i]["upper"] == pytest.approx(row.total_cost)

    def test_comparison_series(self, mixed_bill, pellet_bill, rates):
        base = project(2024, 3, mixed_bill, rates)
        alt = project(2024, 3, pellet_bill, rates)
        series = comparison_series(base, alt)
        assert len(series["base"]) == len(series["alternative"]) == 4
        assert len(series["gaps"]) == 4
        assert all(g["is_economy"] for g in series["gaps"])
        assert series["max_total"] == pytest.approx(base.last.total_cost)

    def test_no_gaps_when_identical(self, mixed_bill, rates):
        t = project(2024, 3, mixed_bill, rates)
        assert comparison_series(t, t)["gaps"] == []


# ======================================================================
# CSV export
# ======================================================================


class TestCsvExport:
    def test_trajectory_csv(self, e2e_trajectory, catalog):
        lines = trajectory_to_csv(e2e_trajectory, catalog).splitlines()
        assert lines[0] == ";".join(TRAJECTORY_HEADER)
        assert len(lines) == 5
        assert lines[3] == (
            "Electricity +4,0 %/yr;2026;1081,60;"
            "5000 kWh Electricity × 0,2163 EUR/kWh"
        )

    def test_multi_item_detail(self, mixed_bill, rates, catalog):
        t = project(2024, 0, mixed_bill, rates)
        record = trajectory_to_csv(t, catalog).splitlines()[1].split(";")
        assert record[1] == "2024"
        assert record[2] == "2673,00"
        assert record[3] == (
            "4500 kWh Electricity × 0,2516 EUR/kWh + "
            "12000 kWh Natural gas × 0,1284 EUR/kWh"
        )

    def test_custom_delimiter(self, e2e_trajectory, catalog):
        first = trajectory_to_csv(e2e_trajectory, catalog, delimiter="\t").splitlines()[0]
        assert first == "\t".join(TRAJECTORY_HEADER)

    def test_comparison_csv(self, mixed_bill, pellet_bill, rates):
        base = project(2024, 1, mixed_bill, rates)
        alt = project(2024, 1, pellet_bill, rates)
        lines = comparison_to_csv(base, alt).splitlines()
        assert lines[0] == ";".join(COMPARISON_HEADER)
        assert lines[1] == "2024;2673,00;2339,52;333,48"
        assert len(lines) == 3
