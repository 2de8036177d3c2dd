"""Year-by-year table rows for a projection and for a scenario comparison."""

from __future__ import annotations

from typing import Any

from engine.escalation.catalog import EnergyCatalog
from engine.escalation.metrics import comparison_delta, year_over_year
from engine.escalation.projection import Trajectory
from engine.reporting.formatting import line_item_detail


def _trend(index: int, pct: float) -> str | None:
    if index == 0:
        return None
    if pct > 0:
        return "up"
    if pct < 0:
        return "down"
    return "flat"


def projection_table(
    t: Trajectory,
    catalog: EnergyCatalog,
    currency: str = "EUR",
) -> list[dict[str, Any]]:
    """One row per year with the change versus the previous year.

    ``trend`` is ``None`` for the base year.
    """
    rows: list[dict[str, Any]] = []
    changes = year_over_year(t)
    for i, (row, change) in enumerate(zip(t, changes)):
        rows.append({
            "year": row.year,
            "total_cost": round(row.total_cost, 2),
            "delta_vs_previous": round(change["delta"], 2),
            "percent_vs_previous": round(change["percent"], 1),
            "trend": _trend(i, change["percent"]),
            "detail": [
                line_item_detail(c, catalog, currency) for c in row.line_item_costs
            ],
        })
    return rows


def comparison_table(
    base: Trajectory,
    alt: Trajectory,
    catalog: EnergyCatalog,
) -> list[dict[str, Any]]:
    """Rows for the years both trajectories cover.

    ``economy`` is ``base - alternative``; positive means the alternative
    is cheaper that year.
    """
    base_rows = base.by_year()
    alt_rows = alt.by_year()
    rows: list[dict[str, Any]] = []
    for entry in comparison_delta(base, alt):
        year = entry["year"]
        economy = entry["delta"]
        if economy > 0:
            outcome = "economy"
        elif economy < 0:
            outcome = "extra_cost"
        else:
            outcome = "equal"
        rows.append({
            "year": year,
            "base_total": round(base_rows[year].total_cost, 2),
            "alternative_total": round(alt_rows[year].total_cost, 2),
            "economy": round(economy, 2),
            "outcome": outcome,
            "base_detail": [
                line_item_detail(c, catalog, with_price=False)
                for c in base_rows[year].line_item_costs
            ],
            "alternative_detail": [
                line_item_detail(c, catalog, with_price=False)
                for c in alt_rows[year].line_item_costs
            ],
        })
    return rows
