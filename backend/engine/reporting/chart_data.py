"""Chart series for the stacked-area cost chart and the comparison chart.

Only data is produced here; drawing is left to the client.
"""

from __future__ import annotations

from typing import Any

from engine.escalation.catalog import EnergyCatalog
from engine.escalation.projection import Trajectory


def stacked_area_series(t: Trajectory, catalog: EnergyCatalog) -> list[dict[str, Any]]:
    """One band per line item, stacked in input order.

    Each point carries the ``lower`` and ``upper`` edge of the band; the
    last band's ``upper`` is the year's total cost.
    """
    stack_base = [0.0] * len(t)
    bands: list[dict[str, Any]] = []

    for idx, carrier in enumerate(t.carriers()):
        points = []
        for i, row in enumerate(t):
            segment = row.line_item_costs[idx].cost
            points.append({
                "year": row.year,
                "lower": stack_base[i],
                "upper": stack_base[i] + segment,
            })
            stack_base[i] += segment
        bands.append({
            "carrier": carrier.value,
            "label": catalog.label(carrier),
            "color": catalog.color(carrier),
            "points": points,
        })

    return bands


def comparison_series(base: Trajectory, alt: Trajectory) -> dict[str, Any]:
    """Total-cost lines for both scenarios and the gaps between them.

    Gaps are listed for the years both trajectories cover where the totals
    differ.
    """
    alt_by_year = alt.by_year()
    gaps = []
    for row in base:
        other = alt_by_year.get(row.year)
        if other is None or other.total_cost == row.total_cost:
            continue
        gaps.append({
            "year": row.year,
            "base_total": row.total_cost,
            "alternative_total": other.total_cost,
            "is_economy": row.total_cost > other.total_cost,
        })

    return {
        "base": [{"year": r.year, "total": r.total_cost} for r in base],
        "alternative": [{"year": r.year, "total": r.total_cost} for r in alt],
        "gaps": gaps,
        "max_total": max(base.totals + alt.totals + [1.0]),
    }
