"""Delimited text export of projections.

Uses ``;`` as field delimiter by default because amounts are written with a
decimal comma.
"""

from __future__ import annotations

import csv
import io

from engine.escalation.catalog import EnergyCatalog
from engine.escalation.metrics import comparison_delta
from engine.escalation.projection import Trajectory
from engine.reporting.formatting import escalation_descriptor, format_decimal, line_item_detail

TRAJECTORY_HEADER = ["Escalation", "Year", "Total", "Detail"]
COMPARISON_HEADER = ["Year", "Base total", "Alternative total", "Economy"]


def trajectory_to_csv(
    t: Trajectory,
    catalog: EnergyCatalog,
    delimiter: str = ";",
    currency: str = "EUR",
) -> str:
    """One record per year: escalation descriptor, year, total, item detail."""
    buf = io.StringIO()
    writer = csv.writer(buf, delimiter=delimiter, lineterminator="\n")
    writer.writerow(TRAJECTORY_HEADER)

    descriptor = escalation_descriptor(t, catalog)
    for row in t:
        detail = " + ".join(
            line_item_detail(c, catalog, currency) for c in row.line_item_costs
        )
        writer.writerow([descriptor, row.year, format_decimal(row.total_cost, 2), detail])

    return buf.getvalue()


def comparison_to_csv(
    base: Trajectory,
    alt: Trajectory,
    delimiter: str = ";",
) -> str:
    """One record per year covered by both trajectories."""
    buf = io.StringIO()
    writer = csv.writer(buf, delimiter=delimiter, lineterminator="\n")
    writer.writerow(COMPARISON_HEADER)

    base_rows = base.by_year()
    alt_rows = alt.by_year()
    for entry in comparison_delta(base, alt):
        year = entry["year"]
        writer.writerow([
            year,
            format_decimal(base_rows[year].total_cost, 2),
            format_decimal(alt_rows[year].total_cost, 2),
            format_decimal(entry["delta"], 2),
        ])

    return buf.getvalue()
