"""Summary metrics over one or two projection trajectories.

Growth factor, percentage growth, compound annual growth rate (CAGR),
cumulative and average cost, cumulative surplus versus a flat bill, and
base-vs-alternative comparison.

Every guarded case (first-year cost <= 0, empty overlap) returns 0 rather
than NaN or infinity.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from engine.escalation.projection import Trajectory


# ======================================================================
# Internal helpers
# ======================================================================

def _totals(t: Trajectory) -> NDArray[np.float64]:
    return np.asarray(t.totals, dtype=np.float64)


def _endpoints(t: Trajectory) -> tuple[float, float]:
    """Return (first_total, last_total)."""
    return t.first.total_cost, t.last.total_cost


def _years_elapsed(t: Trajectory) -> int:
    """Number of compounding periods, at least 1."""
    return max(len(t) - 1, 1)


# ======================================================================
# Single-trajectory metrics
# ======================================================================

def growth_factor(t: Trajectory) -> float:
    """``last / first`` total cost."""
    first, last = _endpoints(t)
    if first <= 0:
        return 0.0
    return last / first


def growth_percent(t: Trajectory) -> float:
    """Total growth over the horizon in percent."""
    first, last = _endpoints(t)
    if first <= 0:
        return 0.0
    return (last - first) / first * 100.0


def cagr(t: Trajectory) -> float:
    """Compound annual growth rate in percent.

    ``((last / first) ** (1 / years) - 1) * 100`` with ``years`` the
    number of steps in the trajectory (minimum 1).
    """
    first, last = _endpoints(t)
    if first <= 0:
        return 0.0
    return ((last / first) ** (1.0 / _years_elapsed(t)) - 1.0) * 100.0


def cumulative_total(t: Trajectory) -> float:
    """Sum of yearly totals, base year included."""
    return float(np.sum(_totals(t)))


def annual_average(t: Trajectory) -> float:
    return cumulative_total(t) / len(t)


def cumulative_surplus(t: Trajectory) -> float:
    """Extra cost over years 1..N relative to paying the base bill flat."""
    totals = _totals(t)
    if totals[0] <= 0:
        return 0.0
    return float(np.sum(totals[1:] - totals[0]))


def year_over_year(t: Trajectory) -> list[dict[str, float]]:
    """Change of the total versus the previous year.

    The base year reports zero change.  The percentage is 0 when the
    previous year's total is not positive.
    """
    changes: list[dict[str, float]] = []
    previous = None
    for row in t:
        if previous is None:
            delta = 0.0
            pct = 0.0
        else:
            delta = row.total_cost - previous
            pct = delta / previous * 100.0 if previous > 0 else 0.0
        changes.append({"year": row.year, "delta": delta, "percent": pct})
        previous = row.total_cost
    return changes


# ======================================================================
# Two-trajectory comparison
# ======================================================================

def comparison_delta(base: Trajectory, alt: Trajectory) -> list[dict[str, float]]:
    """Per-year ``base - alternative`` total (positive means economy).

    Trajectories are aligned on the calendar year; years present in only
    one of them are skipped.
    """
    alt_by_year = alt.by_year()
    deltas: list[dict[str, float]] = []
    for row in base:
        other = alt_by_year.get(row.year)
        if other is None:
            continue
        deltas.append({"year": row.year, "delta": row.total_cost - other.total_cost})
    return deltas


def cumulative_comparison_delta(base: Trajectory, alt: Trajectory) -> float:
    return cumulative_total(base) - cumulative_total(alt)


def cumulative_comparison_percent(base: Trajectory, alt: Trajectory) -> float:
    """Cumulative delta as a percentage of the base cumulative cost."""
    base_total = cumulative_total(base)
    if base_total <= 0:
        return 0.0
    return cumulative_comparison_delta(base, alt) / base_total * 100.0


# ======================================================================
# Summaries
# ======================================================================

@dataclass(frozen=True)
class TrajectorySummary:
    first_year_cost: float
    last_year_cost: float
    years: int
    cumulative_total: float
    annual_average: float
    growth_factor: float
    growth_percent: float
    cagr_pct: float
    cumulative_surplus: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "first_year_cost": self.first_year_cost,
            "last_year_cost": self.last_year_cost,
            "years": self.years,
            "cumulative_total": self.cumulative_total,
            "annual_average": self.annual_average,
            "growth_factor": self.growth_factor,
            "growth_percent": self.growth_percent,
            "cagr_pct": self.cagr_pct,
            "cumulative_surplus": self.cumulative_surplus,
        }


@dataclass(frozen=True)
class ComparisonSummary:
    base: TrajectorySummary
    alternative: TrajectorySummary
    cumulative_delta: float
    cumulative_delta_pct: float
    yearly_deltas: list[dict[str, float]] = field(default_factory=list, hash=False)

    @property
    def is_economy(self) -> bool:
        """True when the alternative is cheaper over the horizon."""
        return self.cumulative_delta > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "base": self.base.to_dict(),
            "alternative": self.alternative.to_dict(),
            "cumulative_delta": self.cumulative_delta,
            "cumulative_delta_pct": self.cumulative_delta_pct,
            "is_economy": self.is_economy,
            "yearly_deltas": self.yearly_deltas,
        }


def summarize(t: Trajectory) -> TrajectorySummary:
    """All single-trajectory metrics at once."""
    first, last = _endpoints(t)
    return TrajectorySummary(
        first_year_cost=first,
        last_year_cost=last,
        years=len(t) - 1,
        cumulative_total=cumulative_total(t),
        annual_average=annual_average(t),
        growth_factor=growth_factor(t),
        growth_percent=growth_percent(t),
        cagr_pct=cagr(t),
        cumulative_surplus=cumulative_surplus(t),
    )


def compare(base: Trajectory, alt: Trajectory) -> ComparisonSummary:
    """Summaries of both trajectories plus their differences."""
    return ComparisonSummary(
        base=summarize(base),
        alternative=summarize(alt),
        cumulative_delta=cumulative_comparison_delta(base, alt),
        cumulative_delta_pct=cumulative_comparison_percent(base, alt),
        yearly_deltas=comparison_delta(base, alt),
    )
