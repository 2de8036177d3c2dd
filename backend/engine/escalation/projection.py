"""Multi-year energy bill projection with per-carrier price escalation.

Takes a base-year bill decomposed into consumption line items and a map of
annual escalation rates (percent per year, keyed by energy carrier) and
produces the year-by-year cost trajectory.

Escalation compounds on the *unit price* of each line item independently;
consumption volumes are held constant over the horizon.  Year 0 therefore
reproduces the base-year bill exactly.

All arithmetic is double precision and nothing is rounded here; rounding is
left to the presentation adapters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Sequence

from engine.escalation.catalog import EnergyCarrier
from engine.escalation.errors import EmptyLineItemsError, InvalidEscalationRateError

logger = logging.getLogger(__name__)


# ======================================================================
# Constants
# ======================================================================

MAX_HORIZON_YEARS: int = 50
MIN_ESCALATION_PCT: float = -50.0
MAX_ESCALATION_PCT: float = 100.0
ESCALATION_FLOOR_PCT: float = -99.9  # keeps (1 + g) strictly positive


EscalationRateMap = Mapping[EnergyCarrier, float]


# ======================================================================
# Value objects
# ======================================================================

@dataclass(frozen=True)
class ConsumptionLineItem:
    """One metered consumption stream of the base-year bill."""
    energy_carrier: EnergyCarrier
    annual_consumption_kwh: float
    base_unit_price: float  # currency per kWh

    @property
    def base_cost(self) -> float:
        return self.annual_consumption_kwh * self.base_unit_price


@dataclass(frozen=True)
class LineItemCost:
    """Cost of one line item in one projection year."""
    energy_carrier: EnergyCarrier
    annual_consumption_kwh: float
    escalated_unit_price: float
    cost: float


@dataclass(frozen=True)
class YearlyCostBreakdown:
    """All line-item costs for one year and their total."""
    year: int
    line_item_costs: tuple[LineItemCost, ...]
    total_cost: float


@dataclass(frozen=True)
class ProjectionRequest:
    start_year: int
    horizon_years: int
    line_items: tuple[ConsumptionLineItem, ...]
    escalation_rates: EscalationRateMap = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class Trajectory:
    """Year-by-year projection produced by a single :func:`project` call.

    ``rows`` holds ``horizon_years + 1`` entries with years increasing by
    one from ``start_year``.  Hashing uses ``rows`` only; the rates still
    take part in equality.
    """
    rows: tuple[YearlyCostBreakdown, ...]
    escalation_rates: EscalationRateMap = field(default_factory=dict, hash=False)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[YearlyCostBreakdown]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> YearlyCostBreakdown:
        return self.rows[index]

    @property
    def first(self) -> YearlyCostBreakdown:
        return self.rows[0]

    @property
    def last(self) -> YearlyCostBreakdown:
        return self.rows[-1]

    @property
    def start_year(self) -> int:
        return self.rows[0].year

    @property
    def horizon_years(self) -> int:
        return len(self.rows) - 1

    @property
    def years(self) -> list[int]:
        return [r.year for r in self.rows]

    @property
    def totals(self) -> list[float]:
        return [r.total_cost for r in self.rows]

    def carriers(self) -> list[EnergyCarrier]:
        """Carriers of the line items, in input order (duplicates kept)."""
        return [c.energy_carrier for c in self.rows[0].line_item_costs]

    def by_year(self) -> dict[int, YearlyCostBreakdown]:
        return {r.year: r for r in self.rows}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {
            "start_year": self.start_year,
            "horizon_years": self.horizon_years,
            "escalation_rates": {
                c.value: rate for c, rate in self.escalation_rates.items()
            },
            "rows": [
                {
                    "year": r.year,
                    "total_cost": r.total_cost,
                    "line_item_costs": [
                        {
                            "energy_carrier": c.energy_carrier.value,
                            "annual_consumption_kwh": c.annual_consumption_kwh,
                            "escalated_unit_price": c.escalated_unit_price,
                            "cost": c.cost,
                        }
                        for c in r.line_item_costs
                    ],
                }
                for r in self.rows
            ],
        }


# ======================================================================
# Internal helpers
# ======================================================================

def _growth_rate(escalation_pct: float) -> float:
    """Fractional growth rate with the -99.9 % floor applied."""
    return max(escalation_pct, ESCALATION_FLOOR_PCT) / 100.0


def _price_multiplier(escalation_pct: float, offset: int) -> float:
    """Return ``(1 + g) ** offset``."""
    return (1.0 + _growth_rate(escalation_pct)) ** offset


def _resolve_rate(rates: EscalationRateMap, carrier: EnergyCarrier) -> float:
    try:
        return float(rates[carrier])
    except KeyError:
        raise InvalidEscalationRateError(
            f"No escalation rate resolved for {carrier.value!r}"
        ) from None


# ======================================================================
# Main entry point
# ======================================================================

def project(
    start_year: int,
    horizon_years: int,
    line_items: Sequence[ConsumptionLineItem],
    escalation_rates: EscalationRateMap,
) -> Trajectory:
    """Project the bill over ``horizon_years`` years after ``start_year``.

    Parameters
    ----------
    start_year : int
        Calendar year of the base bill (offset 0).
    horizon_years : int
        Number of years projected after the base year.  Input is assumed
        to be validated upstream (0 -- 50).
    line_items : sequence of ConsumptionLineItem
        Base-year bill; must not be empty.
    escalation_rates : mapping EnergyCarrier -> percent per year
        Fully resolved rates; every carrier used by a line item must be
        present.

    Returns
    -------
    Trajectory
        ``horizon_years + 1`` yearly breakdowns.

    Raises
    ------
    EmptyLineItemsError
        If ``line_items`` is empty.
    InvalidEscalationRateError
        If a line item's carrier has no rate in ``escalation_rates``.
    """
    if not line_items:
        raise EmptyLineItemsError("At least one consumption line item is required")

    rates = {item.energy_carrier: _resolve_rate(escalation_rates, item.energy_carrier)
             for item in line_items}

    logger.debug(
        "Projecting %d line item(s) from %d over %d year(s)",
        len(line_items), start_year, horizon_years,
    )

    rows: list[YearlyCostBreakdown] = []
    for offset in range(horizon_years + 1):
        costs: list[LineItemCost] = []
        total = 0.0
        for item in line_items:
            unit_price = item.base_unit_price * _price_multiplier(
                rates[item.energy_carrier], offset
            )
            cost = unit_price * item.annual_consumption_kwh
            total += cost
            costs.append(LineItemCost(
                energy_carrier=item.energy_carrier,
                annual_consumption_kwh=item.annual_consumption_kwh,
                escalated_unit_price=unit_price,
                cost=cost,
            ))
        rows.append(YearlyCostBreakdown(
            year=start_year + offset,
            line_item_costs=tuple(costs),
            total_cost=total,
        ))

    return Trajectory(rows=tuple(rows), escalation_rates=dict(rates))


def project_request(request: ProjectionRequest) -> Trajectory:
    """Run :func:`project` on a :class:`ProjectionRequest`."""
    return project(
        request.start_year,
        request.horizon_years,
        request.line_items,
        request.escalation_rates,
    )
