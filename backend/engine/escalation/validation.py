"""Boundary checks run before :func:`engine.escalation.projection.project`.

The engine assumes pre-validated input; these functions are what the
calling layer uses to reject bad requests.
"""

from __future__ import annotations

import math
from typing import Sequence

from engine.escalation.errors import (
    EmptyLineItemsError,
    InvalidEscalationRateError,
    InvalidHorizonError,
    InvalidLineItemError,
)
from engine.escalation.projection import (
    MAX_ESCALATION_PCT,
    MAX_HORIZON_YEARS,
    MIN_ESCALATION_PCT,
    ConsumptionLineItem,
    EscalationRateMap,
    ProjectionRequest,
)


def _is_finite(value: object) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int beyond float range
        return False


def validate_horizon(horizon_years: object) -> int:
    """Return the horizon as ``int`` or raise :class:`InvalidHorizonError`."""
    if not _is_finite(horizon_years):
        raise InvalidHorizonError(f"Horizon must be a finite number, got {horizon_years!r}")
    if float(horizon_years) != int(horizon_years):
        raise InvalidHorizonError(f"Horizon must be a whole number of years, got {horizon_years}")
    years = int(horizon_years)
    if years < 0 or years > MAX_HORIZON_YEARS:
        raise InvalidHorizonError(
            f"Horizon must be between 0 and {MAX_HORIZON_YEARS} years, got {years}"
        )
    return years


def validate_escalation_rates(rates: EscalationRateMap) -> None:
    """Every resolved rate must be finite and within [-50, 100] %."""
    for carrier, rate in rates.items():
        if not _is_finite(rate) or rate < MIN_ESCALATION_PCT or rate > MAX_ESCALATION_PCT:
            raise InvalidEscalationRateError(
                f"Escalation rate for {carrier.value!r} must be between "
                f"{MIN_ESCALATION_PCT:g} and {MAX_ESCALATION_PCT:g} %, got {rate!r}"
            )


def validate_line_item(item: ConsumptionLineItem, index: int = 0) -> None:
    kwh = item.annual_consumption_kwh
    price = item.base_unit_price
    if not _is_finite(kwh) or kwh <= 0:
        raise InvalidLineItemError(
            f"Line item {index}: consumption must be a finite number > 0 kWh, got {kwh!r}"
        )
    if not _is_finite(price) or price < 0:
        raise InvalidLineItemError(
            f"Line item {index}: unit price must be a finite number >= 0, got {price!r}"
        )


def validate_line_items(items: Sequence[ConsumptionLineItem]) -> None:
    if not items:
        raise EmptyLineItemsError("At least one valid consumption line item is required")
    for i, item in enumerate(items):
        validate_line_item(item, i)


def validate_request(request: ProjectionRequest) -> None:
    """Run every boundary check on *request*.

    Rates are checked for every carrier present in the map, used or not.
    Carriers used by a line item but absent from the map are reported too.
    """
    validate_horizon(request.horizon_years)
    validate_line_items(request.line_items)
    validate_escalation_rates(request.escalation_rates)
    for item in request.line_items:
        if item.energy_carrier not in request.escalation_rates:
            raise InvalidEscalationRateError(
                f"No escalation rate resolved for {item.energy_carrier.value!r}"
            )
