"""Turn raw form-style input into validated engine input.

Numbers may arrive as locale-formatted strings using either a comma or a
dot as decimal separator ("0,2154" or "0.2154").
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Mapping

from engine.escalation.catalog import EnergyCatalog, EnergyCarrier, parse_carrier
from engine.escalation.errors import (
    EmptyLineItemsError,
    InvalidEscalationRateError,
    InvalidLineItemError,
)
from engine.escalation.projection import ConsumptionLineItem

logger = logging.getLogger(__name__)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_number(value: Any) -> float:
    """Parse a number that may use a decimal comma.

    Returns NaN for ``None``, blank strings and anything unparseable so that
    callers can apply a single finiteness check.
    """
    if _is_blank(value):
        return math.nan
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.nan
    text = str(value).strip().replace(",", ".", 1)
    try:
        return float(text)
    except ValueError:
        return math.nan


def _row_problem(kwh: float, price: float) -> str | None:
    if not math.isfinite(kwh) or kwh <= 0:
        return f"consumption must be a finite number > 0 kWh, got {kwh!r}"
    if not math.isfinite(price) or price < 0:
        return f"unit price must be a finite number >= 0, got {price!r}"
    return None


def normalize_line_items(
    rows: Iterable[Mapping[str, Any]],
    catalog: EnergyCatalog,
    strict: bool = False,
) -> tuple[ConsumptionLineItem, ...]:
    """Build line items from raw rows.

    Each row carries ``energy_carrier``, ``annual_consumption_kwh`` and
    ``base_unit_price``.  Rows with both numbers blank are ignored.  Any
    other invalid row is dropped with a warning, or raises
    :class:`InvalidLineItemError` when ``strict`` is set.

    Raises
    ------
    EmptyLineItemsError
        If no usable row remains.
    """
    items: list[ConsumptionLineItem] = []

    for index, row in enumerate(rows):
        raw_kwh = row.get("annual_consumption_kwh")
        raw_price = row.get("base_unit_price")
        if _is_blank(raw_kwh) and _is_blank(raw_price):
            continue

        raw_carrier = row.get("energy_carrier", EnergyCarrier.ELECTRICITY)
        try:
            carrier = parse_carrier(raw_carrier)
            catalog.get(carrier)
        except KeyError as exc:
            problem = str(exc.args[0])
        else:
            kwh = parse_number(raw_kwh)
            price = parse_number(raw_price)
            problem = _row_problem(kwh, price)

        if problem is not None:
            if strict:
                raise InvalidLineItemError(f"Line item {index}: {problem}")
            logger.warning("Skipping line item %d: %s", index, problem)
            continue

        items.append(ConsumptionLineItem(
            energy_carrier=carrier,
            annual_consumption_kwh=kwh,
            base_unit_price=price,
        ))

    if not items:
        raise EmptyLineItemsError(
            "At least one valid consumption line item (kWh and unit price) is required"
        )
    return tuple(items)


def resolve_escalation_rates(
    overrides: Mapping[str, Any] | None,
    catalog: EnergyCatalog,
) -> dict[EnergyCarrier, float]:
    """Rate for every catalogue carrier: override when given, else default.

    Blank overrides fall back to the default.  Unparseable overrides
    resolve to NaN and are left for range validation to reject.

    Raises
    ------
    InvalidEscalationRateError
        If an override names a carrier outside the catalogue.
    """
    rates = catalog.default_rates()
    for key, raw in (overrides or {}).items():
        try:
            carrier = parse_carrier(key)
        except KeyError:
            raise InvalidEscalationRateError(f"Unknown energy carrier {key!r}") from None
        if carrier not in rates:
            raise InvalidEscalationRateError(
                f"Energy carrier {carrier.value!r} is not in the catalogue"
            )
        if _is_blank(raw):
            continue
        rates[carrier] = parse_number(raw)
    return rates
