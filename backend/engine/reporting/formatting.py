"""Number and text formatting shared by the table and CSV adapters.

Exported figures use a decimal comma (``1081,60``), as spreadsheet tools
in comma-decimal locales expect.
"""

from __future__ import annotations

from engine.escalation.catalog import EnergyCatalog
from engine.escalation.projection import LineItemCost, Trajectory


def format_decimal(value: float, digits: int = 2, decimal_sep: str = ",") -> str:
    """Fixed-point rendering with a configurable decimal separator."""
    text = f"{value:.{digits}f}"
    if decimal_sep != ".":
        text = text.replace(".", decimal_sep)
    return text


def format_signed_pct(value: float, digits: int = 1, decimal_sep: str = ",") -> str:
    """``+4,0`` / ``-2,5`` style percentage without the percent sign."""
    sign = "+" if value >= 0 else ""
    return sign + format_decimal(value, digits, decimal_sep)


def line_item_detail(
    cost: LineItemCost,
    catalog: EnergyCatalog,
    currency: str = "EUR",
    decimal_sep: str = ",",
    with_price: bool = True,
) -> str:
    """``5000 kWh Electricity × 0,2080 EUR/kWh``."""
    text = f"{format_decimal(cost.annual_consumption_kwh, 0)} kWh {catalog.label(cost.energy_carrier)}"
    if with_price:
        price = format_decimal(cost.escalated_unit_price, 4, decimal_sep)
        text += f" × {price} {currency}/kWh"
    return text


def escalation_descriptor(t: Trajectory, catalog: EnergyCatalog, decimal_sep: str = ",") -> str:
    """Rates applied to the carriers of *t*, e.g. ``Electricity +4,0 %/yr``."""
    parts = []
    for carrier, rate in t.escalation_rates.items():
        parts.append(
            f"{catalog.label(carrier)} {format_signed_pct(rate, 1, decimal_sep)} %/yr"
        )
    return " | ".join(parts)
