"""Pydantic schemas for projection requests.

Numeric fields accept either numbers or locale strings ("0,2154"); parsing
and range checks happen in the service layer so that every rejection is
reported with the same error taxonomy.
"""
from pydantic import BaseModel, Field, StrictFloat, StrictInt


class LineItemIn(BaseModel):
    energy_carrier: str = Field(default="electricity", description="Energy carrier id")
    annual_consumption_kwh: float | str | None = Field(default=None, description="Base-year consumption (kWh)")
    base_unit_price: float | str | None = Field(default=None, description="Base-year unit price (currency/kWh)")


class AlternativeScenarioIn(BaseModel):
    line_items: list[LineItemIn] = Field(default_factory=list)


class ProjectionBody(BaseModel):
    start_year: int = Field(ge=1900, le=2200, description="Calendar year of the base bill")
    horizon_years: StrictInt | StrictFloat | None = Field(default=None, description="Years projected after the base year (0-50)")
    line_items: list[LineItemIn] = Field(default_factory=list)
    escalation_rates: dict[str, float | str | None] = Field(
        default_factory=dict, description="Annual escalation % per carrier id; missing carriers use defaults"
    )
    alternative: AlternativeScenarioIn | None = None


class CarrierResponse(BaseModel):
    id: str
    label: str
    default_escalation_pct: float
    color: str
