"""Shared test fixtures for EnerCast engine and API tests."""

from __future__ import annotations

import pytest

from engine.escalation.catalog import EnergyCarrier, EnergyCatalog
from engine.escalation.projection import ConsumptionLineItem


# ======================================================================
# Catalogue fixtures
# ======================================================================

@pytest.fixture
def catalog() -> EnergyCatalog:
    """Catalogue with the built-in presets."""
    return EnergyCatalog()


# ======================================================================
# Bill fixtures
# ======================================================================

@pytest.fixture
def electricity_item() -> ConsumptionLineItem:
    """5,000 kWh of electricity at 0.20 /kWh (1,000 per year)."""
    return ConsumptionLineItem(EnergyCarrier.ELECTRICITY, 5000.0, 0.20)


@pytest.fixture
def mixed_bill() -> tuple[ConsumptionLineItem, ...]:
    """Electric appliances plus gas heating, as in a typical house."""
    return (
        ConsumptionLineItem(EnergyCarrier.ELECTRICITY, 4500.0, 0.2516),
        ConsumptionLineItem(EnergyCarrier.NATURAL_GAS, 12000.0, 0.1284),
    )


@pytest.fixture
def pellet_bill() -> tuple[ConsumptionLineItem, ...]:
    """Same house after switching the gas boiler for a pellet stove."""
    return (
        ConsumptionLineItem(EnergyCarrier.ELECTRICITY, 4700.0, 0.2516),
        ConsumptionLineItem(EnergyCarrier.WOOD_PELLET, 13000.0, 0.0890),
    )


@pytest.fixture
def rates() -> dict[EnergyCarrier, float]:
    """Resolved escalation rates for every carrier (% per year)."""
    return {
        EnergyCarrier.ELECTRICITY: 4.0,
        EnergyCarrier.NATURAL_GAS: 6.0,
        EnergyCarrier.FUEL_OIL: 3.0,
        EnergyCarrier.WOOD_PELLET: 2.0,
        EnergyCarrier.WOOD_CHIP: 2.0,
        EnergyCarrier.PROPANE: 3.0,
    }
