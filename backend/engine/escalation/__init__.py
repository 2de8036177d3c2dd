"""Energy bill escalation projection module."""

from .catalog import DEFAULT_CATALOG, EnergyCarrier, EnergyCatalog, build_catalog
from .metrics import compare, summarize
from .projection import ConsumptionLineItem, ProjectionRequest, Trajectory, project

__all__ = [
    "DEFAULT_CATALOG",
    "EnergyCarrier",
    "EnergyCatalog",
    "build_catalog",
    "compare",
    "summarize",
    "ConsumptionLineItem",
    "ProjectionRequest",
    "Trajectory",
    "project",
]
