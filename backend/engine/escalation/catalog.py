"""Energy carrier catalogue.

Fixed set of energy carriers with their display labels, default annual
price escalation (percent per year) and chart colour.  The catalogue is an
immutable value built once by the application layer and handed to whoever
needs labels or defaults; the projection engine itself never reads it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping


class EnergyCarrier(str, Enum):
    ELECTRICITY = "electricity"
    NATURAL_GAS = "natural_gas"
    FUEL_OIL = "fuel_oil"
    WOOD_PELLET = "wood_pellet"
    WOOD_CHIP = "wood_chip"
    PROPANE = "propane"


@dataclass(frozen=True)
class CarrierSpec:
    """Display and default-rate data for one carrier."""
    carrier: EnergyCarrier
    label: str
    default_escalation_pct: float
    color: str


# Built-in presets (% per year)
BUILTIN_CARRIERS: tuple[CarrierSpec, ...] = (
    CarrierSpec(EnergyCarrier.ELECTRICITY, "Electricity", 3.0, "#60a5fa"),
    CarrierSpec(EnergyCarrier.NATURAL_GAS, "Natural gas", 3.0, "#22c55e"),
    CarrierSpec(EnergyCarrier.FUEL_OIL, "Fuel oil", 3.0, "#f59e0b"),
    CarrierSpec(EnergyCarrier.WOOD_PELLET, "Wood pellets", 2.0, "#a78bfa"),
    CarrierSpec(EnergyCarrier.WOOD_CHIP, "Wood chips", 2.0, "#14b8a6"),
    CarrierSpec(EnergyCarrier.PROPANE, "Propane", 3.0, "#ef4444"),
)

FALLBACK_COLOR = "#8884d8"


class EnergyCatalog:
    """Read-only mapping of :class:`EnergyCarrier` to :class:`CarrierSpec`."""

    def __init__(self, specs: tuple[CarrierSpec, ...] = BUILTIN_CARRIERS):
        self._specs: Mapping[EnergyCarrier, CarrierSpec] = MappingProxyType(
            {spec.carrier: spec for spec in specs}
        )

    def __iter__(self) -> Iterator[CarrierSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, carrier: object) -> bool:
        return carrier in self._specs

    def get(self, carrier: EnergyCarrier | str) -> CarrierSpec:
        """Return the spec for *carrier* (enum member or string id).

        Raises
        ------
        KeyError
            If the carrier is not part of the catalogue.
        """
        key = parse_carrier(carrier)
        try:
            return self._specs[key]
        except KeyError:
            raise KeyError(f"Energy carrier {key.value!r} is not in the catalogue") from None

    def label(self, carrier: EnergyCarrier | str) -> str:
        return self.get(carrier).label

    def color(self, carrier: EnergyCarrier | str) -> str:
        try:
            return self.get(carrier).color
        except KeyError:
            return FALLBACK_COLOR

    def default_rates(self) -> dict[EnergyCarrier, float]:
        """Default escalation percentage for every carrier in the catalogue."""
        return {c: s.default_escalation_pct for c, s in self._specs.items()}

    def to_list(self) -> list[dict]:
        """Return catalogue entries as list of dicts for API response."""
        return [
            {
                "id": s.carrier.value,
                "label": s.label,
                "default_escalation_pct": s.default_escalation_pct,
                "color": s.color,
            }
            for s in self._specs.values()
        ]


def parse_carrier(value: EnergyCarrier | str) -> EnergyCarrier:
    """Coerce a string id into an :class:`EnergyCarrier`.

    Raises ``KeyError`` for unknown ids so callers can treat catalogue
    misses and unknown ids the same way.
    """
    if isinstance(value, EnergyCarrier):
        return value
    try:
        return EnergyCarrier(str(value).strip())
    except ValueError:
        raise KeyError(f"Unknown energy carrier {value!r}") from None


def build_catalog(overrides: Mapping[str, float] | None = None) -> EnergyCatalog:
    """Build a catalogue from the built-in presets.

    Parameters
    ----------
    overrides : mapping of carrier id to default escalation %, optional
        Replaces the built-in default rate of the named carriers.  Unknown
        ids raise ``KeyError``.
    """
    if not overrides:
        return EnergyCatalog()

    resolved = {parse_carrier(k): float(v) for k, v in overrides.items()}
    specs = tuple(
        CarrierSpec(
            carrier=spec.carrier,
            label=spec.label,
            default_escalation_pct=resolved.get(spec.carrier, spec.default_escalation_pct),
            color=spec.color,
        )
        for spec in BUILTIN_CARRIERS
    )
    return EnergyCatalog(specs)


DEFAULT_CATALOG = EnergyCatalog()
