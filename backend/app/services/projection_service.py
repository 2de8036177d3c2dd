import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from engine.escalation.catalog import EnergyCatalog, EnergyCarrier
from engine.escalation.metrics import ComparisonSummary, TrajectorySummary, compare, summarize
from engine.escalation.normalize import normalize_line_items, resolve_escalation_rates
from engine.escalation.projection import ProjectionRequest, Trajectory, project_request
from engine.escalation.validation import validate_escalation_rates, validate_horizon, validate_request

logger = logging.getLogger(__name__)


@dataclass
class ScenarioResult:
    trajectory: Trajectory
    summary: TrajectorySummary


@dataclass
class ProjectionOutcome:
    base: ScenarioResult
    escalation_rates: dict[EnergyCarrier, float]
    alternative: ScenarioResult | None = None
    comparison: ComparisonSummary | None = None


def _run_scenario(
    start_year: int,
    horizon_years: int,
    rows: Iterable[Mapping[str, Any]],
    rates: dict[EnergyCarrier, float],
    catalog: EnergyCatalog,
    strict: bool,
) -> ScenarioResult:
    request = ProjectionRequest(
        start_year=start_year,
        horizon_years=horizon_years,
        line_items=normalize_line_items(rows, catalog, strict=strict),
        escalation_rates=rates,
    )
    validate_request(request)
    trajectory = project_request(request)
    return ScenarioResult(trajectory=trajectory, summary=summarize(trajectory))


def run_projection(
    start_year: int,
    horizon_years: Any,
    line_items: Iterable[Mapping[str, Any]],
    escalation_overrides: Mapping[str, Any] | None,
    catalog: EnergyCatalog,
    alternative_line_items: Iterable[Mapping[str, Any]] | None = None,
    strict: bool = False,
) -> ProjectionOutcome:
    """Validate raw input, project the base and optional alternative bill.

    Both scenarios share start year, horizon and escalation rates.

    Raises
    ------
    ProjectionValidationError
        Any of its subclasses, before the engine runs.
    """
    horizon = validate_horizon(horizon_years)
    rates = resolve_escalation_rates(escalation_overrides, catalog)
    validate_escalation_rates(rates)

    base = _run_scenario(start_year, horizon, line_items, rates, catalog, strict)
    outcome = ProjectionOutcome(base=base, escalation_rates=rates)

    if alternative_line_items is not None:
        alt = _run_scenario(start_year, horizon, alternative_line_items, rates, catalog, strict)
        outcome.alternative = alt
        outcome.comparison = compare(base.trajectory, alt.trajectory)

    logger.info(
        "Projected %d year(s) from %d (alternative: %s)",
        horizon, start_year, "yes" if outcome.alternative else "no",
        extra={
            "start_year": start_year,
            "horizon_years": horizon,
            "line_items": len(base.trajectory.first.line_item_costs),
            "alternative": outcome.alternative is not None,
        },
    )
    return outcome
