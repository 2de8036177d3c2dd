"""Bill projection and CSV export endpoints."""
import io
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import StreamingResponse

from app.config import settings
from app.core.deps import get_catalog
from app.schemas.projection import ProjectionBody
from app.services.projection_service import ProjectionOutcome, ScenarioResult, run_projection

from engine.escalation.catalog import EnergyCatalog
from engine.escalation.errors import ProjectionValidationError
from engine.reporting.chart_data import comparison_series, stacked_area_series
from engine.reporting.csv_export import comparison_to_csv, trajectory_to_csv
from engine.reporting.tables import comparison_table, projection_table

router = APIRouter()

logger = logging.getLogger(__name__)


def _project(body: ProjectionBody, catalog: EnergyCatalog) -> ProjectionOutcome:
    try:
        return run_projection(
            start_year=body.start_year,
            horizon_years=(
                body.horizon_years if body.horizon_years is not None
                else settings.default_horizon_years
            ),
            line_items=[li.model_dump() for li in body.line_items],
            escalation_overrides=body.escalation_rates,
            catalog=catalog,
            alternative_line_items=(
                [li.model_dump() for li in body.alternative.line_items]
                if body.alternative is not None else None
            ),
            strict=settings.strict_line_items,
        )
    except ProjectionValidationError as exc:
        logger.warning(
            "Rejected projection request: %s", exc,
            extra={"error": type(exc).__name__, "start_year": body.start_year},
        )
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"error": type(exc).__name__, "message": str(exc)},
        )


def _scenario_payload(result: ScenarioResult, catalog: EnergyCatalog) -> dict:
    return {
        "trajectory": result.trajectory.to_dict(),
        "summary": result.summary.to_dict(),
        "table": projection_table(result.trajectory, catalog, settings.currency),
        "chart": stacked_area_series(result.trajectory, catalog),
    }


@router.post(
    "/",
    summary="Project energy bill",
    description="Project a base-year bill forward with per-carrier price escalation, "
    "optionally comparing it with an alternative consumption mix.",
)
async def create_projection(
    body: ProjectionBody,
    catalog: EnergyCatalog = Depends(get_catalog),
):
    outcome = _project(body, catalog)

    response: dict = {
        "currency": settings.currency,
        "escalation_rates": {c.value: r for c, r in outcome.escalation_rates.items()},
        "base": _scenario_payload(outcome.base, catalog),
    }

    if outcome.alternative is not None and outcome.comparison is not None:
        base_t = outcome.base.trajectory
        alt_t = outcome.alternative.trajectory
        response["alternative"] = _scenario_payload(outcome.alternative, catalog)
        response["comparison"] = {
            **outcome.comparison.to_dict(),
            "table": comparison_table(base_t, alt_t, catalog),
            "chart": comparison_series(base_t, alt_t),
        }

    return response


@router.post(
    "/export",
    summary="Export projection as CSV",
    description="Download the projection (or the base/alternative comparison) as "
    "semicolon-delimited CSV with decimal-comma amounts.",
)
async def export_projection(
    body: ProjectionBody,
    catalog: EnergyCatalog = Depends(get_catalog),
):
    outcome = _project(body, catalog)

    if outcome.alternative is not None:
        content = comparison_to_csv(
            outcome.base.trajectory,
            outcome.alternative.trajectory,
            delimiter=settings.csv_delimiter,
        )
        filename = f"enercast_comparison_{body.start_year}.csv"
    else:
        content = trajectory_to_csv(
            outcome.base.trajectory,
            catalog,
            delimiter=settings.csv_delimiter,
            currency=settings.currency,
        )
        filename = f"enercast_projection_{body.start_year}.csv"

    return StreamingResponse(
        io.StringIO(content),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
