from fastapi import APIRouter, Depends

from app.core.deps import get_catalog
from app.schemas.projection import CarrierResponse

from engine.escalation.catalog import EnergyCatalog

router = APIRouter()


@router.get(
    "/energy-carriers",
    response_model=list[CarrierResponse],
    summary="List energy carriers",
    description="Return the energy carriers with their labels and default annual escalation rates.",
)
async def list_energy_carriers(catalog: EnergyCatalog = Depends(get_catalog)):
    return catalog.to_list()
