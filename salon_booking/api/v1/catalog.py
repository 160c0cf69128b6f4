from fastapi import APIRouter, Depends

from salon_booking.api.v1.schemas import CatalogResponseSchema, ServiceSchema
from salon_booking.application.ports.catalog import CatalogPort
from salon_booking.wiring.dependencies import get_catalog

router = APIRouter()


@router.get("/catalog", response_model=CatalogResponseSchema)
def read_catalog(catalog: CatalogPort = Depends(get_catalog)):
    return CatalogResponseSchema(
        services=[ServiceSchema.from_entity(s) for s in catalog.list_services()],
        staff=list(catalog.list_staff()),
        time_slots=list(catalog.list_time_slots()),
        payment_methods=list(catalog.list_payment_methods()),
    )
