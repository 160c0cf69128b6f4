from fastapi import FastAPI

from salon_booking.api.v1.catalog import router as catalog_router
from salon_booking.api.v1.client import router as client_router
from salon_booking.api.v1.staff import router as staff_router
from salon_booking.core.config import settings
from salon_booking.core.log_config import configure_logging


configure_logging(settings.LOG_LEVEL)

app = FastAPI(title=f"{settings.BUSINESS_NAME} Booking", version="1.0.0")

app.include_router(catalog_router, prefix="/api/v1", tags=["catalog"])
app.include_router(client_router, prefix="/api/v1/client", tags=["client"])
app.include_router(staff_router, prefix="/api/v1/staff", tags=["staff"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
