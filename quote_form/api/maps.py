"""Google Maps configuration for the embedded map widget."""

import structlog
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from quote_form.config import settings

logger = structlog.get_logger()

router = APIRouter(tags=["maps"])

MAPS_CONFIG_PATH = "/api/maps-config"
MAPS_LIBRARIES = "places"


@router.get(MAPS_CONFIG_PATH)
async def maps_config():
    """Return the browser Maps key so it is not hard-coded in the pages."""
    if not settings.google_maps_api_key:
        logger.warning("maps_key_not_configured")
        return JSONResponse(
            status_code=500,
            content={"error": "Google Maps API key not configured"},
        )

    return {
        "apiKey": settings.google_maps_api_key,
        "libraries": MAPS_LIBRARIES,
    }


@router.api_route(
    MAPS_CONFIG_PATH,
    methods=["POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"],
)
async def maps_config_method_not_allowed():
    return JSONResponse(status_code=405, content={"error": "Method not allowed"})
