"""
System routes: API index, /stats, /health
"""

import logging

from fastapi import APIRouter, Depends, Response

from app.api.dependencies import get_system_service
from app.api.models.common import ApiResponse, ErrorResponse
from app.api.models.system import ApiIndexData, HealthResponse, StatsData
from app.config import config
from app.errors import InternalFailureError
from app.formatting import cache_headers, safe_error_detail
from app.services.system_service import SystemService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["System"])

# Mounted outside the API prefix
health_router = APIRouter(tags=["System"])


@router.get("", response_model=ApiResponse[ApiIndexData], response_model_exclude_none=True)
def api_index(response: Response, service: SystemService = Depends(get_system_service)):
    """
    API documentation.
    Lists the available endpoints, their parameters and the entry format.
    """
    response.headers.update(cache_headers())
    return service.get_api_index()


@router.get(
    "/stats",
    response_model=ApiResponse[StatsData],
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
def get_stats(response: Response, service: SystemService = Depends(get_system_service)):
    """
    Blog statistics.
    Returns totals, reading time, entries per year and the top 10 tags.
    """
    try:
        result = service.get_stats()
    except Exception as e:
        logger.error("Error fetching stats: %s", e, exc_info=True)
        raise InternalFailureError("Internal server error", safe_error_detail(e))

    response.headers.update(cache_headers(config.CACHE_STATS_SECONDS))
    return result


@health_router.get("/health", response_model=HealthResponse)
def health_check(service: SystemService = Depends(get_system_service)):
    """Liveness check; reports whether the content directory is readable."""
    return service.get_health()
