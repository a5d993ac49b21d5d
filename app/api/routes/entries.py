"""
Entry routes: /entries, /entries/recent, /entries/{slug}, /entries/tag/{tag}
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from app.api.dependencies import get_entry_service
from app.api.models.common import ApiResponse, ErrorResponse
from app.api.models.entries import EntryDetail, EntryListData, EntryListItem, TagEntryListData
from app.config import config
from app.errors import ApiError, InternalFailureError
from app.formatting import cache_headers, safe_error_detail
from app.services.entry_service import EntryService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Entries"])

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get(
    "/entries",
    response_model=ApiResponse[EntryListData],
    response_model_exclude_none=True,
    responses=_ERRORS,
)
def list_entries(
    response: Response,
    page: Optional[str] = Query(None, description="Page number (default: 1)"),
    page_size: Optional[str] = Query(None, alias="pageSize", description="Entries per page (default: 10, max: 100)"),
    limit: Optional[str] = Query(None, description="Alias for pageSize"),
    service: EntryService = Depends(get_entry_service),
):
    """
    List all entries, newest first, with pagination.

    Each entry carries an excerpt and an estimated reading time.
    Requesting a page past the last one returns 400.
    """
    try:
        result = service.list_entries(page, page_size if page_size is not None else limit)
    except ApiError:
        raise
    except Exception as e:
        logger.error("Error fetching entries: %s", e, exc_info=True)
        raise InternalFailureError("Internal server error", safe_error_detail(e))

    response.headers.update(cache_headers(config.CACHE_LIST_SECONDS))
    return result


@router.get(
    "/entries/recent",
    response_model=ApiResponse[list[EntryListItem]],
    response_model_exclude_none=True,
    responses=_ERRORS,
)
def recent_entries(
    response: Response,
    limit: Optional[str] = Query(None, description="Number of entries (default: 5, max: 50)"),
    service: EntryService = Depends(get_entry_service),
):
    """Most recent entries, for home pages and sidebars."""
    try:
        result = service.recent_entries(limit)
    except ApiError:
        raise
    except Exception as e:
        logger.error("Error fetching recent entries: %s", e, exc_info=True)
        raise InternalFailureError("Internal server error", safe_error_detail(e))

    response.headers.update(cache_headers(config.CACHE_RECENT_SECONDS))
    return result


@router.get(
    "/entries/tag/{tag}",
    response_model=ApiResponse[TagEntryListData],
    response_model_exclude_none=True,
    responses=_ERRORS,
)
def entries_by_tag(
    tag: str,
    response: Response,
    page: Optional[str] = Query(None, description="Page number (default: 1)"),
    page_size: Optional[str] = Query(None, alias="pageSize", description="Entries per page (default: 10, max: 100)"),
    limit: Optional[str] = Query(None, description="Alias for pageSize"),
    service: EntryService = Depends(get_entry_service),
):
    """
    Entries carrying a tag, newest first, with pagination.

    The tag matches case-insensitively against its URL form, where spaces
    become dashes ("Machine Learning" is reachable as "machine-learning").
    """
    try:
        result = service.entries_by_tag(tag, page, page_size if page_size is not None else limit)
    except ApiError:
        raise
    except Exception as e:
        logger.error("Error fetching entries by tag: %s", e, exc_info=True)
        raise InternalFailureError("Internal server error", safe_error_detail(e))

    response.headers.update(cache_headers(config.CACHE_LIST_SECONDS))
    return result


@router.get(
    "/entries/{slug}",
    response_model=ApiResponse[EntryDetail],
    response_model_exclude_none=True,
    responses=_ERRORS,
)
def get_entry(
    slug: str,
    response: Response,
    service: EntryService = Depends(get_entry_service),
):
    """A single entry with its raw MDX body and reading time."""
    try:
        result = service.get_entry(slug)
    except ApiError:
        raise
    except Exception as e:
        logger.error("Error fetching entry %s: %s", slug, e, exc_info=True)
        raise InternalFailureError("Internal server error", safe_error_detail(e))

    response.headers.update(cache_headers(config.CACHE_ENTRY_SECONDS))
    return result
