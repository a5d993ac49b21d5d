"""
Tag routes: /tags
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from app.api.dependencies import get_entry_service
from app.api.models.common import ApiResponse, ErrorResponse
from app.api.models.tags import TagListData
from app.config import config
from app.errors import InternalFailureError
from app.formatting import cache_headers, safe_error_detail
from app.services.entry_service import EntryService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Tags"])


@router.get(
    "/tags",
    response_model=ApiResponse[TagListData],
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
def list_tags(
    response: Response,
    count: Optional[str] = Query(None, description='Include entry counts ("true")'),
    service: EntryService = Depends(get_entry_service),
):
    """
    List all distinct tags, sorted.

    With count=true each tag is returned as {name, count}.
    """
    include_count = count == "true"
    try:
        result = service.list_tags(include_count)
    except Exception as e:
        logger.error("Error fetching tags: %s", e, exc_info=True)
        raise InternalFailureError("Internal server error", safe_error_detail(e))

    response.headers.update(cache_headers(config.CACHE_TAGS_SECONDS))
    return result
