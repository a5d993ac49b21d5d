"""
Pydantic models (schemas) for API request/response types.

All models are re-exported here for convenience:
    from app.api.models import EntryListData, StatsData, ...
"""

from app.api.models.common import (
    CamelModel,
    ApiResponse,
    ErrorDetail,
    ErrorResponse,
)
from app.api.models.entries import (
    EntryFrontmatter,
    EntryListItem,
    PaginationInfo,
    EntryListData,
    TagEntryListData,
    EntryContent,
    EntryDetail,
)
from app.api.models.tags import (
    TagCount,
    TagListData,
)
from app.api.models.system import (
    HealthResponse,
    BlogTotals,
    ReadingStats,
    Distribution,
    TagStats,
    StatsData,
    EndpointInfo,
    ApiIndexData,
)

__all__ = [
    # Common
    "CamelModel",
    "ApiResponse",
    "ErrorDetail",
    "ErrorResponse",
    # Entries
    "EntryFrontmatter",
    "EntryListItem",
    "PaginationInfo",
    "EntryListData",
    "TagEntryListData",
    "EntryContent",
    "EntryDetail",
    # Tags
    "TagCount",
    "TagListData",
    # System
    "HealthResponse",
    "BlogTotals",
    "ReadingStats",
    "Distribution",
    "TagStats",
    "StatsData",
    "EndpointInfo",
    "ApiIndexData",
]
