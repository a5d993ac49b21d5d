"""
System-related API models: health, stats, API index.
"""

from typing import Optional

from pydantic import BaseModel

from app.api.models.common import CamelModel
from app.api.models.tags import TagCount


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str = "1.0.0"
    content_available: bool
    entry_count: int


class BlogTotals(CamelModel):
    total_entries: int
    total_tags: int
    earliest_entry: Optional[str] = None
    latest_entry: Optional[str] = None


class ReadingStats(CamelModel):
    total_reading_minutes: int
    average_reading_time: int


class Distribution(CamelModel):
    entries_by_year: dict[str, int]


class TagStats(CamelModel):
    total: int
    top_tags: list[TagCount]


class StatsData(CamelModel):
    """Payload for GET /stats."""
    blog: BlogTotals
    reading: ReadingStats
    distribution: Distribution
    tags: TagStats


class EndpointInfo(CamelModel):
    """One documented endpoint in the API index."""
    method: str = "GET"
    path: str
    description: str
    query: dict[str, str] = {}
    example: str


class ApiIndexData(CamelModel):
    """Payload for the API root."""
    version: str
    name: str
    description: str
    base_url: str
    endpoints: dict[str, dict[str, EndpointInfo]]
    response_format: dict
    features: list[str]
