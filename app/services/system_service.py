"""
System service: health checks, blog statistics, and the API index.
"""

import logging
import math
from collections import Counter

from app.config import config
from app.formatting import reading_time_minutes, success_envelope
from app.repository import ContentRepository, count_tags, rank_tags
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
from app.api.models.tags import TagCount

logger = logging.getLogger(__name__)

_PAGE_QUERY = {
    "page": "Page number for pagination (default: 1)",
    "pageSize": "Number of entries per page (default: 10, max: 100)",
}


class SystemService:
    """Handles system-level operations: health, stats, API index."""

    def __init__(self, repository: ContentRepository):
        self.repository = repository

    def get_health(self) -> HealthResponse:
        store = self.repository.store
        return HealthResponse(
            status="ok",
            version=config.API_VERSION,
            content_available=store.content_path.is_dir(),
            entry_count=len(store.list_identifiers()),
        )

    def get_stats(self) -> dict:
        """
        Aggregate blog statistics from a single pass over all entries.

        Reading time averages round half up. Years are listed oldest first.
        """
        entries = self.repository.load_all()
        counts = count_tags(entries)

        total_reading = 0
        years: Counter = Counter()
        for entry in entries:
            total_reading += reading_time_minutes(entry.body, config.WORDS_PER_MINUTE)
            years[str(entry.metadata.published_at.year)] += 1

        average = math.floor(total_reading / len(entries) + 0.5) if entries else 0
        top_tags = [
            TagCount(name=tag, count=counts[tag])
            for tag in rank_tags(counts, config.TOP_TAGS_LIMIT)
        ]

        data = StatsData(
            blog=BlogTotals(
                total_entries=len(entries),
                total_tags=len(counts),
                earliest_entry=entries[-1].metadata.date if entries else None,
                latest_entry=entries[0].metadata.date if entries else None,
            ),
            reading=ReadingStats(
                total_reading_minutes=total_reading,
                average_reading_time=average,
            ),
            distribution=Distribution(
                entries_by_year=dict(sorted(years.items())),
            ),
            tags=TagStats(total=len(counts), top_tags=top_tags),
        )
        return success_envelope(data)

    def get_api_index(self) -> dict:
        """Self-describing index of the public endpoints."""
        endpoints = {
            "entries": {
                "listEntries": EndpointInfo(
                    path="/entries",
                    description="All entries, newest first, with pagination",
                    query=_PAGE_QUERY,
                    example="/entries?page=1&pageSize=10",
                ),
                "recentEntries": EndpointInfo(
                    path="/entries/recent",
                    description="The most recent entries",
                    query={"limit": "Number of entries to return (default: 5, max: 50)"},
                    example="/entries/recent?limit=5",
                ),
                "getEntry": EndpointInfo(
                    path="/entries/:slug",
                    description="A single entry with its raw MDX body and reading time",
                    example="/entries/hello-world",
                ),
                "entriesByTag": EndpointInfo(
                    path="/entries/tag/:tag",
                    description="Entries with a given tag, with pagination",
                    query=_PAGE_QUERY,
                    example="/entries/tag/python?page=1&pageSize=10",
                ),
            },
            "tags": {
                "listTags": EndpointInfo(
                    path="/tags",
                    description="All tags, optionally with entry counts",
                    query={"count": 'Include entry count for each tag ("true")'},
                    example="/tags?count=true",
                ),
            },
            "stats": {
                "getStats": EndpointInfo(
                    path="/stats",
                    description="Totals, reading time, entries per year and top tags",
                    example="/stats",
                ),
            },
        }

        data = ApiIndexData(
            version=config.API_VERSION,
            name="Blogverse API",
            description="Read-only JSON access to blog entries, tags and statistics",
            base_url=f"{config.SITE_URL.rstrip('/')}{config.API_PREFIX}",
            endpoints=endpoints,
            response_format={
                "entry": {
                    "slug": "string - Entry identifier/URL slug",
                    "frontmatter": {
                        "title": "string - Entry title",
                        "date": "string - Publication date (ISO 8601)",
                        "description": "string - Short description",
                        "tags": "string[] - Tags of the entry",
                        "cover": "string (optional) - Cover image URL",
                    },
                    "excerpt": "string - Preview text (200 characters)",
                    "readingTime": "number - Estimated reading time in minutes",
                },
            },
            features=[
                "Raw MDX content for client-side rendering",
                "Reading time estimates based on word count",
                "Pagination with navigation hints",
                "Tag-based filtering",
                "HTTP caching with stale-while-revalidate",
                "Public, CORS-enabled access",
            ],
        )
        return success_envelope(data)
