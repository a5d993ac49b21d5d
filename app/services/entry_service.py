"""
Entry service: listings, single entries, tag filtering and tag lists.
"""

import logging

from app.config import config
from app.errors import NotFoundError
from app.formatting import excerpt, reading_time_minutes, success_envelope
from app.pagination import QueryValue, paginate, parse_limit, window_of, PaginationWindow
from app.parser import EntryMetadata, EntrySummary
from app.repository import ContentRepository, count_tags
from app.api.models.entries import (
    EntryFrontmatter,
    EntryListItem,
    PaginationInfo,
    EntryListData,
    TagEntryListData,
    EntryContent,
    EntryDetail,
)
from app.api.models.tags import TagCount, TagListData

logger = logging.getLogger(__name__)


def build_frontmatter(metadata: EntryMetadata) -> EntryFrontmatter:
    """Wire form of an entry's metadata."""
    return EntryFrontmatter(
        title=metadata.title,
        date=metadata.date,
        description=metadata.description,
        tags=list(metadata.tags),
        cover=metadata.cover,
    )


def build_pagination(window: PaginationWindow) -> PaginationInfo:
    return PaginationInfo(
        current_page=window.current_page,
        page_size=window.page_size,
        total_pages=window.total_pages,
        total_entries=window.total_items,
        has_next_page=window.has_next_page,
        has_previous_page=window.has_previous_page,
    )


class EntryService:
    """Turns repository views into API payloads."""

    def __init__(self, repository: ContentRepository):
        self.repository = repository

    def list_entries(self, page: QueryValue = None, page_size: QueryValue = None) -> dict:
        """
        One page of all entries, newest first.

        Raises:
            InvalidPageError: If the page is beyond the last page.
        """
        page_num, size = paginate(page, page_size, config.DEFAULT_PAGE_SIZE, config.MAX_PAGE_SIZE)
        window = window_of(self.repository.list_all(), page_num, size)
        items = [self.enrich(summary) for summary in window.items]

        return success_envelope(
            EntryListData(entries=items, pagination=build_pagination(window)),
            f"Retrieved {len(items)} entries from page {page_num}",
        )

    def recent_entries(self, limit: QueryValue = None) -> dict:
        """The newest entries, limit defaulting to 5 and capped at 50."""
        count = parse_limit(limit, config.RECENT_DEFAULT_LIMIT, config.RECENT_MAX_LIMIT)
        items = [self.enrich(summary) for summary in self.repository.list_recent(count)]
        return success_envelope(items, f"Retrieved {len(items)} recent entries")

    def get_entry(self, identifier: str) -> dict:
        """
        A single entry with its raw body.

        Raises:
            NotFoundError: If no entry has this identifier.
        """
        entry = self.repository.get_by_identifier(identifier)
        if entry is None:
            raise NotFoundError(f'Entry "{identifier}" not found')

        detail = EntryDetail(
            slug=entry.identifier,
            frontmatter=build_frontmatter(entry.metadata),
            content=EntryContent(
                mdx=entry.body,
                reading_time=reading_time_minutes(entry.body, config.WORDS_PER_MINUTE),
            ),
        )
        return success_envelope(detail, f"Retrieved full entry: {entry.metadata.title}")

    def entries_by_tag(
        self,
        tag_param: str,
        page: QueryValue = None,
        page_size: QueryValue = None,
    ) -> dict:
        """
        One page of the entries carrying a tag.

        The tag is matched through its URL slug, so case and spacing in the
        path segment do not matter.

        Raises:
            NotFoundError: If no entry carries the tag.
            InvalidPageError: If the page is beyond the last page.
        """
        tag = self.repository.resolve_tag(tag_param)
        summaries = self.repository.list_by_tag(tag)

        if not summaries:
            raise NotFoundError(f'Tag "{tag}" does not exist')

        page_num, size = paginate(page, page_size, config.DEFAULT_PAGE_SIZE, config.MAX_PAGE_SIZE)
        window = window_of(summaries, page_num, size, context=f' for tag "{tag}"')
        items = [self.enrich(summary) for summary in window.items]

        return success_envelope(
            TagEntryListData(tag=tag, entries=items, pagination=build_pagination(window)),
            f'Retrieved {len(items)} entries with tag "{tag}" from page {page_num}',
        )

    def list_tags(self, include_count: bool = False) -> dict:
        """All distinct tags, optionally with the number of entries using each."""
        summaries = self.repository.list_all()
        counts = count_tags(summaries)
        tags = sorted(counts)

        if include_count:
            data = TagListData(
                tags=[TagCount(name=tag, count=counts[tag]) for tag in tags],
                total=len(tags),
            )
        else:
            data = TagListData(tags=tags, total=len(tags))

        return success_envelope(data, f"Retrieved {len(tags)} tags")

    def enrich(self, summary: EntrySummary) -> EntryListItem:
        """Add excerpt and reading time, re-reading the body from disk."""
        entry = self.repository.get_by_identifier(summary.identifier)
        if entry is None:
            # Removed between listing and enrichment
            logger.info("Entry vanished during listing: %s", summary.identifier)
            preview = summary.metadata.description
            minutes = 0
        else:
            preview = excerpt(entry.body, config.EXCERPT_LENGTH)
            minutes = reading_time_minutes(entry.body, config.WORDS_PER_MINUTE)

        return EntryListItem(
            slug=summary.identifier,
            frontmatter=build_frontmatter(summary.metadata),
            excerpt=preview,
            reading_time=minutes,
        )
