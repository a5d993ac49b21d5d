"""
Entry-related API models: listings, single entries, pagination.
"""

from typing import Optional

from app.api.models.common import CamelModel


class EntryFrontmatter(CamelModel):
    """Front matter as exposed on the wire."""
    title: str
    date: str
    description: str
    tags: list[str] = []
    cover: Optional[str] = None


class EntryListItem(CamelModel):
    """An entry in a listing, enriched with display fields."""
    slug: str
    frontmatter: EntryFrontmatter
    excerpt: str
    reading_time: int


class PaginationInfo(CamelModel):
    """Navigation block for paginated listings."""
    current_page: int
    page_size: int
    total_pages: int
    total_entries: int
    has_next_page: bool
    has_previous_page: bool


class EntryListData(CamelModel):
    """Payload for GET /entries."""
    entries: list[EntryListItem]
    pagination: PaginationInfo


class TagEntryListData(EntryListData):
    """Payload for GET /entries/tag/{tag}."""
    tag: str


class EntryContent(CamelModel):
    """Raw body plus reading time."""
    mdx: str
    reading_time: int


class EntryDetail(CamelModel):
    """Payload for GET /entries/{id}."""
    slug: str
    frontmatter: EntryFrontmatter
    content: EntryContent
