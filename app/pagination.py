"""
Pagination helpers: query parameter sanitizing and page windows.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Optional, Sequence, TypeVar, Union

from app.errors import InvalidRequestError

T = TypeVar("T")

# Leading integer, the way query strings like "3" or "3abc" are read
_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')

QueryValue = Optional[Union[str, int]]


class InvalidPageError(InvalidRequestError):
    """Requested page lies beyond the last page of a non-empty collection."""

    def __init__(self, page: int, total_pages: int, context: str = ""):
        self.page = page
        self.total_pages = total_pages
        super().__init__(f"Page {page} does not exist{context}. Total pages: {total_pages}")


@dataclass
class PaginationWindow:
    """One page of a collection plus navigation hints."""
    current_page: int
    page_size: int
    total_pages: int
    total_items: int
    has_next_page: bool
    has_previous_page: bool
    items: list = field(default_factory=list)


def _parse_int(value: QueryValue) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def parse_limit(value: QueryValue, default: int, maximum: int) -> int:
    """Read a positive limit no larger than maximum, else the default."""
    parsed = _parse_int(value)
    if parsed is None or parsed <= 0 or parsed > maximum:
        return default
    return parsed


def paginate(
    page: QueryValue,
    page_size: QueryValue,
    default_page_size: int = 10,
    max_page_size: int = 100,
) -> tuple[int, int]:
    """
    Sanitize page and page size query values.

    Never raises: absent, non-numeric or out-of-range values fall back to
    page 1 and the default page size.
    """
    parsed_page = _parse_int(page)
    if parsed_page is None or parsed_page < 1:
        parsed_page = 1
    return parsed_page, parse_limit(page_size, default_page_size, max_page_size)


def window_of(items: Sequence[T], page: int, page_size: int, context: str = "") -> PaginationWindow:
    """
    Slice one page out of items.

    An empty collection has zero pages and yields an empty window.

    Raises:
        InvalidPageError: If page is past the last page of a non-empty collection.
    """
    total_items = len(items)
    total_pages = math.ceil(total_items / page_size)

    if total_items > 0 and page > total_pages:
        raise InvalidPageError(page, total_pages, context)

    start = (page - 1) * page_size
    return PaginationWindow(
        current_page=page,
        page_size=page_size,
        total_pages=total_pages,
        total_items=total_items,
        has_next_page=page < total_pages,
        has_previous_page=page > 1,
        items=list(items[start:start + page_size]),
    )
