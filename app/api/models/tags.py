"""
Tag API models.
"""

from typing import Union

from app.api.models.common import CamelModel


class TagCount(CamelModel):
    """A tag with the number of entries using it."""
    name: str
    count: int


class TagListData(CamelModel):
    """Payload for GET /tags."""
    tags: Union[list[TagCount], list[str]]
    total: int
