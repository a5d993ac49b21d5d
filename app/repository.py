"""
Content repository: derived, read-only views over all blog entries.

Every call re-reads the content directory, so a file added or edited on disk
is visible on the next call.
"""

import logging
import re
from typing import Iterable, Optional, Union

import yaml

from app.content_store import ContentStore
from app.parser import Entry, EntryFormatError, EntrySummary

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r'\s+')


def tag_slug(tag: str) -> str:
    """URL form of a tag: lowercase, whitespace runs replaced by '-'."""
    return _WHITESPACE_RUN.sub('-', tag.lower())


def count_tags(summaries: Iterable[Union[Entry, EntrySummary]]) -> dict[str, int]:
    """Number of entries using each tag, in first-seen order."""
    counts: dict[str, int] = {}
    for summary in summaries:
        # Duplicates within one entry count once
        for tag in dict.fromkeys(summary.metadata.tags):
            counts[tag] = counts.get(tag, 0) + 1
    return counts


def rank_tags(counts: dict[str, int], n: int) -> list[str]:
    """Most used tags first; equal counts keep the order of counts."""
    ranked = sorted(counts, key=lambda tag: counts[tag], reverse=True)
    return ranked[:max(n, 0)]


class ContentRepository:
    """Builds sorted, filtered views of the entries in a ContentStore."""

    def __init__(self, store: ContentStore):
        self.store = store

    def load_all(self) -> list[Entry]:
        """
        Load every entry, newest first.

        Entries that fail to load are logged and dropped so a single corrupt
        file does not take down the listing.
        """
        entries = []
        for identifier in self.store.list_identifiers():
            try:
                entry = self.store.load_entry(identifier)
            except (yaml.YAMLError, EntryFormatError, OSError, UnicodeDecodeError) as e:
                logger.warning("Skipping entry %s: %s", identifier, e)
                continue
            if entry is not None:
                entries.append(entry)

        entries.sort(key=lambda entry: entry.metadata.published_at, reverse=True)
        return entries

    def list_all(self) -> list[EntrySummary]:
        """All entries without bodies, newest first."""
        return [entry.summary() for entry in self.load_all()]

    def get_by_identifier(self, identifier: str) -> Optional[Entry]:
        """Load one entry straight from the store."""
        return self.store.load_entry(identifier)

    def list_all_tags(self) -> list[str]:
        """Distinct tags across all entries, sorted by code point."""
        tags = set()
        for summary in self.list_all():
            tags.update(summary.metadata.tags)
        return sorted(tags)

    def tag_counts(self) -> dict[str, int]:
        """Number of entries using each tag, in first-seen order."""
        return count_tags(self.list_all())

    def get_top_tags(self, n: int) -> list[str]:
        """Most used tags first; equal counts keep first-seen order."""
        return rank_tags(self.tag_counts(), n)

    def list_by_tag(self, tag: str) -> list[EntrySummary]:
        """Entries whose tags contain an exact, case-sensitive match."""
        return [s for s in self.list_all() if tag in s.metadata.tags]

    def list_recent(self, n: int) -> list[EntrySummary]:
        """The n newest entries."""
        return self.list_all()[:max(n, 0)]

    def resolve_tag(self, tag_param: str) -> str:
        """
        Map a URL tag segment to a known tag.

        Matching compares slugs, so "machine-learning" and "Machine Learning"
        both resolve to a stored "Machine Learning". Unknown tags come back
        unchanged.
        """
        wanted = tag_slug(tag_param)
        for tag in self.list_all_tags():
            if tag_slug(tag) == wanted:
                return tag
        return tag_param
