"""
Front matter parser for blog entries.
Splits an .mdx file into its YAML metadata header and the raw body.
"""

import re
from pathlib import Path
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional

import yaml


class EntryFormatError(Exception):
    """Raised when a content file has a missing or invalid metadata header."""

    def __init__(self, identifier: str, reason: str):
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Invalid entry '{identifier}': {reason}")


@dataclass
class EntryMetadata:
    """Descriptive attributes from an entry's front matter."""
    title: str
    date: str  # Publish date as written, ISO-8601
    published_at: datetime  # Parsed publish date, naive UTC
    description: str
    tags: list[str] = field(default_factory=list)
    cover: Optional[str] = None


@dataclass
class EntrySummary:
    """An entry without its body, as returned by listings."""
    identifier: str
    metadata: EntryMetadata


@dataclass
class Entry:
    """A single piece of published content."""
    identifier: str
    metadata: EntryMetadata
    body: str  # Raw markup, never pre-rendered

    def summary(self) -> EntrySummary:
        return EntrySummary(identifier=self.identifier, metadata=self.metadata)


class FrontmatterParser:
    """Parser for `---` delimited YAML headers."""

    FRONTMATTER_PATTERN = re.compile(
        r'\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)',
        re.DOTALL | re.MULTILINE,
    )

    def parse_file(self, file_path: Path, identifier: Optional[str] = None) -> Entry:
        """Parse a content file. The identifier defaults to the file stem."""
        content = file_path.read_text(encoding="utf-8")
        return self.parse_content(content, identifier or file_path.stem)

    def parse_content(self, content: str, identifier: str) -> Entry:
        """
        Parse raw file text into an Entry.

        Raises:
            yaml.YAMLError: If the header is not valid YAML.
            EntryFormatError: If the header is missing or lacks required fields.
        """
        content = content.lstrip("\ufeff")
        match = self.FRONTMATTER_PATTERN.match(content)
        if not match:
            raise EntryFormatError(identifier, "missing front matter header")

        data = yaml.safe_load(match.group(1)) or {}
        if not isinstance(data, dict):
            raise EntryFormatError(identifier, "front matter must be a mapping")

        metadata = self._build_metadata(data, identifier)
        return Entry(
            identifier=identifier,
            metadata=metadata,
            body=content[match.end():],
        )

    def _build_metadata(self, data: dict, identifier: str) -> EntryMetadata:
        for key in ("title", "date", "description"):
            if data.get(key) is None:
                raise EntryFormatError(identifier, f"missing required field '{key}'")

        date_text, published_at = self._parse_date(data["date"], identifier)
        cover = data.get("cover")

        return EntryMetadata(
            title=str(data["title"]),
            date=date_text,
            published_at=published_at,
            description=str(data["description"]),
            tags=self._parse_tags(data.get("tags"), identifier),
            cover=str(cover) if cover else None,
        )

    def _parse_date(self, value, identifier: str) -> tuple[str, datetime]:
        """Return the date as ISO text plus a comparable naive UTC datetime."""
        if isinstance(value, datetime):
            text, parsed = value.isoformat(), value
        elif isinstance(value, date):
            text = value.isoformat()
            parsed = datetime(value.year, value.month, value.day)
        elif isinstance(value, str):
            text = value.strip()
            try:
                parsed = datetime.fromisoformat(text)
            except ValueError:
                raise EntryFormatError(identifier, f"unparseable date '{value}'")
        else:
            raise EntryFormatError(identifier, f"unparseable date '{value}'")

        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        return text, parsed

    def _parse_tags(self, value, identifier: str) -> list[str]:
        """Tags keep their order and duplicates."""
        if value is None:
            return []
        if isinstance(value, str):
            # Comma-separated tags
            return [tag.strip() for tag in value.split(",") if tag.strip()]
        if not isinstance(value, list):
            raise EntryFormatError(identifier, "tags must be a list")
        return [str(tag) for tag in value if tag is not None]


# Singleton parser instance
parser = FrontmatterParser()
