"""
Content store: reads blog entries from the content directory.
"""

import logging
from pathlib import Path
from typing import Optional

from app.config import config
from app.parser import Entry, FrontmatterParser, parser

logger = logging.getLogger(__name__)


class ContentStore:
    """Lists and loads entries from a directory of content files."""

    def __init__(
        self,
        content_path: Path,
        extension: Optional[str] = None,
        md_parser: Optional[FrontmatterParser] = None,
    ):
        self.content_path = Path(content_path)
        self.extension = extension or config.CONTENT_EXTENSION
        self.parser = md_parser or parser

    def is_content_file(self, file_path: Path) -> bool:
        """Check if a path is a loadable content file."""
        return (
            file_path.is_file() and
            file_path.name.endswith(self.extension) and
            not file_path.name.startswith('.')
        )

    def list_identifiers(self) -> list[str]:
        """
        Return identifiers for every content file, in directory order.

        A missing content directory yields an empty list.
        """
        if not self.content_path.is_dir():
            logger.debug("Content directory does not exist: %s", self.content_path)
            return []

        return [
            path.name[:-len(self.extension)]
            for path in self.content_path.iterdir()
            if self.is_content_file(path)
        ]

    def entry_path(self, identifier: str) -> Optional[Path]:
        """Resolve an identifier to its file path inside the content directory."""
        if not identifier or identifier in (".", "..") or "/" in identifier or "\\" in identifier:
            return None
        return self.content_path / f"{identifier}{self.extension}"

    def load_entry(self, identifier: str) -> Optional[Entry]:
        """
        Load a single entry by identifier.

        Returns:
            The parsed Entry, or None if no such file exists. A file removed
            between the existence check and the read also gives None.

        Raises:
            yaml.YAMLError: If the front matter is not valid YAML.
            EntryFormatError: If the front matter is missing required fields.
        """
        file_path = self.entry_path(identifier)
        if file_path is None or not file_path.is_file():
            return None

        try:
            return self.parser.parse_file(file_path, identifier)
        except FileNotFoundError:
            return None
