"""
Common API dependencies: content repository and services per request.
"""

from fastapi import Depends

from app.config import config
from app.content_store import ContentStore
from app.repository import ContentRepository
from app.services.entry_service import EntryService
from app.services.system_service import SystemService


def get_repository() -> ContentRepository:
    """Repository over the configured content directory."""
    return ContentRepository(ContentStore(config.CONTENT_PATH, config.CONTENT_EXTENSION))


def get_entry_service(repository: ContentRepository = Depends(get_repository)) -> EntryService:
    return EntryService(repository)


def get_system_service(repository: ContentRepository = Depends(get_repository)) -> SystemService:
    return SystemService(repository)
