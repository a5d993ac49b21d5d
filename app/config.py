"""
Configuration module for the Blogverse content API.
Loads settings from environment variables or .env file.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root (parent of app/ directory)
_project_root = Path(__file__).parent.parent
_env_path = _project_root / ".env"
load_dotenv(_env_path)


class Config:
    """Application configuration."""

    # Directory holding one .mdx file per entry
    CONTENT_PATH: Path = Path(os.getenv("CONTENT_PATH", str(_project_root / "content" / "blog")))
    CONTENT_EXTENSION: str = os.getenv("CONTENT_EXTENSION", ".mdx")

    # API settings
    API_HOST: str = os.getenv("API_HOST", "127.0.0.1")
    API_PORT: int = int(os.getenv("API_PORT", "8000"))
    API_PREFIX: str = os.getenv("API_PREFIX", "/api/v1")
    API_VERSION: str = "1.0.0"
    SITE_URL: str = os.getenv("SITE_URL", "https://blogverse-five-omega.vercel.app")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Pagination
    DEFAULT_PAGE_SIZE: int = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
    MAX_PAGE_SIZE: int = int(os.getenv("MAX_PAGE_SIZE", "100"))
    RECENT_DEFAULT_LIMIT: int = int(os.getenv("RECENT_DEFAULT_LIMIT", "5"))
    RECENT_MAX_LIMIT: int = int(os.getenv("RECENT_MAX_LIMIT", "50"))

    # Derived display fields
    WORDS_PER_MINUTE: int = int(os.getenv("WORDS_PER_MINUTE", "200"))
    EXCERPT_LENGTH: int = int(os.getenv("EXCERPT_LENGTH", "200"))
    TOP_TAGS_LIMIT: int = 10

    # Cache max-age per route family, in seconds
    CACHE_LIST_SECONDS: int = 3600
    CACHE_RECENT_SECONDS: int = 1800
    CACHE_ENTRY_SECONDS: int = 86400
    CACHE_TAGS_SECONDS: int = 7200
    CACHE_STATS_SECONDS: int = 7200

    @classmethod
    def validate(cls) -> None:
        """Validate the content directory setting."""
        if not cls.CONTENT_EXTENSION.startswith("."):
            raise ValueError(
                f"CONTENT_EXTENSION must start with a dot. "
                f"Current value: {cls.CONTENT_EXTENSION}"
            )
        if cls.CONTENT_PATH.exists() and not cls.CONTENT_PATH.is_dir():
            raise ValueError(f"CONTENT_PATH must be a directory: {cls.CONTENT_PATH}")


# Singleton config instance
config = Config()
