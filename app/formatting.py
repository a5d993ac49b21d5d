"""
Response formatting: envelopes, HTTP headers and derived entry fields.
"""

import math
import re
from datetime import datetime, timezone
from typing import Any, Optional

WORDS_PER_MINUTE = 200

_MARKUP_CHARS = re.compile(r'[#*_`\[\]()]')
_NEWLINES = re.compile(r'\n+')


def reading_time_minutes(body: str, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Estimated minutes to read body, never less than one."""
    word_count = len(body.split())
    return max(math.ceil(word_count / words_per_minute), 1)


def excerpt(body: str, max_length: int = 200) -> str:
    """
    Short plain-ish preview of body.

    This is a crude character strip, not a markup parser.
    """
    clean = _MARKUP_CHARS.sub('', body)
    clean = _NEWLINES.sub(' ', clean).strip()
    if len(clean) > max_length:
        return clean[:max_length] + '...'
    return clean


def utc_timestamp() -> str:
    """Current time as ISO-8601 with millisecond precision, e.g. 2024-01-01T00:00:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def success_envelope(data: Any, message: Optional[str] = None) -> dict:
    response = {"success": True, "data": data}
    if message:
        response["message"] = message
    response["timestamp"] = utc_timestamp()
    return response


def error_envelope(code: int, message: str, details: Optional[Any] = None) -> dict:
    error = {"code": code, "message": message}
    if details:
        error["details"] = details
    return {"success": False, "error": error, "timestamp": utc_timestamp()}


def cache_headers(max_age: int = 3600) -> dict[str, str]:
    """Public caching with a week of stale-while-revalidate."""
    value = f"public, max-age={max_age}, s-maxage={max_age}, stale-while-revalidate=604800"
    return {
        "Cache-Control": value,
        "CDN-Cache-Control": value,
    }


def cors_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "GET, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
        "Access-Control-Max-Age": "86400",
    }


def safe_error_detail(exc: BaseException) -> str:
    """Describe an exception without exposing file system paths."""
    if isinstance(exc, OSError):
        return exc.strerror or exc.__class__.__name__
    return str(exc) or exc.__class__.__name__
