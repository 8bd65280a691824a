"""Filename sanitization and timestamp helpers for exports."""

import re
from datetime import datetime, timezone
from typing import Optional

try:
    from ..config import (
        UNSAFE_FILENAME_CHARS,
        FILENAME_REPLACEMENT,
        DEFAULT_EXPORT_EXTENSION,
    )
except ImportError:
    from config import (
        UNSAFE_FILENAME_CHARS,
        FILENAME_REPLACEMENT,
        DEFAULT_EXPORT_EXTENSION,
    )


def sanitize_filename(filename: str) -> str:
    """Make a string safe to use as a filename.

    Unsafe characters become '_', whitespace runs collapse to a single '_',
    then the result is lowercased. The passes always run in that order.

    Args:
        filename: Raw name, e.g. a library title

    Returns:
        Sanitized name like 'my_file__1_.mp4'
    """
    result = re.sub(UNSAFE_FILENAME_CHARS, FILENAME_REPLACEMENT, filename)
    result = re.sub(r'\s+', FILENAME_REPLACEMENT, result)
    return result.lower()


def get_timestamp_string(now: Optional[datetime] = None) -> str:
    """Get the current UTC date as 'YYYY-MM-DD'.

    Args:
        now: Instant to render instead of the current time. A naive
            datetime is taken to be UTC already.

    Returns:
        Date string like '2024-12-01'
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    iso = now.astimezone(timezone.utc).isoformat(timespec='milliseconds')
    iso = iso.replace('+00:00', 'Z')
    return re.sub(r'[:.]', '-', iso).split('T')[0]


def build_export_filename(prefix: str, extension: str = DEFAULT_EXPORT_EXTENSION,
                          now: Optional[datetime] = None) -> str:
    """Build a dated export filename like 'size-analysis-2024-12-01.csv'."""
    extension = extension.lstrip('.')
    return f"{sanitize_filename(prefix)}-{get_timestamp_string(now)}.{extension}"
