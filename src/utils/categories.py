"""Resolution parsing and quality/size bucketing."""

import re
from dataclasses import dataclass
from typing import Optional

try:
    from .formatting import require_non_negative
    from ..config import (
        BYTES_PER_GIGABYTE,
        QUALITY_THRESHOLDS,
        QUALITY_FALLBACK,
        QUALITY_UNKNOWN,
        SIZE_THRESHOLDS,
        SIZE_FALLBACK,
    )
except ImportError:
    from utils.formatting import require_non_negative
    from config import (
        BYTES_PER_GIGABYTE,
        QUALITY_THRESHOLDS,
        QUALITY_FALLBACK,
        QUALITY_UNKNOWN,
        SIZE_THRESHOLDS,
        SIZE_FALLBACK,
    )

RESOLUTION_PATTERN = re.compile(r'([0-9]+)x([0-9]+)')


@dataclass(frozen=True)
class Resolution:
    """Frame dimensions in pixels."""
    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


def parse_resolution(text: Optional[str]) -> Optional[Resolution]:
    """Extract the first WIDTHxHEIGHT pair from a string.

    Accepts labels like '1920x1080' or 'Movie (3840x2160 HDR)'. The
    separator is a lowercase 'x' only.

    Args:
        text: Any string, or None

    Returns:
        Resolution, or None if nothing matches
    """
    if not isinstance(text, str):
        return None

    match = RESOLUTION_PATTERN.search(text)
    if not match:
        return None
    try:
        return Resolution(width=int(match.group(1)), height=int(match.group(2)))
    except ValueError:
        # Digit run past the interpreter's int conversion limit
        return None


def get_quality_category(resolution: Optional[str]) -> str:
    """Classify a resolution string by frame height.

    Returns:
        '4K', '1080p', '720p', '480p', 'SD', or 'Unknown' if unparseable
    """
    parsed = parse_resolution(resolution)
    if parsed is None:
        return QUALITY_UNKNOWN

    for min_height, label in QUALITY_THRESHOLDS:
        if parsed.height >= min_height:
            return label
    return QUALITY_FALLBACK


def get_size_category(size_bytes) -> str:
    """Classify a file size into a gigabyte bucket."""
    require_non_negative('bytes', size_bytes)
    gigabytes = size_bytes / BYTES_PER_GIGABYTE

    for min_gigabytes, label in SIZE_THRESHOLDS:
        if gigabytes >= min_gigabytes:
            return label
    return SIZE_FALLBACK
