"""Shared utilities for media-format."""

from .formatting import (
    require_non_negative,
    round_half_up,
    format_number,
    format_bytes,
    format_duration,
    format_bitrate,
    calculate_percentage,
)
from .categories import (
    Resolution,
    parse_resolution,
    get_quality_category,
    get_size_category,
)
from .filenames import sanitize_filename, get_timestamp_string, build_export_filename

__all__ = [
    'require_non_negative',
    'round_half_up',
    'format_number',
    'format_bytes',
    'format_duration',
    'format_bitrate',
    'calculate_percentage',
    'Resolution',
    'parse_resolution',
    'get_quality_category',
    'get_size_category',
    'sanitize_filename',
    'get_timestamp_string',
    'build_export_filename',
]
