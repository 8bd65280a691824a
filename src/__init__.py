"""Media Format.

Display formatting helpers for a media library UI: byte sizes, durations,
bitrates, resolution and size categories, export filenames.
"""

__version__ = "1.0.0"

from .utils import (
    Resolution,
    format_bytes,
    format_duration,
    format_bitrate,
    parse_resolution,
    get_quality_category,
    get_size_category,
    calculate_percentage,
    sanitize_filename,
    get_timestamp_string,
    build_export_filename,
)
from .config import (
    BYTE_UNITS,
    DEFAULT_BYTES_DECIMALS,
    DEFAULT_PERCENT_DECIMALS,
)

__all__ = [
    # Formatting
    'format_bytes',
    'format_duration',
    'format_bitrate',
    'calculate_percentage',
    # Classification
    'Resolution',
    'parse_resolution',
    'get_quality_category',
    'get_size_category',
    # Filenames
    'sanitize_filename',
    'get_timestamp_string',
    'build_export_filename',
    # Config
    'BYTE_UNITS',
    'DEFAULT_BYTES_DECIMALS',
    'DEFAULT_PERCENT_DECIMALS',
]
