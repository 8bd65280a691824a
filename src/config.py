"""Configuration constants for media-format."""

# Byte sizes
BYTES_PER_KILOBYTE = 1024
BYTES_PER_GIGABYTE = BYTES_PER_KILOBYTE ** 3
BYTE_UNITS = ['Bytes', 'KB', 'MB', 'GB', 'TB', 'PB']
ZERO_BYTES = '0 Bytes'

# Default decimal places
DEFAULT_BYTES_DECIMALS = 2
DEFAULT_PERCENT_DECIMALS = 1
MBPS_DECIMALS = 1
KBPS_DECIMALS = 0

# Bitrate thresholds (bits per second)
MBPS_THRESHOLD = 1_000_000
KBPS_THRESHOLD = 1_000

# Quality buckets: (minimum height, label), checked top-down
QUALITY_THRESHOLDS = [
    (2160, '4K'),
    (1080, '1080p'),
    (720, '720p'),
    (480, '480p'),
]
QUALITY_FALLBACK = 'SD'
QUALITY_UNKNOWN = 'Unknown'

# Size buckets: (minimum gigabytes, label), checked top-down
SIZE_THRESHOLDS = [
    (50, 'Very Large (50GB+)'),
    (20, 'Large (20-50GB)'),
    (5, 'Medium (5-20GB)'),
    (1, 'Small (1-5GB)'),
]
SIZE_FALLBACK = 'Very Small (<1GB)'

# Filenames
UNSAFE_FILENAME_CHARS = r'[<>:"/\\|?*]'
FILENAME_REPLACEMENT = '_'
DEFAULT_EXPORT_EXTENSION = 'csv'

# Environment overrides read by the CLI
ENV_BYTES_DECIMALS = 'MEDIA_FORMAT_DECIMALS'
ENV_PERCENT_DECIMALS = 'MEDIA_FORMAT_PERCENT_DECIMALS'
