"""Display formatting utilities for sizes, durations, bitrates and percentages."""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Union

try:
    from ..config import (
        BYTES_PER_KILOBYTE,
        BYTE_UNITS,
        ZERO_BYTES,
        DEFAULT_BYTES_DECIMALS,
        DEFAULT_PERCENT_DECIMALS,
        MBPS_DECIMALS,
        KBPS_DECIMALS,
        MBPS_THRESHOLD,
        KBPS_THRESHOLD,
    )
except ImportError:
    from config import (
        BYTES_PER_KILOBYTE,
        BYTE_UNITS,
        ZERO_BYTES,
        DEFAULT_BYTES_DECIMALS,
        DEFAULT_PERCENT_DECIMALS,
        MBPS_DECIMALS,
        KBPS_DECIMALS,
        MBPS_THRESHOLD,
        KBPS_THRESHOLD,
    )

Number = Union[int, float]


def require_non_negative(name: str, value: Number) -> Number:
    """Validate a numeric input.

    Args:
        name: Argument name used in the error message
        value: Value to check

    Returns:
        The value unchanged

    Raises:
        ValueError: If value is not a finite, non-negative number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if isinstance(value, int):
        try:
            float(value)
        except OverflowError:
            raise ValueError(f"{name} is too large to format") from None
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"{name} must be a finite number, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value!r}")
    return value


def round_half_up(value: Number, decimals: int = 0) -> Decimal:
    """Round to fixed decimal places, halves away from zero.

    Rounds the shortest decimal form of the value, so 1.005 becomes 1.01
    and 1.5 becomes 2 (unlike the built-in round()).

    Args:
        value: Number to round
        decimals: Decimal places, negative values are treated as 0

    Returns:
        Rounded Decimal with exactly `decimals` places
    """
    places = max(0, int(decimals))
    number = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-places)
    # Enough digits for the integer part plus every requested place
    with localcontext() as context:
        context.prec = max(context.prec, number.adjusted() + places + 2)
        return number.quantize(quantum, rounding=ROUND_HALF_UP)


def format_number(value: Union[Number, Decimal]) -> str:
    """Render a number without trailing zeros or exponent.

    Returns:
        String like '1.5', '100', '0.25'
    """
    if not isinstance(value, Decimal):
        value = Decimal(repr(value))
    return format(value.normalize(), 'f')


def format_bytes(size_bytes: Number, decimals: int = DEFAULT_BYTES_DECIMALS) -> str:
    """Format byte count in human-readable format.

    Args:
        size_bytes: Size in bytes
        decimals: Maximum decimal places, trailing zeros are dropped

    Returns:
        Formatted string like '0 Bytes', '1 KB', '1.5 MB'
    """
    require_non_negative('bytes', size_bytes)
    if size_bytes == 0:
        return ZERO_BYTES

    last = len(BYTE_UNITS) - 1
    index = math.floor(math.log(size_bytes) / math.log(BYTES_PER_KILOBYTE))
    # log() can land just under an exact power of 1024
    if index + 1 <= last and size_bytes >= BYTES_PER_KILOBYTE ** (index + 1):
        index += 1
    index = min(max(index, 0), last)

    value = round_half_up(size_bytes / BYTES_PER_KILOBYTE ** index, decimals)
    return f"{format_number(value)} {BYTE_UNITS[index]}"


def format_duration(milliseconds: Number) -> str:
    """Format a duration using its two most significant units.

    Args:
        milliseconds: Duration in milliseconds

    Returns:
        Formatted string like '1h 1m', '1m 5s', '42s'
    """
    require_non_negative('milliseconds', milliseconds)
    seconds = int(milliseconds // 1000)
    minutes = seconds // 60
    hours = minutes // 60

    if hours > 0:
        return f"{hours}h {minutes % 60}m"
    elif minutes > 0:
        return f"{minutes}m {seconds % 60}s"
    else:
        return f"{seconds}s"


def format_bitrate(bitrate: Number) -> str:
    """Format bitrate in human-readable format.

    Args:
        bitrate: Bits per second

    Returns:
        Formatted string like '2.5 Mbps', '128 Kbps', '500 bps'
    """
    require_non_negative('bitrate', bitrate)
    if bitrate >= MBPS_THRESHOLD:
        return f"{round_half_up(bitrate / MBPS_THRESHOLD, MBPS_DECIMALS)} Mbps"
    elif bitrate >= KBPS_THRESHOLD:
        return f"{round_half_up(bitrate / KBPS_THRESHOLD, KBPS_DECIMALS)} Kbps"
    else:
        return f"{format_number(bitrate)} bps"


def calculate_percentage(value: Number, total: Number,
                         decimals: int = DEFAULT_PERCENT_DECIMALS) -> float:
    """Calculate value as a percentage of total.

    Returns 0.0 when total is zero.
    """
    require_non_negative('value', value)
    require_non_negative('total', total)
    if total == 0:
        return 0.0
    percentage = value / total * 100
    if math.isinf(percentage):
        raise ValueError(f"percentage of {value!r} over {total!r} is too large to format")
    return float(round_half_up(percentage, decimals))
