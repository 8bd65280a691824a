"""CLI input validation utilities."""

from typing import Optional, Tuple, Union

try:
    from ..utils import require_non_negative
except ImportError:
    from utils import require_non_negative

Number = Union[int, float]


def validate_number_argument(name: str, text: str) -> Tuple[bool, Optional[Number], Optional[str]]:
    """Validate a numeric command-line argument.

    Integral values come back as int so '1024' and '1024.0' format the same
    way as the integer 1024.

    Args:
        name: Argument name used in error messages
        text: Raw argument text (e.g., '1536', '2.5e6')

    Returns:
        Tuple of (is_valid, value, error_message)
    """
    text = text.strip()
    try:
        value = int(text)
    except ValueError:
        try:
            value = float(text)
        except ValueError:
            return False, None, f"{name} must be a number, got {text!r}"

    try:
        require_non_negative(name, value)
    except ValueError as e:
        return False, None, str(e)

    if isinstance(value, float) and value.is_integer():
        return True, int(value), None
    return True, value, None


def validate_extension(extension: str) -> Tuple[bool, Optional[str]]:
    """Validate an export file extension.

    Args:
        extension: Extension with or without the leading dot

    Returns:
        Tuple of (is_valid, error_message)
    """
    cleaned = extension.lstrip('.')
    if not cleaned:
        return False, "Extension must not be empty"
    if not cleaned.isalnum():
        return False, f"Extension must be alphanumeric, got {extension!r}"
    return True, None
