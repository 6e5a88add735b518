"""
Input validation utilities for Passforge.

The generator trusts its configuration; the command line and the menu use
these checks before handing values to it.
"""

from typing import Optional

MIN_LENGTH = 4
MAX_LENGTH = 128
MAX_MINIMUM = 10
MAX_BATCH = 20
MAX_EXPORT = 50


def validate_length(length: int) -> bool:
    """
    Validate a password length.

    Args:
        length: Requested password length

    Returns:
        True if length is within 4-128, False otherwise
    """
    if not isinstance(length, int) or isinstance(length, bool):
        return False

    return MIN_LENGTH <= length <= MAX_LENGTH


def validate_minimum(value: int, length: int) -> bool:
    """
    Validate a minimum special/digit count against the password length.

    Args:
        value: Requested minimum
        length: Configured password length

    Returns:
        True if value is within 0-10 and not larger than length
    """
    if not isinstance(value, int) or isinstance(value, bool):
        return False

    return 0 <= value <= MAX_MINIMUM and value <= length


def validate_minimums(min_special: int, min_digits: int, length: int) -> bool:
    """
    Validate the combined minimum counts against the password length.

    Args:
        min_special: Requested minimum special characters
        min_digits: Requested minimum digits
        length: Configured password length

    Returns:
        True if both minimums together fit in the password
    """
    return min_special + min_digits <= length


def validate_count(count: int, maximum: int = MAX_BATCH) -> bool:
    """
    Validate how many passwords to generate at once.

    Args:
        count: Requested number of passwords
        maximum: Upper bound (20 for display, 50 for export)

    Returns:
        True if count is within 1-maximum
    """
    if not isinstance(count, int) or isinstance(count, bool):
        return False

    return 1 <= count <= maximum


def parse_int(text: str) -> Optional[int]:
    """Parse user input as an integer, None if it is not one."""
    try:
        return int(text.strip())
    except (ValueError, AttributeError):
        return None


def get_validation_error_message(field: str, value: object, length: int = MAX_LENGTH) -> str:
    """
    Get a descriptive error message for an invalid setting.

    Args:
        field: "length", "min_special", "min_digits", "minimums", "count"
            or "export_count"
        value: The rejected value
        length: Current password length, used for the minimum checks

    Returns:
        Error message describing why the value is invalid
    """
    if not isinstance(value, int) or isinstance(value, bool):
        return "Value must be a whole number"

    if field == "length":
        return f"Length must be between {MIN_LENGTH} and {MAX_LENGTH} characters"

    if field == "minimums":
        return f"Minimum special characters and digits together cannot exceed the password length ({length})"

    if field in ("min_special", "min_digits"):
        if value > length:
            return f"Minimum cannot exceed the password length ({length})"
        return f"Minimum must be between 0 and {MAX_MINIMUM}"

    if field == "count":
        return f"Count must be between 1 and {MAX_BATCH}"

    if field == "export_count":
        return f"Count must be between 1 and {MAX_EXPORT}"

    return "Value is invalid"
