"""Field-level checks shared by entities and application services."""

from .exceptions import ValidationError

MAX_TEXT_LENGTH = 255

# Amounts are stored in signed 64-bit columns
MAX_AMOUNT = 2**63 - 1


def require_text(value: object, field: str, max_length: int = MAX_TEXT_LENGTH) -> str:
    """
    Ensure a required string field is present and not blank.

    Args:
        value: The candidate value
        field: Field name reported back to the caller
        max_length: Upper bound on the string length

    Returns:
        The value, unchanged

    Raises:
        ValidationError: If the value is not a string, is blank, or is too long
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} cannot be empty", field=field, value=value)
    if len(value) > max_length:
        raise ValidationError(
            f"{field} cannot exceed {max_length} characters", field=field, value=value
        )
    return value


def require_non_negative_amount(value: object, field: str) -> int:
    """
    Ensure a monetary amount in cents is a non-negative integer.

    Raises:
        ValidationError: If the value is not an int, is negative, or exceeds MAX_AMOUNT
    """
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be an integer", field=field, value=value)
    if value < 0:
        raise ValidationError(f"{field} cannot be negative", field=field, value=value)
    if value > MAX_AMOUNT:
        raise ValidationError(
            f"{field} cannot exceed {MAX_AMOUNT}", field=field, value=value
        )
    return value
