"""
Field-level input checks shared by the services.

Each helper returns the normalized value or raises ValidationError.
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from errors import ValidationError

CENT = Decimal('0.01')
MAX_AMOUNT = Decimal('10000000000000000')  # Numeric(18, 2)
MAX_INT = 2**31 - 1  # INTEGER columns hold 32-bit values


def require_text(value, field, max_length=None):
    """
    Return the trimmed text, rejecting missing or blank values.

    Args:
        value: Raw input
        field (str): Field name used in error messages, e.g. "Person name"
        max_length (int, optional): Maximum length after trimming

    Returns:
        str: The trimmed text
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f'{field} is required and cannot be empty.')
    text = value.strip()
    if max_length is not None and len(text) > max_length:
        raise ValidationError(f'{field} must be at most {max_length} characters.')
    return text


def require_positive_int(value, message):
    """Return value as a positive int; floats must be integral, bools are rejected."""
    if isinstance(value, bool):
        raise ValidationError(message)
    if isinstance(value, int):
        number = value
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    elif isinstance(value, str) and value.strip().lstrip('-').isdecimal():
        try:
            number = int(value.strip())
        except ValueError:
            raise ValidationError(message)
    else:
        raise ValidationError(message)

    if number <= 0 or number > MAX_INT:
        raise ValidationError(message)
    return number


def require_positive_amount(value, message):
    """
    Parse a monetary amount and round it to cents.

    Amounts that are not numbers, are not finite, are not positive or
    round down to 0.00 are rejected.

    Returns:
        Decimal: The amount quantized to two decimal places
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(message)
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(message)

    if not amount.is_finite() or amount <= 0 or amount >= MAX_AMOUNT:
        raise ValidationError(message)

    amount = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    if amount <= 0:
        raise ValidationError(message)
    return amount
