"""Payment form validation.

Every rule runs on every pass so all field errors can be shown at once.
"""

import math
import re

from paysim.models.form import FormField, FormSnapshot, ValidationErrors

CARD_NUMBER_MIN_DIGITS = 13
CARD_NUMBER_MAX_DIGITS = 19
NAME_MIN_LENGTH = 2

# Longest leading decimal literal, the way a browser's parseFloat reads it
_AMOUNT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII
)


def parse_amount(value: str) -> float:
    """Parse an amount leniently.

    Trailing text after the leading number is ignored (``"1.2.3"`` is 1.2).
    Returns NaN when the text does not start with a number.
    """
    match = _AMOUNT_PREFIX.match(value)
    if not match:
        return math.nan
    return float(match.group(1))


def _validate_name(name: str) -> str | None:
    trimmed = name.strip()
    if not trimmed:
        return "Name on card is required"
    if len(trimmed) < NAME_MIN_LENGTH:
        return "Name must be at least 2 characters"
    return None


def _validate_card_number(card_number: str) -> str | None:
    digits = re.sub(r"\s", "", card_number)
    if not digits:
        return "Card number is required"
    if not CARD_NUMBER_MIN_DIGITS <= len(digits) <= CARD_NUMBER_MAX_DIGITS:
        return "Invalid card number"
    return None


def _validate_expiry_date(expiry_date: str) -> str | None:
    """Check the MM/YY shape and month range.

    The year is not checked, so past dates are accepted.
    """
    if not expiry_date:
        return "Expiry date is required"
    parts = expiry_date.split("/")
    if len(parts) != 2 or len(parts[0]) != 2 or len(parts[1]) != 2:
        return "Invalid expiry date (MM/YY)"
    try:
        month = int(parts[0])
    except ValueError:
        return "Invalid month"
    if not 1 <= month <= 12:
        return "Invalid month"
    return None


def _validate_cvv(cvv: str) -> str | None:
    if not cvv:
        return "CVV is required"
    if not 3 <= len(cvv) <= 4:
        return "CVV must be 3-4 digits"
    return None


def _validate_amount(amount: str) -> str | None:
    if not amount:
        return "Amount is required"
    value = parse_amount(amount)
    if not math.isfinite(value) or value <= 0:
        return "Amount must be greater than 0"
    return None


_RULES = (
    (FormField.CARDHOLDER_NAME, _validate_name),
    (FormField.CARD_NUMBER, _validate_card_number),
    (FormField.EXPIRY_DATE, _validate_expiry_date),
    (FormField.CVV, _validate_cvv),
    (FormField.AMOUNT, _validate_amount),
)


def validate(snapshot: FormSnapshot) -> ValidationErrors:
    """Validate a complete form snapshot.

    Args:
        snapshot: Form contents to check

    Returns:
        Mapping of field to error message; empty when the form is valid
    """
    errors: ValidationErrors = {}
    for field, rule in _RULES:
        message = rule(snapshot.get(field))
        if message:
            errors[field] = message
    return errors


def is_valid(snapshot: FormSnapshot) -> bool:
    """Check whether a snapshot passes every rule."""
    return not validate(snapshot)
