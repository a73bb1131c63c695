"""Per-keystroke normalization of raw form input."""

import re

from paysim.models.form import FormField

CARD_NUMBER_MAX_LENGTH = 19  # 16 digits + 3 spaces
CVV_MAX_LENGTH = 4


def _digits(value: str) -> str:
    return re.sub(r"[^0-9]", "", value)


def format_card_number(raw: str) -> str:
    """Group card digits by four, e.g. ``4111 1111 1111 1111``."""
    digits = _digits(raw)
    groups = [digits[i : i + 4] for i in range(0, len(digits), 4)]
    return " ".join(groups)[:CARD_NUMBER_MAX_LENGTH]


def format_expiry_date(raw: str) -> str:
    """Insert the ``/`` of ``MM/YY`` once two digits are typed."""
    digits = _digits(raw)
    if len(digits) >= 2:
        return f"{digits[:2]}/{digits[2:4]}"
    return digits


def format_cvv(raw: str) -> str:
    """Keep up to four digits."""
    return _digits(raw)[:CVV_MAX_LENGTH]


def format_amount(raw: str) -> str:
    """Keep digits and decimal points.

    Repeated points are left in place, so ``"1.2.3"`` stays as typed and
    is resolved by the lenient amount parser.
    """
    return re.sub(r"[^0-9.]", "", raw)


_FORMATTERS = {
    FormField.CARD_NUMBER: format_card_number,
    FormField.EXPIRY_DATE: format_expiry_date,
    FormField.CVV: format_cvv,
    FormField.AMOUNT: format_amount,
}


def format_field(field: FormField, raw: str) -> str:
    """Format raw input for the given field.

    The cardholder name has no formatter and is returned unchanged.
    """
    formatter = _FORMATTERS.get(FormField(field))
    if formatter is None:
        return raw
    return formatter(raw)
