"""Builds transaction records from validated form snapshots."""

import logging
import random
import re
import string
import time
from typing import Optional

from paysim.core.validator import parse_amount
from paysim.models.form import FormSnapshot
from paysim.models.transaction import TransactionRecord, TransactionStatus

logger = logging.getLogger(__name__)

MASK_PREFIX = "**** **** **** "
TRANSACTION_ID_PREFIX = "TXN"
RANDOM_SEGMENT_LENGTH = 6

_BASE36_DIGITS = string.digits + string.ascii_uppercase


def to_base36(value: int) -> str:
    """Render a non-negative integer in upper-case base 36."""
    if value < 0:
        raise ValueError("Value must be non-negative")
    if value == 0:
        return "0"
    out = []
    while value:
        value, rem = divmod(value, 36)
        out.append(_BASE36_DIGITS[rem])
    return "".join(reversed(out))


def generate_transaction_id(
    now_ms: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """Generate a transaction ID like ``TXN-LZ8K1J2A-4F7Q0B``.

    Unique with high probability within a session; not a secure token.

    Args:
        now_ms: Timestamp in milliseconds (defaults to the current time)
        rng: Random source (defaults to the module-level generator)
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    choices = (rng or random).choices(_BASE36_DIGITS, k=RANDOM_SEGMENT_LENGTH)
    return f"{TRANSACTION_ID_PREFIX}-{to_base36(now_ms)}-{''.join(choices)}"


def mask_card_number(card_number: str) -> str:
    """Mask all but the last four digits."""
    cleaned = re.sub(r"\s", "", card_number)
    return f"{MASK_PREFIX}{cleaned[-4:]}"


def normalize_amount(amount: str) -> str:
    """Render an amount with exactly two decimal places.

    Python rounds the exact binary value, ties to even: ``"2.675"`` gives
    ``"2.67"`` and ``"0.125"`` gives ``"0.12"``.
    """
    return f"{parse_amount(amount):.2f}"


def create_transaction(
    snapshot: FormSnapshot,
    status: TransactionStatus = TransactionStatus.SUCCESS,
    transaction_id: Optional[str] = None,
) -> TransactionRecord:
    """Create a transaction record from a validated snapshot.

    The snapshot is not re-validated here; callers gate on
    :func:`paysim.core.validator.validate` first.

    Args:
        snapshot: Form contents that passed validation
        status: Transaction outcome
        transaction_id: Override the generated ID (for testing)

    Returns:
        Immutable transaction record
    """
    record = TransactionRecord(
        cardholder_name=snapshot.cardholder_name.strip(),
        masked_card_number=mask_card_number(snapshot.card_number),
        expiry_date=snapshot.expiry_date,
        amount=normalize_amount(snapshot.amount),
        status=status,
        transaction_id=transaction_id or generate_transaction_id(),
    )
    logger.info(
        "Transaction created: id=%s amount=%s status=%s",
        record.transaction_id,
        record.amount,
        record.status.value,
    )
    return record
