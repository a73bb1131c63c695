"""Core services for paysim."""

from paysim.core.config import ConfigManager
from paysim.core.factory import create_transaction, generate_transaction_id, mask_card_number
from paysim.core.formatter import (
    format_amount,
    format_card_number,
    format_cvv,
    format_expiry_date,
    format_field,
)
from paysim.core.mirror import FileMirror, KeyringMirror, MemoryMirror, MirrorBackend, build_mirror
from paysim.core.session import CheckoutSession, SubmitResult, reduce
from paysim.core.store import TransactionStore
from paysim.core.validator import is_valid, validate

__all__ = [
    "CheckoutSession",
    "ConfigManager",
    "FileMirror",
    "KeyringMirror",
    "MemoryMirror",
    "MirrorBackend",
    "SubmitResult",
    "TransactionStore",
    "build_mirror",
    "create_transaction",
    "format_amount",
    "format_card_number",
    "format_cvv",
    "format_expiry_date",
    "format_field",
    "generate_transaction_id",
    "is_valid",
    "mask_card_number",
    "reduce",
    "validate",
]
