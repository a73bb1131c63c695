"""Data models for paysim."""

from paysim.models.config import PaysimConfig
from paysim.models.form import FormField, FormSnapshot, FormState, ValidationErrors
from paysim.models.transaction import TransactionRecord, TransactionStatus

__all__ = [
    # Config
    "PaysimConfig",
    # Form
    "FormField",
    "FormSnapshot",
    "FormState",
    "ValidationErrors",
    # Transaction
    "TransactionRecord",
    "TransactionStatus",
]
