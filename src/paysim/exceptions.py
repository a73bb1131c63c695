"""Custom exceptions for paysim.

Form validation failures are not exceptions: they are returned as a
``{field: message}`` mapping by :func:`paysim.core.validator.validate`.
"""

from typing import Optional


class PaysimError(Exception):
    """Base exception for all paysim errors."""

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


# ─────────────────────────────────────────────────────────────────────────────
# Config Errors
# ─────────────────────────────────────────────────────────────────────────────


class ConfigError(PaysimError):
    """Base class for configuration errors."""


class ConfigValidationError(ConfigError):
    """Configuration validation failed."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(
            f"Invalid configuration: {field}",
            reason,
        )


# ─────────────────────────────────────────────────────────────────────────────
# Mirror Errors
# ─────────────────────────────────────────────────────────────────────────────


class MirrorError(PaysimError):
    """Base class for durable mirror errors."""


class MirrorUnavailableError(MirrorError):
    """Durable medium cannot be read or written."""

    def __init__(self, backend: str, reason: Optional[str] = None) -> None:
        super().__init__(
            f"Transaction mirror unavailable: {backend}",
            reason,
        )


class MirrorCorruptError(MirrorError):
    """Mirrored content could not be decoded."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f"Stored transaction is unreadable: {key}",
            "Run 'paysim clear' to discard it.",
        )


# ─────────────────────────────────────────────────────────────────────────────
# Transaction Errors
# ─────────────────────────────────────────────────────────────────────────────


class TransactionError(PaysimError):
    """Base class for transaction errors."""


class TransactionNotFoundError(TransactionError):
    """No transaction is held for this session."""

    def __init__(self) -> None:
        super().__init__(
            "No transaction found",
            "Please complete a payment first with 'paysim pay'.",
        )
