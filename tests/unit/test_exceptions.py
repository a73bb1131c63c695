"""Tests for exception hierarchy."""

from paysim.exceptions import (
    ConfigError,
    ConfigValidationError,
    MirrorCorruptError,
    MirrorError,
    MirrorUnavailableError,
    PaysimError,
    TransactionError,
    TransactionNotFoundError,
)


class TestExceptionHierarchy:
    def test_base_exception(self):
        e = PaysimError("test", "details")
        assert e.message == "test"
        assert e.details == "details"
        assert str(e) == "test"

    def test_config_errors_inherit(self):
        assert issubclass(ConfigError, PaysimError)
        assert issubclass(ConfigValidationError, ConfigError)

    def test_mirror_errors_inherit(self):
        assert issubclass(MirrorError, PaysimError)
        assert issubclass(MirrorUnavailableError, MirrorError)
        assert issubclass(MirrorCorruptError, MirrorError)

    def test_transaction_errors_inherit(self):
        assert issubclass(TransactionError, PaysimError)
        assert issubclass(TransactionNotFoundError, TransactionError)


class TestExceptionMessages:
    def test_config_validation(self):
        e = ConfigValidationError("session", "bad name")
        assert e.message == "Invalid configuration: session"
        assert e.details == "bad name"

    def test_mirror_unavailable(self):
        e = MirrorUnavailableError("file", "read-only file system")
        assert "file" in e.message
        assert e.details == "read-only file system"

    def test_mirror_corrupt(self):
        e = MirrorCorruptError("transactionResult")
        assert "transactionResult" in e.message
        assert "paysim clear" in e.details

    def test_transaction_not_found(self):
        e = TransactionNotFoundError()
        assert e.message == "No transaction found"
        assert "paysim pay" in e.details
