"""Shared test fixtures for paysim."""

from unittest.mock import patch

import pytest

from paysim.core.config import ConfigManager
from paysim.core.mirror import MemoryMirror
from paysim.core.store import TransactionStore
from paysim.models import FormSnapshot, PaysimConfig


@pytest.fixture
def temp_config_dir(tmp_path):
    """Provide isolated config directory for tests."""
    config_dir = tmp_path / ".config" / "paysim"
    config_dir.mkdir(parents=True)
    return config_dir


@pytest.fixture
def mock_keyring(monkeypatch):
    """Mock keyring for mirror tests."""
    storage = {}

    def mock_get(service, key):
        return storage.get(f"{service}:{key}")

    def mock_set(service, key, value):
        storage[f"{service}:{key}"] = value

    def mock_delete(service, key):
        k = f"{service}:{key}"
        if k not in storage:
            from keyring.errors import PasswordDeleteError
            raise PasswordDeleteError(f"No password for {key}")
        storage.pop(k)

    monkeypatch.setattr("keyring.get_password", mock_get)
    monkeypatch.setattr("keyring.set_password", mock_set)
    monkeypatch.setattr("keyring.delete_password", mock_delete)

    return storage


@pytest.fixture
def memory_store():
    """Store backed by an in-process mirror."""
    return TransactionStore(MemoryMirror())


@pytest.fixture
def valid_snapshot():
    return FormSnapshot(
        cardholder_name="Jo",
        card_number="4111 1111 1111 1111",
        expiry_date="12/29",
        cvv="123",
        amount="10.00",
    )


@pytest.fixture
def cli_settings(tmp_path):
    """Point CLI commands at isolated settings with no processing delay."""
    manager = ConfigManager(config_dir=tmp_path / ".config" / "paysim")
    manager.save(PaysimConfig(processing_delay=0, state_dir=tmp_path / "state"))
    with (
        patch("paysim.cli.context.ConfigManager", return_value=manager),
        patch("paysim.cli.app.setup_logging"),
    ):
        yield manager
