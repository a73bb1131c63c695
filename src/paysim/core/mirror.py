"""Durable, session-scoped mirrors for the transaction store."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import keyring
import platformdirs
from keyring.errors import KeyringError, PasswordDeleteError

from paysim.exceptions import MirrorCorruptError, MirrorUnavailableError
from paysim.models.config import PaysimConfig

logger = logging.getLogger(__name__)

SERVICE_NAME = "paysim"


class MirrorBackend(ABC):
    """Key/value medium that survives a process restart.

    Implementations raise MirrorError subclasses when the medium fails.
    A missing key is not a failure.
    """

    name: str = "mirror"

    @abstractmethod
    def read(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Remove a key. Removing an absent key is a no-op."""


class MemoryMirror(MirrorBackend):
    """Process-local mirror, used for tests and non-persistent runs."""

    name = "memory"

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class FileMirror(MirrorBackend):
    """Mirror keeping one JSON file per key in a session directory."""

    name = "file"

    def __init__(self, session_dir: Path) -> None:
        self._session_dir = Path(session_dir)

    @property
    def session_dir(self) -> Path:
        return self._session_dir

    def path_for(self, key: str) -> Path:
        """Path of the file holding a key."""
        return self._session_dir / f"{key}.json"

    def read(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as e:
            raise MirrorCorruptError(key) from e
        except OSError as e:
            raise MirrorUnavailableError(self.name, str(e)) from e

    def write(self, key: str, value: str) -> None:
        try:
            self._session_dir.mkdir(parents=True, exist_ok=True)
            self.path_for(key).write_text(value, encoding="utf-8")
        except OSError as e:
            raise MirrorUnavailableError(self.name, str(e)) from e

    def remove(self, key: str) -> None:
        try:
            self.path_for(key).unlink(missing_ok=True)
        except OSError as e:
            raise MirrorUnavailableError(self.name, str(e)) from e


class KeyringMirror(MirrorBackend):
    """Mirror stored in the OS keychain, one service per session."""

    name = "keyring"

    def __init__(self, session: str = "default") -> None:
        self.service = f"{SERVICE_NAME}:{session}"

    def read(self, key: str) -> Optional[str]:
        try:
            return keyring.get_password(self.service, key)
        except KeyringError as e:
            raise MirrorUnavailableError(self.name, str(e)) from e

    def write(self, key: str, value: str) -> None:
        try:
            keyring.set_password(self.service, key, value)
        except KeyringError as e:
            raise MirrorUnavailableError(self.name, str(e)) from e

    def remove(self, key: str) -> None:
        try:
            keyring.delete_password(self.service, key)
        except PasswordDeleteError:
            pass  # Key doesn't exist
        except KeyringError as e:
            raise MirrorUnavailableError(self.name, str(e)) from e


def default_session_dir(session: str) -> Path:
    """Session directory under the user state dir."""
    return Path(platformdirs.user_state_dir(SERVICE_NAME)) / "sessions" / session


def build_mirror(config: PaysimConfig) -> MirrorBackend:
    """Create the mirror backend selected in config."""
    if config.mirror_backend == "memory":
        mirror: MirrorBackend = MemoryMirror()
    elif config.mirror_backend == "keyring":
        mirror = KeyringMirror(config.session)
    else:
        if config.state_dir:
            session_dir = Path(config.state_dir) / "sessions" / config.session
        else:
            session_dir = default_session_dir(config.session)
        mirror = FileMirror(session_dir)

    logger.debug("Mirror backend: %s (session=%s)", mirror.name, config.session)
    return mirror
