"""Single-slot transaction store with a durable mirror."""

import logging
from typing import Optional

from pydantic import ValidationError

from paysim.core.mirror import MirrorBackend
from paysim.exceptions import MirrorCorruptError, MirrorError, TransactionNotFoundError
from paysim.models.transaction import TransactionRecord

logger = logging.getLogger(__name__)

DEFAULT_KEY = "transactionResult"


class TransactionStore:
    """Holds at most one transaction record per session.

    The record lives in memory and is mirrored to a durable backend so it
    survives a restart. On a cold read the mirror is the source of truth.
    Mirror failures never fail a save or a read: the store falls back to
    memory-only behavior.
    """

    def __init__(self, mirror: MirrorBackend, key: str = DEFAULT_KEY) -> None:
        """Initialize store.

        Args:
            mirror: Durable backend for the record
            key: Name the record is stored under
        """
        self._mirror = mirror
        self._key = key
        self._record: Optional[TransactionRecord] = None

    @property
    def key(self) -> str:
        return self._key

    @property
    def is_empty(self) -> bool:
        """True when no record is held in memory or in the mirror."""
        return self.get() is None

    def save(self, record: TransactionRecord) -> None:
        """Store a record, replacing any previous one."""
        self._record = record
        try:
            self._mirror.write(self._key, record.to_json())
        except MirrorError as e:
            logger.debug("Mirror write skipped: %s (%s)", e.message, e.details)
        logger.info("Transaction saved: %s", record.transaction_id)

    def get(self) -> Optional[TransactionRecord]:
        """Return the held record, hydrating from the mirror when needed.

        Returns:
            The record, or None if nothing is stored or the mirror is unreadable
        """
        if self._record is not None:
            return self._record

        try:
            record = self._hydrate()
        except MirrorError as e:
            logger.debug("Mirror read failed: %s (%s)", e.message, e.details)
            return None

        if record is not None:
            self._record = record
            logger.debug("Transaction hydrated from %s mirror", self._mirror.name)
        return record

    def clear(self) -> None:
        """Drop the held record. Clearing an empty store is a no-op."""
        self._record = None
        try:
            self._mirror.remove(self._key)
        except MirrorError as e:
            logger.debug("Mirror remove skipped: %s (%s)", e.message, e.details)

    def _hydrate(self) -> Optional[TransactionRecord]:
        raw = self._mirror.read(self._key)
        if not raw:
            return None
        try:
            return TransactionRecord.from_json(raw)
        except ValidationError as e:
            raise MirrorCorruptError(self._key) from e


def require_transaction(store: TransactionStore) -> TransactionRecord:
    """Return the stored record.

    Raises:
        TransactionNotFoundError: If the store is empty
    """
    record = store.get()
    if record is None:
        raise TransactionNotFoundError()
    return record
