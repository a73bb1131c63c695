"""Checkout form state machine and submission flow."""

import asyncio
import logging
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from paysim.core.factory import create_transaction
from paysim.core.formatter import format_field
from paysim.core.store import TransactionStore
from paysim.core.validator import validate
from paysim.models.form import FormField, FormSnapshot, FormState, ValidationErrors
from paysim.models.transaction import TransactionRecord

logger = logging.getLogger(__name__)

DEFAULT_PROCESSING_DELAY = 1.5  # seconds


# ─────────────────────────────────────────────────────────────────────────────
# Events
# ─────────────────────────────────────────────────────────────────────────────


class FieldChanged(BaseModel):
    """User typed into a field."""

    model_config = ConfigDict(frozen=True)

    field: FormField
    value: str


class SubmitAttempted(BaseModel):
    """User pressed the pay button."""

    model_config = ConfigDict(frozen=True)


class SubmitFinished(BaseModel):
    """Processing completed and the transaction was stored."""

    model_config = ConfigDict(frozen=True)


FormEvent = Union[FieldChanged, SubmitAttempted, SubmitFinished]


def reduce(state: FormState, event: FormEvent) -> FormState:
    """Apply an event to the form state, returning a new state.

    A field change formats the value and clears that field's error
    without revalidating. A submit attempt revalidates the whole form and
    is ignored while a submission is already in flight.
    """
    if isinstance(event, FieldChanged):
        value = format_field(event.field, event.value)
        errors = {f: m for f, m in state.errors.items() if f != event.field}
        return state.model_copy(
            update={
                "snapshot": state.snapshot.with_value(event.field, value),
                "errors": errors,
            }
        )

    if isinstance(event, SubmitAttempted):
        if state.submitting:
            return state
        errors = validate(state.snapshot)
        return state.model_copy(update={"errors": errors, "submitting": not errors})

    if isinstance(event, SubmitFinished):
        return state.model_copy(update={"submitting": False})

    raise TypeError(f"Unknown form event: {type(event).__name__}")


# ─────────────────────────────────────────────────────────────────────────────
# Session
# ─────────────────────────────────────────────────────────────────────────────


class SubmitResult(BaseModel):
    """Outcome of a submit attempt."""

    record: Optional[TransactionRecord] = None
    errors: ValidationErrors = Field(default_factory=dict)
    ignored: bool = False  # A submission was already in flight

    @property
    def ok(self) -> bool:
        return self.record is not None


class CheckoutSession:
    """One payment form, from first keystroke to stored transaction."""

    def __init__(
        self,
        store: TransactionStore,
        processing_delay: float = DEFAULT_PROCESSING_DELAY,
    ) -> None:
        """Initialize session.

        Args:
            store: Where the finished transaction is saved
            processing_delay: Simulated payment processing time in seconds
        """
        self._store = store
        self._delay = processing_delay
        self._state = FormState()
        self._pending: Optional[asyncio.Task] = None

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def snapshot(self) -> FormSnapshot:
        return self._state.snapshot

    @property
    def errors(self) -> ValidationErrors:
        return self._state.errors

    @property
    def pending(self) -> Optional[asyncio.Task]:
        """Processing task of the submission in flight, if any."""
        return self._pending

    def dispatch(self, event: FormEvent) -> FormState:
        """Apply an event and return the new state."""
        self._state = reduce(self._state, event)
        return self._state

    def input(self, field: FormField, raw: str) -> tuple[str, ValidationErrors]:
        """Handle a keystroke.

        Returns:
            Formatted field value and the updated error mapping
        """
        state = self.dispatch(FieldChanged(field=field, value=raw))
        return state.snapshot.get(field), state.errors

    async def submit(self) -> SubmitResult:
        """Validate, simulate processing, then create and store the transaction.

        Once processing starts it runs to completion: cancelling the
        caller does not stop the transaction from being stored.
        """
        if self._state.submitting:
            logger.debug("Submit ignored: submission in flight")
            return SubmitResult(ignored=True)

        state = self.dispatch(SubmitAttempted())
        if state.errors:
            logger.info(
                "Submit rejected: %s",
                ", ".join(f.value for f in state.errors),
            )
            return SubmitResult(errors=dict(state.errors))

        self._pending = asyncio.create_task(self._process(state.snapshot))
        record = await asyncio.shield(self._pending)
        return SubmitResult(record=record)

    async def _process(self, snapshot: FormSnapshot) -> TransactionRecord:
        try:
            await asyncio.sleep(self._delay)
            record = create_transaction(snapshot)
            self._store.save(record)
            return record
        finally:
            self.dispatch(SubmitFinished())
