"""Pay command implementation."""

import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt

from paysim.cli.context import load_settings, open_store
from paysim.cli.ui import create_errors_table, error_panel, receipt_panel
from paysim.core.session import CheckoutSession, SubmitResult
from paysim.models import FormField

logger = logging.getLogger(__name__)
console = Console()

# Re-prompt rounds before giving up on an invalid form
MAX_ATTEMPTS = 3

_PLACEHOLDERS = {
    FormField.CARDHOLDER_NAME: "John Doe",
    FormField.CARD_NUMBER: "1234 5678 9012 3456",
    FormField.EXPIRY_DATE: "MM/YY",
    FormField.CVV: "123",
    FormField.AMOUNT: "100.00",
}


def run_pay(
    name: Optional[str] = None,
    card: Optional[str] = None,
    expiry: Optional[str] = None,
    cvv: Optional[str] = None,
    amount: Optional[str] = None,
    delay: Optional[float] = None,
    session_name: Optional[str] = None,
    backend: Optional[str] = None,
) -> None:
    """Run the pay command."""
    config = load_settings(session=session_name, backend=backend)
    store = open_store(config)
    processing_delay = config.processing_delay if delay is None else delay
    session = CheckoutSession(store, processing_delay=processing_delay)

    given = {
        FormField.CARDHOLDER_NAME: name,
        FormField.CARD_NUMBER: card,
        FormField.EXPIRY_DATE: expiry,
        FormField.CVV: cvv,
        FormField.AMOUNT: amount,
    }
    interactive = any(value is None for value in given.values())

    console.print()
    if interactive:
        console.print(
            Panel.fit(
                "[bold]Payment Details[/bold]\n\nEnter your card information",
                border_style="blue",
            )
        )
        console.print()

    for field, value in given.items():
        if value is None:
            value = _ask(field)
        session.input(field, value)

    result = _submit(session)
    attempts = 1
    while not result.ok:
        console.print()
        console.print(error_panel("Please correct the highlighted fields."))
        console.print(create_errors_table(result.errors))
        console.print()

        if not interactive or attempts >= MAX_ATTEMPTS:
            raise typer.Exit(1)

        for field in FormField:
            if field in result.errors:
                session.input(field, _ask(field))
        result = _submit(session)
        attempts += 1

    console.print()
    console.print(receipt_panel(result.record))
    console.print("[dim]  Secure payment simulation - No real charges[/dim]")
    console.print()


def _ask(field: FormField) -> str:
    """Prompt for one field."""
    password = field == FormField.CVV
    return Prompt.ask(
        f"  {field.label} [dim]({_PLACEHOLDERS[field]})[/dim]",
        password=password,
        default="",
        show_default=False,
    )


def _submit(session: CheckoutSession) -> SubmitResult:
    """Submit the form, showing a spinner while processing."""
    with console.status("[bold blue]Processing payment...[/bold blue]"):
        result = asyncio.run(session.submit())
    logger.info("Pay: ok=%s errors=%d", result.ok, len(result.errors))
    return result
