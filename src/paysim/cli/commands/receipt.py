"""Receipt command implementation."""

from typing import Optional

import typer
from rich.console import Console

from paysim.cli.context import load_settings, open_store
from paysim.cli.ui import error_panel, receipt_panel
from paysim.core.store import require_transaction
from paysim.exceptions import TransactionNotFoundError

console = Console()


def run_receipt(
    as_json: bool = False,
    session_name: Optional[str] = None,
    backend: Optional[str] = None,
) -> None:
    """Run the receipt command."""
    config = load_settings(session=session_name, backend=backend)
    store = open_store(config)

    try:
        record = require_transaction(store)
    except TransactionNotFoundError as e:
        console.print()
        console.print(error_panel(e.message, e.details))
        raise typer.Exit(1)

    if as_json:
        console.print_json(record.to_json())
        return

    console.print()
    console.print(receipt_panel(record))
    console.print()
