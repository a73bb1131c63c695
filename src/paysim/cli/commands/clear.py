"""Clear command implementation."""

from typing import Optional

from rich.console import Console

from paysim.cli.context import load_settings, open_store
from paysim.cli.ui import success_panel, warning_panel

console = Console()


def run_clear(
    session_name: Optional[str] = None,
    backend: Optional[str] = None,
) -> None:
    """Run the clear command.

    Always clears the store, so unreadable mirror content is discarded too.
    """
    config = load_settings(session=session_name, backend=backend)
    store = open_store(config)

    held = store.get() is not None
    store.clear()

    console.print()
    if held:
        console.print(success_panel("Transaction cleared. Ready for another payment."))
    else:
        console.print(warning_panel("No transaction to clear."))
