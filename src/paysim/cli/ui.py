"""Rich console UI helpers."""

from rich.console import Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from paysim.models import FormField, TransactionRecord, ValidationErrors


def success_panel(message: str) -> Panel:
    """Create a success message panel."""
    return Panel(
        f"[green]✓[/green] {message}",
        border_style="green",
        padding=(0, 1),
    )


def error_panel(message: str, details: str | None = None) -> Panel:
    """Create an error message panel."""
    content = f"[red]✗[/red] {message}"
    if details:
        content += f"\n\n[dim]{details}[/dim]"
    return Panel(
        content,
        title="Error",
        border_style="red",
        padding=(0, 1),
    )


def warning_panel(message: str) -> Panel:
    """Create a warning message panel."""
    return Panel(
        f"[yellow]⚠[/yellow] {message}",
        border_style="yellow",
        padding=(0, 1),
    )


def create_errors_table(errors: ValidationErrors) -> Table:
    """Create a table listing field errors in form order."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Field", style="dim")
    table.add_column("Error", style="red")

    for field in FormField:
        if field in errors:
            table.add_row(field.label, errors[field])

    return table


def create_receipt_table(record: TransactionRecord) -> Table:
    """Create a table with the receipt details."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Field", style="dim")
    table.add_column("Value")

    status_style = "green" if record.is_success else "red"
    table.add_row("Name", escape(record.cardholder_name))
    table.add_row("Card Number", escape(record.masked_card_number))
    table.add_row("Expiry Date", escape(record.expiry_date))
    table.add_row("Status", f"[{status_style}]{record.status.value}[/{status_style}]")
    table.add_row("Transaction ID", escape(record.transaction_id))

    return table


def receipt_panel(record: TransactionRecord) -> Panel:
    """Create the receipt panel for a transaction."""
    if record.is_success:
        title, style = "Payment Successful!", "green"
    else:
        title, style = "Payment Failed", "red"

    amount = Text.assemble(("Amount Paid  ", "dim"), (record.amount_display, "bold"))
    return Panel(
        Group(amount, Text(""), create_receipt_table(record)),
        title=title,
        subtitle="Thank you for using paysim",
        border_style=style,
        padding=(1, 2),
    )
