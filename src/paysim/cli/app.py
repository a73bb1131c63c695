"""Main CLI application."""

from enum import Enum
from typing import Optional

import typer
from rich.console import Console

from paysim import __version__
from paysim.logging import setup_logging

app = typer.Typer(
    name="paysim",
    help="Simulate a card-payment checkout from the command line.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()


class Backend(str, Enum):
    """Durable mirror backends."""

    FILE = "file"
    KEYRING = "keyring"
    MEMORY = "memory"


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
    ),
    session: Optional[str] = typer.Option(
        None, "--session", help="Checkout session name (one transaction per session)"
    ),
    backend: Optional[Backend] = typer.Option(
        None, "--backend", help="Where the transaction is mirrored"
    ),
) -> None:
    """paysim - card-payment checkout simulator."""
    if version:
        console.print(f"paysim v{__version__}")
        raise typer.Exit()

    setup_logging()
    ctx.obj = {
        "session": session,
        "backend": backend.value if backend else None,
    }


@app.command()
def pay(
    ctx: typer.Context,
    name: Optional[str] = typer.Option(None, "--name", help="Name on card"),
    card: Optional[str] = typer.Option(None, "--card", help="Card number"),
    expiry: Optional[str] = typer.Option(None, "--expiry", help="Expiry date (MM/YY)"),
    cvv: Optional[str] = typer.Option(None, "--cvv", help="Card security code"),
    amount: Optional[str] = typer.Option(None, "--amount", help="Payment amount"),
    delay: Optional[float] = typer.Option(
        None, "--delay", min=0, help="Simulated processing time in seconds"
    ),
) -> None:
    """Enter payment details and process a simulated payment."""
    from paysim.cli.commands.pay import run_pay

    run_pay(
        name=name,
        card=card,
        expiry=expiry,
        cvv=cvv,
        amount=amount,
        delay=delay,
        **_globals(ctx),
    )


@app.command()
def receipt(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print the stored record as JSON"),
) -> None:
    """Show the receipt of the last payment."""
    from paysim.cli.commands.receipt import run_receipt

    run_receipt(as_json=as_json, **_globals(ctx))


@app.command()
def clear(ctx: typer.Context) -> None:
    """Clear the stored transaction to make another payment."""
    from paysim.cli.commands.clear import run_clear

    run_clear(**_globals(ctx))


@app.command()
def settings(
    reset: bool = typer.Option(False, "--reset", help="Delete the settings file"),
) -> None:
    """Show settings, or reset them to defaults."""
    from paysim.cli.commands.settings import run_settings

    run_settings(reset=reset)


def _globals(ctx: typer.Context) -> dict:
    obj = ctx.obj or {}
    return {
        "session_name": obj.get("session"),
        "backend": obj.get("backend"),
    }


if __name__ == "__main__":
    app()
