"""Settings command implementation."""

from rich.console import Console
from rich.prompt import Confirm
from rich.table import Table

from paysim.cli.context import load_settings
from paysim.cli.ui import success_panel
from paysim.core.config import ConfigManager

console = Console()


def run_settings(reset: bool = False) -> None:
    """Run the settings command."""
    if reset:
        _handle_reset()
        return

    config = load_settings()
    manager = ConfigManager()

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Setting", style="dim")
    table.add_column("Value")
    for name, value in config.model_dump(mode="json").items():
        table.add_row(name, "-" if value is None else str(value))

    console.print()
    console.print(table)
    console.print()
    source = manager.config_path if manager.exists else "defaults"
    console.print(f"[dim]  Loaded from {source}[/dim]")


def _handle_reset() -> None:
    """Delete the settings file after confirmation."""
    console.print()
    if Confirm.ask("[yellow]Reset all settings to defaults?[/yellow]", default=False):
        if ConfigManager().delete():
            console.print(success_panel("Settings reset to defaults."))
        else:
            console.print("[dim]No settings file found to delete.[/dim]")
    else:
        console.print("[dim]Cancelled.[/dim]")
