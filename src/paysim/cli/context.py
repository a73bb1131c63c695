"""Settings and store wiring shared by CLI commands."""

import logging
from typing import Optional

import typer
from rich.console import Console

from paysim.cli.ui import error_panel
from paysim.core.config import ConfigManager
from paysim.core.mirror import build_mirror
from paysim.core.store import TransactionStore
from paysim.exceptions import ConfigError
from paysim.models import PaysimConfig

logger = logging.getLogger(__name__)
console = Console()


def load_settings(
    session: Optional[str] = None,
    backend: Optional[str] = None,
) -> PaysimConfig:
    """Load settings and apply command-line overrides.

    Exits with status 1 if the settings file is invalid.
    """
    manager = ConfigManager()
    try:
        config = manager.load()
        updates = {}
        if session:
            updates["session"] = session
        if backend:
            updates["mirror_backend"] = backend
        if updates:
            config = PaysimConfig.model_validate({**config.model_dump(), **updates})
    except ConfigError as e:
        console.print()
        console.print(error_panel(e.message, e.details))
        raise typer.Exit(1)
    except ValueError as e:
        console.print()
        console.print(error_panel("Invalid option.", str(e)))
        raise typer.Exit(1)

    logger.debug("Settings: backend=%s session=%s", config.mirror_backend, config.session)
    return config


def open_store(config: PaysimConfig) -> TransactionStore:
    """Create the transaction store for the configured session."""
    return TransactionStore(build_mirror(config), key=config.mirror_key)
