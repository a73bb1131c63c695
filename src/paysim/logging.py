"""Logging configuration for paysim."""

import logging
from pathlib import Path

import platformdirs


def setup_logging() -> None:
    """Configure logging with file handler for debug output.

    Logs go to debug.log in the platform config directory for paysim.
    Console output is handled separately by Rich; this is for debug file logging only.
    """
    log_dir = Path(platformdirs.user_config_dir("paysim"))
    log_file = log_dir / "debug.log"

    logger = logging.getLogger("paysim")
    logger.setLevel(logging.DEBUG)

    # Avoid duplicate handlers on repeated calls
    if logger.handlers:
        return

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        # Read-only home directories still get a working CLI
        logger.addHandler(logging.NullHandler())
        return
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(fh)

    logger.debug("Logging initialized -> %s", log_file)
