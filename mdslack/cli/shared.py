"""Shared utilities for mdslack CLI commands."""

import logging

from rich.console import Console

console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool):
    """Send library logs to stderr when --verbose is given."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
        # httpx logs every request at INFO
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
