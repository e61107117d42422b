"""Logging setup for the installer entry point"""

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_FILE_ENV = "PROXY_MCP_INSTALL_LOG"


def setup_logging(verbose: bool = False, log_file: Optional[str] = None, console: Optional[Console] = None) -> None:
    """Route log records through rich, plus a plain-text file when requested.

    ``log_file`` falls back to the ``PROXY_MCP_INSTALL_LOG`` environment
    variable; the file always receives DEBUG records.
    """
    if log_file is None:
        log_file = os.getenv(LOG_FILE_ENV)

    console_handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handlers: list = [console_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=handlers, force=True)
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
