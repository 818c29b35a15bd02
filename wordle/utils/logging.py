"""Logging setup for the Wordle CLI."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Union

from rich.logging import RichHandler


def setup_logging(log_dir: Union[str, Path], verbose: bool = False) -> logging.Logger:
    """Configure the ``wordle`` logger.

    Writes a dated log file under ``log_dir`` and sends warnings (or
    everything, when verbose) to the console through rich.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("wordle")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Prevent duplicate handlers
    if logger.handlers:
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    log_file = log_dir / f"wordle_{datetime.now().strftime('%Y-%m-%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    console_handler = RichHandler(show_path=False, markup=False)
    console_handler.setLevel(logging.INFO if verbose else logging.WARNING)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    logger.propagate = False

    return logger
