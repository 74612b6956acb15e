"""Logging helpers shared by the engine, the CLI and the HTTP API."""

import logging
from typing import Optional


def configure_logging(level: int = logging.INFO) -> None:
    """Install a single stream handler on the root logger."""

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or "sudoku")
