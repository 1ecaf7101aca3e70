"""Utilities to configure consistent logging for the CLI and the pipelines."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

def configure_logging(log_path: Path | None = None, level: int | str = logging.INFO) -> None:
    """Configure root logging handlers and formatting.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        log_path: Optional path to a file where logs will be written.
        level: Logging level as a number or a name such as ``"DEBUG"``
            (defaults to INFO).

    Raises:
        ValueError: if `level` is an unknown level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
