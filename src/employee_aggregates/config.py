"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads the dataset location, pipeline parameters and log destination from the
environment (a `.env` file at the project root is honoured).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

@dataclass(frozen=True)
class Settings:
    """Container for pipeline configuration read from the environment.

    Attributes:
        dataset_path: JSON or CSV file holding the employee records.
        payroll_top_n: Number of companies reported by the payroll aggregator.
        proximity_min_group_size: Minimum members for a proximity group to count.
        postcode_prefix_length: Post code characters forming the proximity key.
        log_path: Optional log file; ``None`` logs to stdout only.
        log_level: Root log level name (e.g. "INFO", "DEBUG").
    """
    dataset_path: Path
    payroll_top_n: int
    proximity_min_group_size: int
    postcode_prefix_length: int
    log_path: Path | None
    log_level: str


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise RuntimeError(f"{name} must be >= 1, got {value}")
    return value


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if a numeric setting is not a positive integer.
    """
    dataset_path = Path(os.getenv("EMPLOYEES_DATASET", "data/employees.json"))
    log_path_raw = os.getenv("LOG_PATH", "logs/aggregates.log").strip()

    return Settings(
        dataset_path=dataset_path,
        payroll_top_n=_positive_int("PAYROLL_TOP_N", 10),
        proximity_min_group_size=_positive_int("PROXIMITY_MIN_GROUP_SIZE", 5),
        postcode_prefix_length=_positive_int("POSTCODE_PREFIX_LENGTH", 2),
        log_path=Path(log_path_raw) if log_path_raw else None,
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
