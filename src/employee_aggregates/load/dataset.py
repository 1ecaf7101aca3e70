"""Load the employee dataset from disk.

Module notes:
- JSON files hold a list of nested employee objects (snake_case or camelCase).
- CSV files hold one flattened row per employee; empty correspondence columns
  mean the employee has no correspondence address.
- Every record is validated with Pydantic; invalid records are counted.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

import pandas as pd
from pydantic import ValidationError

from employee_aggregates.errors import DatasetError, EmptyDatasetError
from employee_aggregates.models import Employee

log = logging.getLogger(__name__)

ADDRESS_FIELDS = ("line1", "line2", "city", "post_code")
ADDRESS_PREFIXES = {
    "home": "home_address",
    "correspondence": "correspondence_address",
}


def validate_records(records: Iterable[Any]) -> tuple[list[Employee], int]:
    """Validate raw records using Pydantic.

    Args:
        records: Iterable of dicts shaped like `Employee`.

    Returns:
        A tuple of (list_of_validated_employees, bad_count).
    """
    good: list[Employee] = []
    bad = 0

    for i, rec in enumerate(records):
        try:
            good.append(Employee.model_validate(rec))
        except ValidationError as e:
            log.debug("Record %d rejected: %s", i, e)
            bad += 1

    return good, bad


def _read_json(path: Path) -> list[Any]:
    try:
        with path.open(encoding="utf-8") as fh:
            data = json.load(fh)
    except json.JSONDecodeError as e:
        raise DatasetError(f"{path} is not valid JSON: {e}") from e
    except (UnicodeDecodeError, OSError) as e:
        raise DatasetError(f"Cannot read {path}: {e}") from e

    if isinstance(data, dict) and "employees" in data:
        data = data["employees"]
    if not isinstance(data, list):
        raise DatasetError(f"{path} must contain a list of employee records")
    return data


def _address_from_row(row: dict[str, str], prefix: str) -> dict[str, Any] | None:
    """Rebuild a nested address from `<prefix>_<field>` columns."""
    fields: dict[str, Any] = {f: row.get(f"{prefix}_{f}", "") for f in ADDRESS_FIELDS}
    if not any(v.strip() for v in fields.values()):
        return None
    if not fields["line2"].strip():
        fields["line2"] = None
    return fields


def _unflatten_row(row: dict[str, str]) -> dict[str, Any]:
    rec: dict[str, Any] = {
        "first_name": row.get("first_name", ""),
        "surname": row.get("surname", ""),
        "salary": row.get("salary", ""),
        "company": {
            "name": row.get("company_name", ""),
            "industry": row.get("company_industry") or None,
        },
    }
    for prefix, field in ADDRESS_PREFIXES.items():
        rec[field] = _address_from_row(row, prefix)
    return rec


def _read_csv(path: Path) -> list[dict[str, Any]]:
    try:
        pdf = pd.read_csv(path, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError as e:
        raise EmptyDatasetError(f"{path} is empty") from e
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
        raise DatasetError(f"Cannot read {path}: {e}") from e

    return [_unflatten_row(row) for row in pdf.to_dict("records")]


def load_employees(path: Path | str, strict: bool = True) -> list[Employee]:
    """Read and validate the employee dataset.

    Args:
        path: `.json` or `.csv` file.
        strict: When True any invalid record aborts the load; otherwise invalid
            records are dropped with a warning.

    Returns:
        Validated employees in file order.

    Raises:
        DatasetError: missing file, unsupported format, or invalid records
            in strict mode.
        EmptyDatasetError: the file holds no (valid) records.
    """
    path = Path(path)
    if not path.is_file():
        raise DatasetError(f"Employee dataset not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        records = _read_json(path)
    elif suffix == ".csv":
        records = _read_csv(path)
    else:
        raise DatasetError(f"Unsupported dataset format {suffix!r} (expected .json or .csv)")

    if not records:
        raise EmptyDatasetError(f"{path} contains no employee records")

    employees, bad = validate_records(records)
    if bad:
        if strict:
            raise DatasetError(f"{bad} of {len(records)} records in {path} failed validation")
        log.warning("Dropped %d invalid records from %s", bad, path)

    if not employees:
        raise EmptyDatasetError(f"{path} contains no valid employee records")

    log.info("Loaded %d employees from %s", len(employees), path)
    return employees
