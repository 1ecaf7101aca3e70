from __future__ import annotations

from pathlib import Path

import pytest

from employee_aggregates.config import get_settings

ENV_VARS = [
    "EMPLOYEES_DATASET",
    "PAYROLL_TOP_N",
    "PROXIMITY_MIN_GROUP_SIZE",
    "POSTCODE_PREFIX_LENGTH",
    "LOG_PATH",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = get_settings()
    assert s.dataset_path == Path("data/employees.json")
    assert s.payroll_top_n == 10
    assert s.proximity_min_group_size == 5
    assert s.postcode_prefix_length == 2
    assert s.log_path == Path("logs/aggregates.log")
    assert s.log_level == "INFO"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EMPLOYEES_DATASET", "/tmp/staff.csv")
    monkeypatch.setenv("PAYROLL_TOP_N", "3")
    monkeypatch.setenv("LOG_PATH", "")
    s = get_settings()
    assert s.dataset_path == Path("/tmp/staff.csv")
    assert s.payroll_top_n == 3
    assert s.log_path is None


@pytest.mark.parametrize("value", ["ten", "0", "-2"])
def test_invalid_numbers_raise(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("PROXIMITY_MIN_GROUP_SIZE", value)
    with pytest.raises(RuntimeError):
        get_settings()
