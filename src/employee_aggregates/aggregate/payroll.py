"""Company payroll totals.

Salaries are truncated to whole pounds per employee, summed per company name
with pandas, ranked by total (descending, stable so ties keep the order in
which companies first appear) and rendered as ``"<company> - £<amount>"``.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Sequence

import pandas as pd

from employee_aggregates.models import CompanyPayroll, Employee

log = logging.getLogger(__name__)

CURRENCY_SYMBOL = "£"


def _salary_frame(employees: Sequence[Employee]) -> pd.DataFrame:
    """Return one row per employee with `company_name` and truncated `salary`."""
    return pd.DataFrame(
        {
            "company_name": pd.Series([e.company.name for e in employees], dtype="object"),
            # int() on Decimal drops the fractional part
            "salary": pd.Series([int(e.salary) for e in employees], dtype="int64"),
        }
    )


def company_payroll_totals(employees: Sequence[Employee]) -> list[CompanyPayroll]:
    """Return every company's annual payroll, largest first.

    Args:
        employees: Dataset of employee records.

    Returns:
        List of `CompanyPayroll`, one per company name, sorted by `total`
        descending. Companies with equal totals keep first-appearance order.
    """
    pdf = _salary_frame(employees)

    totals = (
        pdf.groupby("company_name", sort=False)["salary"]
        .sum()
        .reset_index()
        .rename(columns={"salary": "total"})
        .sort_values("total", ascending=False, kind="stable")
    )

    log.info("Computed payroll for %d companies", len(totals))
    return [
        CompanyPayroll(company_name=row["company_name"], total=int(row["total"]))
        for row in totals.to_dict("records")
    ]


def format_pounds(amount: int | Decimal) -> str:
    """Render `amount` as pounds with thousands separators and two decimals."""
    return f"{CURRENCY_SYMBOL}{amount:,.2f}"


def format_payroll_line(payroll: CompanyPayroll) -> str:
    return f"{payroll.company_name} - {format_pounds(payroll.total)}"


def top_company_payrolls(employees: Sequence[Employee], top_n: int = 10) -> list[str]:
    """Return the `top_n` best-paying companies as formatted lines.

    Args:
        employees: Dataset of employee records.
        top_n: Number of companies to report (default 10).

    Returns:
        Up to `top_n` strings such as ``"HSBC - £11,469,144.00"``.

    Raises:
        ValueError: if `top_n` is smaller than 1.
    """
    if top_n < 1:
        raise ValueError(f"top_n must be >= 1, got {top_n}")

    ranked = company_payroll_totals(employees)
    return [format_payroll_line(p) for p in ranked[:top_n]]
