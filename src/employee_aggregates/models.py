"""Pydantic models for the employee records and the aggregation results.

Records are frozen so that equality and hashing are structural: two employees
compare equal when every field (including nested addresses and company)
matches, and records can be placed in sets for deduplication.
"""

from __future__ import annotations

from decimal import Decimal
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel

_RECORD_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)

class Address(BaseModel):
    """Postal address. Only `post_code` is used by the pipelines."""
    model_config = _RECORD_CONFIG
    line1: str = ""
    line2: str | None = None
    city: str = ""
    post_code: str = Field(..., min_length=2)

class Company(BaseModel):
    """Employer of an employee."""
    model_config = _RECORD_CONFIG
    name: str = Field(..., min_length=1)
    industry: str | None = None

class Employee(BaseModel):
    """Schema for a single employment record.

    Attributes:
        first_name: Given name.
        surname: Family name.
        salary: Annual salary; fractional pence are allowed.
        company: Employing company.
        home_address: Required home address.
        correspondence_address: Optional correspondence address; ``None``
            when the employee has not supplied one.
    """
    model_config = _RECORD_CONFIG
    first_name: str
    surname: str
    salary: Decimal = Field(..., ge=0)
    company: Company
    home_address: Address
    correspondence_address: Address | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.surname}"

class CompanyPayroll(BaseModel):
    """Total annual salary paid by one company."""
    model_config = ConfigDict(frozen=True, extra="forbid")
    company_name: str
    total: int = Field(..., ge=0)

class WordCount(BaseModel):
    """Number of occurrences of one token."""
    model_config = ConfigDict(frozen=True, extra="forbid")
    token: str
    count: int = Field(..., ge=1)
