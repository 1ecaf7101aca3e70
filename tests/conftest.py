from __future__ import annotations

from decimal import Decimal

import pytest

from employee_aggregates.models import Address, Company, Employee


def make_address(post_code: str = "SW1A 1AA", line1: str = "1 High Street", city: str = "London") -> Address:
    return Address(line1=line1, city=city, post_code=post_code)


def make_employee(
    first_name: str = "Jane",
    surname: str = "Smith",
    salary: str | int = "30000.00",
    company: str = "HSBC",
    post_code: str = "SW1A 1AA",
    line1: str = "1 High Street",
    correspondence: Address | None = None,
) -> Employee:
    return Employee(
        first_name=first_name,
        surname=surname,
        salary=Decimal(str(salary)),
        company=Company(name=company),
        home_address=make_address(post_code=post_code, line1=line1),
        correspondence_address=correspondence,
    )


@pytest.fixture
def employees() -> list[Employee]:
    office = make_address(post_code="EC2N 4AY", line1="8 Canada Square")
    return [
        make_employee("Oliver", "Brown", "41000.75", "BP", "LS1 4AP", "2 Park Row"),
        make_employee("Holly", "Davies", "52000.10", "HSBC", "LS2 7EW", "10 Albion St", office),
        make_employee("Amelia", "Jones", "38000.99", "BP", "M1 1AE", "3 Piccadilly", office),
        make_employee("Holly", "Davies", "47000.00", "Barclays plc", "BS1 5TR", "7 Queen Sq"),
        make_employee("Jack", "Wilson", "29000.50", "HSBC", "LS6 3AA", "44 Headingley Ln"),
    ]
