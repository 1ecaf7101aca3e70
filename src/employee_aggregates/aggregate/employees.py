"""Record-level aggregations over the employee dataset.

Functions in this module take the dataset as a sequence of `Employee` records
and reduce it to a single answer:

- `find_duplicate_name`: first employee sharing a full name with another record
- `count_proximity_groups`: neighbourhoods (post code prefix) with enough residents
- `count_distinct_addresses`: distinct home + correspondence addresses
"""
from __future__ import annotations

import logging
from typing import Iterator, Sequence

from employee_aggregates.aggregate.grouping import group_by
from employee_aggregates.errors import MalformedPostCodeError
from employee_aggregates.models import Address, Employee

log = logging.getLogger(__name__)


# =========================================================
# DUPLICATE NAMES
# =========================================================

def find_duplicate_name(employees: Sequence[Employee]) -> str | None:
    """Return the full name of the first employee whose name is shared.

    A candidate matches when some *other* record, i.e. one that is not equal
    to it as a complete record, has the same first name and surname. The scan
    is quadratic in the number of employees.

    Args:
        employees: Dataset in its original order.

    Returns:
        ``"<first_name> <surname>"`` of the first matching employee, or
        ``None`` when no two distinct records share a name.
    """
    for candidate in employees:
        if any(
            other != candidate
            and other.first_name == candidate.first_name
            and other.surname == candidate.surname
            for other in employees
        ):
            log.info("Duplicate name found: %s", candidate.full_name)
            return candidate.full_name

    log.info("No duplicate names among %d employees", len(employees))
    return None


# =========================================================
# POST CODE PROXIMITY
# =========================================================

def postcode_prefix(employee: Employee, prefix_length: int = 2) -> str:
    """Return the proximity key: the leading characters of the home post code.

    Raises:
        MalformedPostCodeError: if the post code is shorter than `prefix_length`.
    """
    post_code = employee.home_address.post_code
    if len(post_code) < prefix_length:
        raise MalformedPostCodeError(post_code, prefix_length)
    return post_code[:prefix_length]


def proximity_groups(employees: Sequence[Employee], prefix_length: int = 2) -> dict[str, int]:
    """Return member counts per post code prefix, in first-seen prefix order."""
    groups = group_by(employees, lambda e: postcode_prefix(e, prefix_length))
    return {prefix: len(members) for prefix, members in groups.items()}


def count_proximity_groups(
    employees: Sequence[Employee],
    min_size: int = 5,
    prefix_length: int = 2,
) -> int:
    """Count the groups of at least `min_size` employees living close together.

    Employees whose home post codes share the first `prefix_length`
    characters form one group.

    Args:
        employees: Dataset to group.
        min_size: Minimum group size to be counted (default 5).
        prefix_length: Post code characters used as the key (default 2).

    Returns:
        Number of qualifying groups.
    """
    sizes = proximity_groups(employees, prefix_length)
    result = sum(1 for size in sizes.values() if size >= min_size)
    log.info(
        "Proximity groups: %d of %d have >= %d members",
        result,
        len(sizes),
        min_size,
    )
    return result


# =========================================================
# ADDRESSES
# =========================================================

def _employee_addresses(employee: Employee) -> Iterator[Address]:
    yield employee.home_address
    if employee.correspondence_address is not None:
        yield employee.correspondence_address


def distinct_addresses(employees: Sequence[Employee]) -> list[Address]:
    """Return structurally distinct home and correspondence addresses.

    Absent correspondence addresses are skipped. Addresses are returned in the
    order they are first seen.
    """
    combined = (address for e in employees for address in _employee_addresses(e))
    return list(dict.fromkeys(combined))


def count_distinct_addresses(employees: Sequence[Employee]) -> int:
    """Return the number of distinct home and correspondence addresses."""
    result = len(distinct_addresses(employees))
    log.info("Distinct addresses across %d employees: %d", len(employees), result)
    return result
