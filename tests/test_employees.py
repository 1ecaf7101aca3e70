from __future__ import annotations

from decimal import Decimal

import pytest

from employee_aggregates.aggregate.employees import (
    count_distinct_addresses,
    count_proximity_groups,
    distinct_addresses,
    find_duplicate_name,
    proximity_groups,
)
from employee_aggregates.aggregate.grouping import group_by
from employee_aggregates.errors import MalformedPostCodeError
from employee_aggregates.models import Address, Company, Employee
from conftest import make_address, make_employee


def test_find_duplicate_name_returns_first_shared_name(employees: list[Employee]) -> None:
    assert find_duplicate_name(employees) == "Holly Davies"


def test_find_duplicate_name_respects_dataset_order() -> None:
    data = [
        make_employee("Jack", "Wilson", post_code="LS1 1AA"),
        make_employee("Holly", "Davies", post_code="LS1 1AA"),
        make_employee("Holly", "Davies", post_code="M1 1AE"),
        make_employee("Jack", "Wilson", post_code="M1 1AE"),
    ]
    assert find_duplicate_name(data) == "Jack Wilson"


def test_identical_records_are_not_duplicates() -> None:
    twin = make_employee("Holly", "Davies")
    assert find_duplicate_name([twin, twin, make_employee("Amelia", "Jones")]) is None
    assert find_duplicate_name([twin, make_employee("Holly", "Davies")]) is None


def test_find_duplicate_name_empty_dataset() -> None:
    assert find_duplicate_name([]) is None


def test_proximity_groups_keep_first_seen_order(employees: list[Employee]) -> None:
    assert list(proximity_groups(employees).items()) == [("LS", 3), ("M1", 1), ("BS", 1)]


def test_count_proximity_groups_applies_min_size(employees: list[Employee]) -> None:
    assert count_proximity_groups(employees) == 0
    assert count_proximity_groups(employees, min_size=3) == 1
    assert count_proximity_groups(employees, min_size=1) == 3


def test_count_proximity_groups_five_or_more() -> None:
    data = [make_employee(surname=f"S{i}", post_code=f"LS{i} 1AA") for i in range(5)]
    data += [make_employee(surname=f"T{i}", post_code=f"M{i} 1AA") for i in range(4)]
    assert count_proximity_groups(data) == 1


def test_short_post_code_is_fatal() -> None:
    bad = Employee.model_construct(
        first_name="X",
        surname="Y",
        salary=Decimal("1"),
        company=Company(name="BP"),
        home_address=Address.model_construct(line1="", line2=None, city="", post_code="L"),
        correspondence_address=None,
    )
    with pytest.raises(MalformedPostCodeError):
        count_proximity_groups([make_employee(), bad])


def test_distinct_addresses_skip_absent_and_collapse_shared(employees: list[Employee]) -> None:
    # 5 homes + one shared office used by two employees
    assert count_distinct_addresses(employees) == 6
    office = make_address(post_code="EC2N 4AY", line1="8 Canada Square")
    assert distinct_addresses(employees).count(office) == 1


def test_home_address_equal_to_someone_elses_correspondence() -> None:
    home = make_address(post_code="LS1 4AP", line1="2 Park Row")
    data = [
        make_employee("A", "B", post_code="LS1 4AP", line1="2 Park Row"),
        make_employee("C", "D", post_code="M1 1AE", correspondence=home),
    ]
    assert count_distinct_addresses(data) == 2


def test_distinct_addresses_at_least_distinct_homes(employees: list[Employee]) -> None:
    homes = {e.home_address for e in employees}
    assert count_distinct_addresses(employees) >= len(homes)


def test_employee_pipelines_are_idempotent(employees: list[Employee]) -> None:
    snapshot = list(employees)
    first = (find_duplicate_name(employees), count_proximity_groups(employees), count_distinct_addresses(employees))
    second = (find_duplicate_name(employees), count_proximity_groups(employees), count_distinct_addresses(employees))
    assert first == second
    assert employees == snapshot


def test_group_by_keeps_key_and_member_order() -> None:
    groups = group_by(["bb", "a", "bc", "ad", "c"], lambda s: s[0])
    assert list(groups.items()) == [("b", ["bb", "bc"]), ("a", ["a", "ad"]), ("c", ["c"])]
