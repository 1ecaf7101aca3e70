"""Ordered grouping step shared by the aggregation pipelines."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def group_by(items: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Bucket `items` by `key`.

    Keys appear in the order they are first seen and each bucket keeps the
    input order of its members, so downstream sorts can rely on a stable,
    reproducible starting order.

    Args:
        items: Records to group.
        key: Function deriving the group key from a record.

    Returns:
        Insertion-ordered dict of key -> list of records.
    """
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups
