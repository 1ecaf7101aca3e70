"""Aggregation pipelines over employee records and plain values.

Each module exposes pure functions: the dataset (or text / numbers) is passed
in, nothing is mutated, and repeated calls on the same input return identical
results.
"""

from employee_aggregates.aggregate.employees import (
    count_distinct_addresses,
    count_proximity_groups,
    find_duplicate_name,
)
from employee_aggregates.aggregate.numeric import random_window_residues, weighted_matrix_sum
from employee_aggregates.aggregate.payroll import top_company_payrolls
from employee_aggregates.aggregate.text import word_frequencies

__all__ = [
    "count_distinct_addresses",
    "count_proximity_groups",
    "find_duplicate_name",
    "random_window_residues",
    "top_company_payrolls",
    "weighted_matrix_sum",
    "word_frequencies",
]
