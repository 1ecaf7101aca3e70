"""employee_aggregates package.

Contains deterministic aggregation routines over a fixed, in-memory dataset of
employment records: duplicate-name detection, post code proximity grouping,
address deduplication, company payroll totals, word-frequency counting and a
weighted matrix summation.

Architecture:
- Pydantic models validate the Employee / Address / Company records
- pandas is used for the group-and-reduce stages
- numpy is used for the integer reductions and the seeded random window
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
