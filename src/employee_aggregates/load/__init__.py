"""Dataset loading utilities.

Reads employee records from JSON or CSV files and validates them against the
Pydantic `Employee` model before any pipeline sees them.
"""
