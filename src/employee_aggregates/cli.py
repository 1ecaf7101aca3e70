"""Command-line interface for running the aggregation pipelines.

Provides subcommands: `duplicates`, `proximity`, `addresses`, `payroll`,
`words`, `matrix`, `random-window` and `all`. Each command is implemented as a
`cmd_*` function that accepts an argparse namespace and returns the lines it
printed.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from dotenv import load_dotenv

from employee_aggregates.aggregate.employees import (
    count_distinct_addresses,
    count_proximity_groups,
    find_duplicate_name,
)
from employee_aggregates.aggregate.numeric import random_window_residues, weighted_matrix_sum
from employee_aggregates.aggregate.payroll import top_company_payrolls
from employee_aggregates.aggregate.text import word_frequencies
from employee_aggregates.config import Settings, get_settings
from employee_aggregates.errors import AggregateError
from employee_aggregates.load.dataset import load_employees
from employee_aggregates.logging_config import configure_logging
from employee_aggregates.models import Employee

log = logging.getLogger(__name__)

NO_MATCH = "no match"

# 8x8 board used when no values are given
DEFAULT_ROWS = [6432, 8997, 8500, 7036, 9395, 9372, 9715, 9634]
DEFAULT_COLUMNS = [6199, 9519, 6745, 8864, 8788, 7322, 7341, 7395]


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _employees(args: argparse.Namespace, s: Settings) -> list[Employee]:
    """Load the dataset named on the command line, falling back to settings."""
    path = args.dataset if getattr(args, "dataset", None) is not None else s.dataset_path
    return load_employees(path, strict=not getattr(args, "lenient", False))


def _emit(lines: Sequence[str]) -> list[str]:
    for line in lines:
        print(line)
    return list(lines)


# --------------------------------------------------
# EMPLOYEE PIPELINES
# --------------------------------------------------
def cmd_duplicates(args: argparse.Namespace) -> list[str]:
    """Print the first duplicated full name, or `no match`."""
    name = find_duplicate_name(_employees(args, get_settings()))
    return _emit([name if name is not None else NO_MATCH])


def cmd_proximity(args: argparse.Namespace) -> list[str]:
    """Print the number of post code groups with enough members."""
    s = get_settings()
    min_size = args.min_size if args.min_size is not None else s.proximity_min_group_size
    result = count_proximity_groups(
        _employees(args, s),
        min_size=min_size,
        prefix_length=s.postcode_prefix_length,
    )
    return _emit([str(result)])


def cmd_addresses(args: argparse.Namespace) -> list[str]:
    """Print the number of distinct home and correspondence addresses."""
    return _emit([str(count_distinct_addresses(_employees(args, get_settings())))])


def cmd_payroll(args: argparse.Namespace) -> list[str]:
    """Print the best-paying companies."""
    s = get_settings()
    top_n = args.top_n if args.top_n is not None else s.payroll_top_n
    return _emit(top_company_payrolls(_employees(args, s), top_n=top_n))


# --------------------------------------------------
# VALUE PIPELINES
# --------------------------------------------------
def cmd_words(args: argparse.Namespace) -> list[str]:
    """Print token counts for the given text or file."""
    if args.file is not None:
        text = Path(args.file).read_text(encoding="utf-8")
    else:
        # allow literal "\n" separators when passed on the shell
        text = args.text.replace("\\n", "\n")
    return _emit(word_frequencies(text))


def cmd_matrix(args: argparse.Namespace) -> list[str]:
    """Print the weighted matrix sum."""
    return _emit([str(weighted_matrix_sum(args.rows, args.columns))])


def cmd_random_window(args: argparse.Namespace) -> list[str]:
    """Print the seeded random window residues, space separated."""
    residues = random_window_residues(seed=args.seed)
    return _emit([" ".join(str(r) for r in residues)])


# --------------------------------------------------
# ALL
# --------------------------------------------------
def cmd_all(args: argparse.Namespace) -> list[str]:
    """Run every employee pipeline against one loaded dataset."""
    s = get_settings()
    employees = _employees(args, s)

    name = find_duplicate_name(employees)
    lines = [
        f"duplicate name: {name if name is not None else NO_MATCH}",
        "proximity groups: "
        f"{count_proximity_groups(employees, s.proximity_min_group_size, s.postcode_prefix_length)}",
        f"distinct addresses: {count_distinct_addresses(employees)}",
        "payroll:",
    ]
    lines.extend(f"  {line}" for line in top_company_payrolls(employees, s.payroll_top_n))
    lines.append(f"matrix sum: {weighted_matrix_sum(DEFAULT_ROWS, DEFAULT_COLUMNS)}")
    return _emit(lines)


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    Employee commands accept `--dataset` to override `EMPLOYEES_DATASET` and
    `--lenient` to drop invalid records instead of failing.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="employee-aggregates")
    sub = p.add_subparsers(dest="cmd", required=True)

    dataset_opts = argparse.ArgumentParser(add_help=False)
    dataset_opts.add_argument("--dataset", type=Path, default=None)
    dataset_opts.add_argument("--lenient", action="store_true")

    sub.add_parser("duplicates", parents=[dataset_opts])

    p_proximity = sub.add_parser("proximity", parents=[dataset_opts])
    p_proximity.add_argument("--min-size", type=int, default=None)

    sub.add_parser("addresses", parents=[dataset_opts])

    p_payroll = sub.add_parser("payroll", parents=[dataset_opts])
    p_payroll.add_argument("--top-n", type=int, default=None)

    p_words = sub.add_parser("words")
    src = p_words.add_mutually_exclusive_group(required=True)
    src.add_argument("--text")
    src.add_argument("--file", type=Path)

    p_matrix = sub.add_parser("matrix")
    p_matrix.add_argument("--rows", type=int, nargs="+", default=DEFAULT_ROWS)
    p_matrix.add_argument("--columns", type=int, nargs="+", default=DEFAULT_COLUMNS)

    p_random = sub.add_parser("random-window")
    p_random.add_argument("--seed", type=int, default=0)

    sub.add_parser("all", parents=[dataset_opts])

    return p


COMMANDS = {
    "duplicates": cmd_duplicates,
    "proximity": cmd_proximity,
    "addresses": cmd_addresses,
    "payroll": cmd_payroll,
    "words": cmd_words,
    "matrix": cmd_matrix,
    "random-window": cmd_random_window,
    "all": cmd_all,
}


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    s = get_settings()
    configure_logging(s.log_path, s.log_level)

    try:
        COMMANDS[args.cmd](args)
    except AggregateError as e:
        log.error("%s failed: %s", args.cmd, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
