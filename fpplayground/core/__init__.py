"""
Pure functions over customer snapshots: diffs, pairing, folds and ages.
"""

from fpplayground.core.ages import DAYS_PER_YEAR, AgeTotal, whole_years
from fpplayground.core.diff import (
    COMPARABLE_ATTRIBUTES,
    ComparableAttribute,
    customer_diff,
    format_instant,
)
from fpplayground.core.folds import fold_left
from fpplayground.core.pairing import (
    PairingStrategy,
    describe_changes,
    diffs_by_fold,
    diffs_by_index,
    diffs_by_zip,
    pairwise_diff,
)

__all__ = [
    "DAYS_PER_YEAR",
    "AgeTotal",
    "whole_years",
    "COMPARABLE_ATTRIBUTES",
    "ComparableAttribute",
    "customer_diff",
    "format_instant",
    "fold_left",
    "PairingStrategy",
    "describe_changes",
    "diffs_by_fold",
    "diffs_by_index",
    "diffs_by_zip",
    "pairwise_diff",
]
