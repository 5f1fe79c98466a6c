"""
fpplayground

Immutable customer records, attribute diffs over audit trails and
averages over fallible lookups, written as pure functions and Result values.
"""

from fpplayground.config import PlaygroundConfig
from fpplayground.core import (
    AgeTotal,
    PairingStrategy,
    customer_diff,
    describe_changes,
    fold_left,
    format_instant,
    pairwise_diff,
)
from fpplayground.models import (
    Address,
    Customer,
    deactivate,
    normalize_countries,
    normalize_country,
)
from fpplayground.shell import (
    CustomerLookupError,
    EmptyAggregationError,
    InMemoryCustomerDirectory,
    average_age,
    resolve_customers,
)

__all__ = [
    "PlaygroundConfig",
    "AgeTotal",
    "PairingStrategy",
    "customer_diff",
    "describe_changes",
    "fold_left",
    "format_instant",
    "pairwise_diff",
    "Address",
    "Customer",
    "deactivate",
    "normalize_countries",
    "normalize_country",
    "CustomerLookupError",
    "EmptyAggregationError",
    "InMemoryCustomerDirectory",
    "average_age",
    "resolve_customers",
]
