"""
Shell: lookups, aggregation and file loading, all returning Result values.
"""

from fpplayground.shell.aggregator import Lookup, average_age, resolve_customers, total_age
from fpplayground.shell.directory import InMemoryCustomerDirectory
from fpplayground.shell.errors import (
    CustomerLookupError,
    EmptyAggregationError,
    FpPlaygroundError,
)
from fpplayground.shell.history import (
    load_directory,
    load_history,
    parse_customer,
    parse_directory,
    parse_history,
    read_json,
)

__all__ = [
    "Lookup",
    "average_age",
    "resolve_customers",
    "total_age",
    "InMemoryCustomerDirectory",
    "CustomerLookupError",
    "EmptyAggregationError",
    "FpPlaygroundError",
    "load_directory",
    "load_history",
    "parse_customer",
    "parse_directory",
    "parse_history",
    "read_json",
]
