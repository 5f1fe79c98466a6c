"""
Aggregation over fallible customer lookups.

Shell: lookups may fail, so everything here returns Result[T, E].
"""

from collections.abc import Callable, Iterable, Sequence
from datetime import datetime
from typing import TypeVar

from returns.maybe import Maybe
from returns.result import Failure, Result, Success

from fpplayground.core.ages import AgeTotal
from fpplayground.core.folds import fold_left
from fpplayground.models import Customer
from fpplayground.observability import get_logger
from fpplayground.shell.errors import CustomerLookupError, EmptyAggregationError

K = TypeVar("K")

Lookup = Callable[[K], Result[Maybe[Customer], CustomerLookupError]]

logger = get_logger("aggregator")


def resolve_customers(
    keys: Iterable[K], lookup: Lookup[K]
) -> Result[tuple[Customer, ...], CustomerLookupError]:
    """
    Resolve keys in order, stopping at the first failed lookup.

    Args:
        keys: Keys to resolve, consulted left to right
        lookup: Called exactly once per key until one fails

    Returns:
        Success with the present customers in key order (absent keys are
        dropped), or the failed lookup's own Failure
    """
    found: list[Customer] = []
    for key in keys:
        outcome = lookup(key)
        if isinstance(outcome, Failure):
            logger.warning("lookup_failed", key=key, error=str(outcome.failure()))
            return outcome
        customer = outcome.unwrap().value_or(None)
        if customer is not None:
            found.append(customer)
    return Success(tuple(found))


def total_age(customers: Sequence[Customer], at: datetime) -> AgeTotal:
    """Fold customers into an AgeTotal relative to at."""
    return fold_left(
        customers,
        AgeTotal.ZERO,
        lambda total, customer: total + AgeTotal.of(customer.born_on, at),
    )


def _average(customers: Sequence[Customer], at: datetime) -> Result[float, EmptyAggregationError]:
    total = total_age(customers, at)
    if total.is_empty:
        logger.info("average_age_empty")
        return Failure(EmptyAggregationError())
    return Success(total.average())


def average_age(
    keys: Iterable[K], lookup: Lookup[K], at: datetime
) -> Result[float, CustomerLookupError | EmptyAggregationError]:
    """
    Average whole-year age of the customers behind keys.

    A failed lookup is returned as is; resolving no customers at all is an
    EmptyAggregationError.
    """
    return resolve_customers(keys, lookup).bind(lambda customers: _average(customers, at))
