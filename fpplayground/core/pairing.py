"""
Diffs between consecutive snapshots of an audit trail.

Three strategies produce the same output: an explicit cursor, zipping the
trail with its tail, and a left fold that carries the previous snapshot.
Core: pure, no I/O.
"""

from collections.abc import Sequence
from enum import Enum

from deal import ensure
from returns.maybe import Maybe, Nothing, Some

from fpplayground.core.diff import customer_diff
from fpplayground.core.folds import fold_left
from fpplayground.models import Customer


class PairingStrategy(Enum):
    """Ways of walking consecutive pairs."""
    INDEX = "index"
    ZIP = "zip"
    FOLD = "fold"


@ensure(lambda customers, result: len(result) == max(0, len(customers) - 1))
def diffs_by_index(customers: Sequence[Customer]) -> tuple[str, ...]:
    """
    Walk the trail with an explicit cursor.

    >>> from datetime import datetime, timezone
    >>> from fpplayground.models import Address
    >>> jan = Customer("Jan", Address(), datetime(2014, 3, 18, 12, 0, tzinfo=timezone.utc), True)
    >>> diffs_by_index([jan, jan.with_changes(name="John")])
    ('name: Jan -> John',)
    >>> diffs_by_index([jan])           # Edge: single snapshot
    ()
    """
    return tuple(
        customer_diff(customers[i], customers[i + 1])
        for i in range(len(customers) - 1)
    )


@ensure(lambda customers, result: len(result) == max(0, len(customers) - 1))
def diffs_by_zip(customers: Sequence[Customer]) -> tuple[str, ...]:
    """
    Zip the trail with its own tail.

    >>> from datetime import datetime, timezone
    >>> from fpplayground.models import Address
    >>> jan = Customer("Jan", Address(), datetime(2014, 3, 18, 12, 0, tzinfo=timezone.utc), True)
    >>> diffs_by_zip([jan, jan, jan.with_changes(active=False)])
    ('', 'is active: true -> false')
    >>> diffs_by_zip([])                # Edge: empty trail
    ()
    """
    return tuple(
        customer_diff(previous, current)
        for previous, current in zip(customers, customers[1:])
    )


_FoldState = tuple[Maybe[Customer], tuple[str, ...]]


def _step(state: _FoldState, current: Customer) -> _FoldState:
    previous, diffs = state
    extended = previous.map(lambda before: diffs + (customer_diff(before, current),))
    return Some(current), extended.value_or(diffs)


@ensure(lambda customers, result: len(result) == max(0, len(customers) - 1))
def diffs_by_fold(customers: Sequence[Customer]) -> tuple[str, ...]:
    """
    Fold the trail, carrying (previous snapshot, diffs so far).

    >>> from datetime import datetime, timezone
    >>> from fpplayground.models import Address
    >>> jan = Customer("Jan", Address(), datetime(2014, 3, 18, 12, 0, tzinfo=timezone.utc), True)
    >>> diffs_by_fold([jan, jan.with_changes(name="John"), jan])
    ('name: Jan -> John', 'name: John -> Jan')
    >>> diffs_by_fold([jan])            # Edge: single snapshot
    ()
    """
    initial: _FoldState = (Nothing, ())
    _, diffs = fold_left(customers, initial, _step)
    return diffs


_STRATEGIES = {
    PairingStrategy.INDEX: diffs_by_index,
    PairingStrategy.ZIP: diffs_by_zip,
    PairingStrategy.FOLD: diffs_by_fold,
}


def pairwise_diff(
    customers: Sequence[Customer],
    strategy: PairingStrategy = PairingStrategy.ZIP,
) -> tuple[str, ...]:
    """
    Diff every snapshot against its predecessor.

    Positions are preserved: identical neighbours yield an empty string.

    >>> from datetime import datetime, timezone
    >>> from fpplayground.models import Address
    >>> jan = Customer("Jan", Address(), datetime(2014, 3, 18, 12, 0, tzinfo=timezone.utc), True)
    >>> pairwise_diff([jan, jan], PairingStrategy.FOLD)  # Edge: unchanged pair keeps its slot
    ('',)
    >>> pairwise_diff([])               # Edge: empty trail
    ()
    """
    return _STRATEGIES[strategy](customers)


def describe_changes(
    customers: Sequence[Customer],
    strategy: PairingStrategy = PairingStrategy.ZIP,
) -> tuple[str, ...]:
    """
    Like pairwise_diff, dropping pairs where nothing changed.

    >>> from datetime import datetime, timezone
    >>> from fpplayground.models import Address
    >>> jan = Customer("Jan", Address(), datetime(2014, 3, 18, 12, 0, tzinfo=timezone.utc), True)
    >>> describe_changes([jan, jan, jan.with_changes(name="John")])
    ('name: Jan -> John',)
    >>> describe_changes([jan, jan])    # Edge: no changes at all
    ()
    """
    return tuple(diff for diff in pairwise_diff(customers, strategy) if diff)
