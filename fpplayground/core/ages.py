"""
Customer ages and the accumulator used to average them.

Core: pure, no I/O.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from deal import pre

# A year is 365 days of elapsed time; leap days are not compensated.
DAYS_PER_YEAR = 365


@pre(lambda born_on, at: born_on.tzinfo is not None and at.tzinfo is not None)
def whole_years(born_on: datetime, at: datetime) -> int:
    """
    Whole years elapsed between born_on and at.

    >>> from datetime import timezone
    >>> whole_years(datetime(1970, 1, 1, tzinfo=timezone.utc), datetime(2020, 12, 31, tzinfo=timezone.utc))
    51
    """
    return (at - born_on).days // DAYS_PER_YEAR


@dataclass(frozen=True)
class AgeTotal:
    """
    Running (total years, customer count) pair.

    Combines by pairwise addition; ZERO is the neutral element. The
    average is only computed once the total is complete.

    >>> AgeTotal.ZERO + AgeTotal(51, 1) + AgeTotal(31, 1)
    AgeTotal(years=82, count=2)
    >>> (AgeTotal(51, 1) + AgeTotal(31, 1)).average()
    41.0
    >>> AgeTotal.ZERO.is_empty          # Edge: nothing accumulated
    True
    """
    years: int = 0
    count: int = 0

    ZERO: ClassVar["AgeTotal"]

    def __add__(self, other: "AgeTotal") -> "AgeTotal":
        return AgeTotal(self.years + other.years, self.count + other.count)

    @classmethod
    def of(cls, born_on: datetime, at: datetime) -> "AgeTotal":
        """Total holding a single customer's age."""
        return cls(whole_years(born_on, at), 1)

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    def average(self) -> float:
        """Mean age in years. Callers must check is_empty first."""
        return self.years / self.count


AgeTotal.ZERO = AgeTotal()
