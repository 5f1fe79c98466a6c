"""
Failures surfaced by the shell as Result values.
"""

from typing import Any


class FpPlaygroundError(Exception):
    """Base class for expected failures."""


class CustomerLookupError(FpPlaygroundError):
    """A lookup could not tell whether a customer exists."""

    def __init__(self, key: Any, reason: str = "lookup failed") -> None:
        super().__init__(f"{reason}: {key!r}")
        self.key = key
        self.reason = reason


class EmptyAggregationError(FpPlaygroundError):
    """Nothing was resolved, so there is nothing to average."""

    def __init__(self) -> None:
        super().__init__("no customers resolved, average is undefined")
