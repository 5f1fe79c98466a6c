"""
In-memory customer lookup.

Shell: answers lookups as Result[Maybe[Customer], CustomerLookupError].
"""

from collections.abc import Hashable, Iterable, Mapping

from returns.maybe import Maybe
from returns.result import Failure, Result, Success

from fpplayground.models import Customer
from fpplayground.observability import get_logger
from fpplayground.shell.errors import CustomerLookupError

logger = get_logger("directory")


class InMemoryCustomerDirectory:
    """
    Customers keyed by an arbitrary hashable key.

    A key mapped to None is known to be absent. Keys listed as unavailable
    always fail, which stands in for a backend that cannot be reached.
    """

    def __init__(
        self,
        customers: Mapping[Hashable, Customer | None],
        unavailable: Iterable[Hashable] = (),
    ) -> None:
        self._customers = dict(customers)
        self._unavailable = tuple(dict.fromkeys(unavailable))

    def __call__(self, key: Hashable) -> Result[Maybe[Customer], CustomerLookupError]:
        return self.find(key)

    def find(self, key: Hashable) -> Result[Maybe[Customer], CustomerLookupError]:
        """Look up key; unknown keys resolve to Nothing."""
        if key in self._unavailable:
            logger.debug("lookup_unavailable", key=key)
            return Failure(CustomerLookupError(key, "customer source unavailable"))
        return Success(Maybe.from_optional(self._customers.get(key)))

    @property
    def keys(self) -> tuple[Hashable, ...]:
        """Every known key, unavailable ones last."""
        known = tuple(self._customers)
        return known + tuple(key for key in self._unavailable if key not in self._customers)
