"""
Attribute-level differences between two customer snapshots.

Core: pure, no I/O.
"""

from collections.abc import Callable
from datetime import datetime, timezone
from typing import NamedTuple

from deal import ensure, post, pre

from fpplayground.models import Customer

SEPARATOR = " | "
ARROW = " -> "


class ComparableAttribute(NamedTuple):
    """A named projection of a customer to text."""
    name: str
    extract: Callable[[Customer], str]


@pre(lambda moment: moment.tzinfo is not None)
@post(lambda result: result.endswith("Z"))
def format_instant(moment: datetime) -> str:
    """
    Render an aware datetime as an ISO-8601 UTC instant.

    Seconds are omitted when zero and fractions are printed in groups of
    three digits.

    >>> from datetime import timedelta
    >>> format_instant(datetime(2014, 3, 18, 12, 0, tzinfo=timezone.utc))
    '2014-03-18T12:00Z'
    >>> format_instant(datetime(2014, 3, 18, 12, 0, 5, tzinfo=timezone.utc))
    '2014-03-18T12:00:05Z'
    >>> format_instant(datetime(2014, 3, 18, 12, 0, 5, 250000, tzinfo=timezone.utc))
    '2014-03-18T12:00:05.250Z'
    >>> format_instant(datetime(2014, 3, 18, 14, 0, tzinfo=timezone(timedelta(hours=2))))
    '2014-03-18T12:00Z'
    """
    utc = moment.astimezone(timezone.utc)
    text = f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}T{utc.hour:02d}:{utc.minute:02d}"
    if utc.second or utc.microsecond:
        text += f":{utc.second:02d}"
    if utc.microsecond:
        fraction = f"{utc.microsecond:06d}"
        if utc.microsecond % 1000 == 0:
            fraction = fraction[:3]
        text += f".{fraction}"
    return f"{text}Z"


def _format_flag(flag: bool) -> str:
    return "true" if flag else "false"


# Order defines the order of fragments in a diff description.
COMPARABLE_ATTRIBUTES: tuple[ComparableAttribute, ...] = (
    ComparableAttribute("name", lambda customer: customer.name),
    ComparableAttribute("address", lambda customer: customer.address.labelled()),
    ComparableAttribute("born on", lambda customer: format_instant(customer.born_on)),
    ComparableAttribute("is active", lambda customer: _format_flag(customer.active)),
)


def describe_attribute(attribute: ComparableAttribute, old: Customer, new: Customer) -> str | None:
    """Return "<name>: <old> -> <new>" if the projections differ, else None."""
    before = attribute.extract(old)
    after = attribute.extract(new)
    if before == after:
        return None
    return f"{attribute.name}: {before}{ARROW}{after}"


@ensure(lambda old, new, result: (old == new) == (result == ""))
def customer_diff(old: Customer, new: Customer) -> str:
    """
    Describe which attributes changed between two snapshots.

    Fragments follow COMPARABLE_ATTRIBUTES order and are joined with " | ".
    Returns an empty string exactly when the snapshots are equal.

    >>> from fpplayground.models import Address
    >>> old = Customer("Johny Kovalsky", Address(city="Warsaw"), datetime(2014, 3, 18, 12, 0, tzinfo=timezone.utc), True)
    >>> customer_diff(old, old.with_changes(name="Jan Kowalski", active=False))
    'name: Johny Kovalsky -> Jan Kowalski | is active: true -> false'
    >>> customer_diff(old, old.with_changes(address=Address(zip_code="Warsaw")))
    "address: city='Warsaw' -> zip_code='Warsaw'"
    >>> customer_diff(old, old)         # Edge: nothing changed
    ''
    """
    fragments = (describe_attribute(attribute, old, new) for attribute in COMPARABLE_ATTRIBUTES)
    return SEPARATOR.join(fragment for fragment in fragments if fragment is not None)
