"""Shared fixtures: the Kovalsky audit trail and a customer directory."""

from datetime import datetime, timezone

import pytest
from hypothesis import strategies as st

from fpplayground.models import Address, Customer
from fpplayground.shell.directory import InMemoryCustomerDirectory

UTC = timezone.utc


def make_address(**overrides) -> Address:
    defaults = dict(
        line1="Warszawska 1",
        line2=None,
        zip_code="00-000",
        city="Warsaw",
        country="Poland",
    )
    defaults.update(overrides)
    return Address(**defaults)


def make_customer(**overrides) -> Customer:
    defaults = dict(
        name="Johny Kovalsky",
        address=make_address(),
        born_on=datetime(2014, 3, 18, 12, 0, tzinfo=UTC),
        active=True,
    )
    defaults.update(overrides)
    return Customer(**defaults)


@pytest.fixture
def address() -> Address:
    return make_address()


@pytest.fixture
def c1(address: Address) -> Customer:
    return make_customer(address=address)


@pytest.fixture
def c2(address: Address) -> Customer:
    return make_customer(name="John Kovalsky", address=address)


@pytest.fixture
def c3(address: Address) -> Customer:
    return make_customer(
        name="Jan Kowalski",
        address=address,
        born_on=datetime(2019, 3, 18, 12, 0, tzinfo=UTC),
        active=False,
    )


@pytest.fixture
def trail(c1: Customer, c2: Customer, c3: Customer) -> list[Customer]:
    return [c1, c2, c3]


@pytest.fixture
def expected_changes() -> tuple[str, ...]:
    return (
        "name: Johny Kovalsky -> John Kovalsky",
        "name: John Kovalsky -> Jan Kowalski | born on: 2014-03-18T12:00Z -> 2019-03-18T12:00Z"
        " | is active: true -> false",
    )


@pytest.fixture
def directory() -> InMemoryCustomerDirectory:
    return InMemoryCustomerDirectory(
        {
            "elder": make_customer(name="Elder", born_on=datetime(1970, 1, 1, tzinfo=UTC)),
            "younger": make_customer(name="Younger", born_on=datetime(1990, 1, 1, tzinfo=UTC)),
            "gone": None,
        },
        unavailable=["broken"],
    )


class RecordingLookup:
    """Wraps a lookup and records every key it is asked for."""

    def __init__(self, lookup) -> None:
        self.lookup = lookup
        self.calls: list = []

    def __call__(self, key):
        self.calls.append(key)
        return self.lookup(key)


@pytest.fixture
def recording(directory: InMemoryCustomerDirectory) -> RecordingLookup:
    return RecordingLookup(directory)


# ---------------------------------------------------------------------------
# Hypothesis strategies
# ---------------------------------------------------------------------------

_text = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789 ", max_size=12)

addresses = st.builds(
    Address,
    line1=st.none() | _text,
    line2=st.none() | _text,
    zip_code=st.none() | _text,
    city=st.none() | _text,
    country=st.none() | st.sampled_from(["Poland", "Polska", "Germany"]),
)

customers = st.builds(
    Customer,
    name=_text,
    address=addresses,
    born_on=st.datetimes(
        min_value=datetime(1900, 1, 1),
        max_value=datetime(2030, 12, 31),
        timezones=st.just(UTC),
    ),
    active=st.booleans(),
)
