"""
Immutable customer records.

Every update returns a new instance; nothing here mutates in place.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Address:
    """Postal address, every part optional."""
    line1: str | None = None
    line2: str | None = None
    zip_code: str | None = None
    city: str | None = None
    country: str | None = None

    def __str__(self) -> str:
        locality = " ".join(part for part in (self.zip_code, self.city) if part)
        parts = (self.line1, self.line2, locality, self.country)
        return ", ".join(part for part in parts if part)

    def labelled(self) -> str:
        """
        Field-by-field text, distinct for every distinct address.

        Absent parts are left out; present ones are quoted so no value can
        pass for another field.

        >>> Address(line1="Warszawska 1", city="Warsaw").labelled()
        "line1='Warszawska 1', city='Warsaw'"
        >>> Address(line2="Warszawska 1", zip_code="Warsaw").labelled()
        "line2='Warszawska 1', zip_code='Warsaw'"
        >>> Address().labelled()            # Edge: nothing known
        ''
        """
        return ", ".join(
            f"{name}={value!r}" for name, value in self.to_dict().items() if value is not None
        )

    def with_changes(self, **overrides: Any) -> "Address":
        """Copy with the given fields replaced."""
        return replace(self, **overrides)

    def to_dict(self) -> dict[str, Any]:
        return {
            "line1": self.line1,
            "line2": self.line2,
            "zip_code": self.zip_code,
            "city": self.city,
            "country": self.country,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Address":
        return cls(
            line1=data.get("line1"),
            line2=data.get("line2"),
            zip_code=data.get("zip_code"),
            city=data.get("city"),
            country=data.get("country"),
        )


@dataclass(frozen=True)
class Customer:
    """A customer snapshot. Equality and hashing cover every field."""
    name: str
    address: Address
    born_on: datetime
    active: bool

    def __post_init__(self) -> None:
        if self.born_on.tzinfo is None:
            raise ValueError(f"born_on must be timezone-aware, got {self.born_on!r}")

    def with_changes(self, **overrides: Any) -> "Customer":
        """
        Copy with the given fields replaced.

        Args:
            **overrides: Field names mapped to their new values

        Returns:
            A new Customer; self is left untouched

        Raises:
            TypeError: If an override names an unknown field
        """
        return replace(self, **overrides)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "address": self.address.to_dict(),
            "born_on": self.born_on.isoformat(),
            "active": self.active,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Customer":
        """
        Create from dictionary.

        Raises:
            KeyError: If a required key is missing
            TypeError: If active is not a boolean
        """
        active = data["active"]
        if not isinstance(active, bool):
            raise TypeError(f"active must be true or false, got {active!r}")
        return cls(
            name=data["name"],
            address=Address.from_dict(data.get("address") or {}),
            born_on=datetime.fromisoformat(data["born_on"]),
            active=active,
        )


def deactivate(customer: Customer) -> Customer:
    """Return a deactivated copy of customer."""
    return customer.with_changes(active=False)


def normalize_country(customer: Customer, aliases: Mapping[str, str]) -> Customer:
    """
    Replace the address country with its canonical name.

    Customers without a country, or with a country not listed in aliases,
    are returned as they are.
    """
    country = customer.address.country
    if country is None or country not in aliases:
        return customer
    return customer.with_changes(
        address=customer.address.with_changes(country=aliases[country])
    )


def normalize_countries(
    customers: Sequence[Customer], aliases: Mapping[str, str]
) -> tuple[Customer, ...]:
    """Normalize every customer's country, returning a new tuple."""
    return tuple(normalize_country(customer, aliases) for customer in customers)
