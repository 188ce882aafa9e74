"""Value Objects for product data.

Value Objects are immutable and compared by value, not identity.
Each one is built through a ``create`` factory that validates the raw
input and returns a Result, so an invalid name or email can never exist
and a bad request never needs an exception to be reported.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from supermarket.domain.constants import MAX_NAME_LENGTH
from supermarket.domain.result import Result, failure, success

# local@domain.tld: no whitespace, exactly one "@", a dot in the domain part.
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s.]+$")


def _validate_name(raw: str | None, label: str) -> Result[str]:
    if raw is None or not raw.strip():
        return failure(f"{label} should not be empty")
    value = raw.strip()
    if len(value) > MAX_NAME_LENGTH:
        return failure(f"{label} is too long")
    return success(value)


@dataclass(frozen=True)
class ProductName:
    """The display name of a product."""

    value: str

    @staticmethod
    def create(raw: str | None) -> Result[ProductName]:
        result = _validate_name(raw, "Product name")
        if result.is_failure:
            return result
        return success(ProductName(result.value))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ManufacturerName:
    """The company that makes a product; also identifies its supplier."""

    value: str

    @staticmethod
    def create(raw: str | None) -> Result[ManufacturerName]:
        result = _validate_name(raw, "Manufacturer name")
        if result.is_failure:
            return result
        return success(ManufacturerName(result.value))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    value: str

    @staticmethod
    def create(raw: str | None) -> Result[Email]:
        if raw is None or not raw.strip():
            return failure("Email should not be empty")
        value = raw.strip()
        if not _EMAIL_PATTERN.match(value):
            return failure("Email is invalid")
        return success(Email(value))

    def __str__(self) -> str:
        return self.value


def validate_quantity(quantity: int) -> Result[int]:
    """Stock quantities are unsigned."""
    if quantity < 0:
        return failure("Quantity should not be negative")
    return success(quantity)
