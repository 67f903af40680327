"""Book value object.

A Book is constructed from raw field values and never checks its own
constraints. Construction coerces types only; the field rules live in
:mod:`catalogctl.domain.rules` and report violations as data.

INVARIANT: A Book is immutable once constructed.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator


class Book(BaseModel):
    """A catalog book record."""

    model_config = {"frozen": True, "extra": "ignore"}

    isbn: str | None = None
    title: str | None = None
    author: str | None = None
    price: float | None = None
    publisher: str | None = None

    @field_validator("price", mode="before")
    @classmethod
    def _reject_bool_price(cls, value: Any) -> Any:
        # JSON true/false would otherwise coerce to 1.0/0.0.
        if isinstance(value, bool):
            raise ValueError("price must be a number, not a boolean")
        return value

    @classmethod
    def of(
        cls,
        isbn: str | None,
        title: str | None,
        author: str | None,
        price: float | None,
        publisher: str | None = None,
    ) -> Book:
        """Build a Book from its five fields in declaration order."""
        return cls(isbn=isbn, title=title, author=author, price=price, publisher=publisher)
