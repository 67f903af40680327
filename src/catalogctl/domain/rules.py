"""Book field rules and the record validator.

Each field maps to an ordered tuple of :class:`FieldRule` entries. A single
loop evaluates every rule on every field and collects the failures; there is
no short-circuiting across rules or fields.

A blank ISBN fails both the "defined" and the "format" rule. A null price
fails only the "defined" rule because the "greater than zero" rule skips
``None``.

INVARIANT: ``validate`` never raises and never mutates the Book.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from catalogctl.domain.book import Book
from catalogctl.domain.violations import Violation

ISBN10_PATTERN = re.compile(r"[0-9]{9}[0-9X]")

ISBN_DEFINED = "The book ISBN must be defined."
ISBN_FORMAT = "The ISBN format must be valid."
ISBN_CHECKSUM = "The ISBN checksum must be valid."
TITLE_DEFINED = "The book title must be defined."
AUTHOR_DEFINED = "The book author must be defined."
PRICE_DEFINED = "The book price must be defined."
PRICE_POSITIVE = "The book price must be greater than zero."


@dataclass(frozen=True)
class FieldRule:
    """A predicate over one field value plus the message reported on failure.

    Rules with ``skip_none`` are not evaluated when the value is ``None``.
    """

    predicate: Callable[[Any], bool]
    message: str
    skip_none: bool = False

    def check(self, value: Any) -> bool:
        """Return True when *value* satisfies the rule (or the rule does not apply)."""
        if value is None and self.skip_none:
            return True
        return self.predicate(value)


RuleTable = Mapping[str, tuple[FieldRule, ...]]


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_not_blank(value: Any) -> bool:
    """None, empty and whitespace-only strings are blank (U+00A0 counts as whitespace)."""
    if value is None:
        return False
    return bool(str(value).strip())


def is_not_null(value: Any) -> bool:
    return value is not None


def is_positive(value: Any) -> bool:
    return value > 0


def matches_isbn10(value: Any) -> bool:
    """Full-match the 10-character ISBN shape. No checksum."""
    return ISBN10_PATTERN.fullmatch(str(value)) is not None


def is_valid_isbn10_checksum(value: str) -> bool:
    """Check the ISBN-10 weighted mod-11 checksum.

    Weights run 10 down to 1; a trailing ``X`` counts as 10.

    Examples:
        >>> is_valid_isbn10_checksum("0306406152")
        True
        >>> is_valid_isbn10_checksum("0306406153")
        False
    """
    if not matches_isbn10(value):
        return False
    total = 0
    for weight, char in zip(range(10, 0, -1), value, strict=True):
        digit = 10 if char == "X" else int(char)
        total += weight * digit
    return total % 11 == 0


def _checksum_if_well_formed(value: Any) -> bool:
    # Format failures are reported by the format rule alone.
    if not matches_isbn10(value):
        return True
    return is_valid_isbn10_checksum(str(value))


# ---------------------------------------------------------------------------
# Rule tables
# ---------------------------------------------------------------------------

BOOK_RULES: RuleTable = MappingProxyType(
    {
        "isbn": (
            FieldRule(is_not_blank, ISBN_DEFINED),
            FieldRule(matches_isbn10, ISBN_FORMAT, skip_none=True),
        ),
        "title": (FieldRule(is_not_blank, TITLE_DEFINED),),
        "author": (FieldRule(is_not_blank, AUTHOR_DEFINED),),
        "price": (
            FieldRule(is_not_null, PRICE_DEFINED),
            FieldRule(is_positive, PRICE_POSITIVE, skip_none=True),
        ),
    }
)


def build_rules(*, isbn_checksum: bool = False) -> RuleTable:
    """Return the book rule table, optionally with the ISBN-10 checksum rule."""
    if not isbn_checksum:
        return BOOK_RULES
    table = dict(BOOK_RULES)
    table["isbn"] = (
        *BOOK_RULES["isbn"],
        FieldRule(_checksum_if_well_formed, ISBN_CHECKSUM, skip_none=True),
    )
    return MappingProxyType(table)


def describe_rules(rules: RuleTable = BOOK_RULES) -> list[dict[str, str]]:
    """Flatten *rules* into ``{"field", "message"}`` rows in table order."""
    return [
        {"field": field_name, "message": rule.message}
        for field_name, field_rules in rules.items()
        for rule in field_rules
    ]


def validate(book: Book, rules: RuleTable = BOOK_RULES) -> set[Violation]:
    """Evaluate every rule in *rules* against *book*.

    Returns the set of violations; an empty set means the book is accepted.
    """
    violations: set[Violation] = set()
    for field_name, field_rules in rules.items():
        value = getattr(book, field_name, None)
        for rule in field_rules:
            if not rule.check(value):
                violations.add(Violation(field=field_name, message=rule.message))
    return violations
