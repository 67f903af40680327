"""Tests for Violation and violation ordering."""

from catalogctl.domain.rules import (
    AUTHOR_DEFINED,
    BOOK_RULES,
    ISBN_DEFINED,
    ISBN_FORMAT,
    PRICE_POSITIVE,
)
from catalogctl.domain.violations import Violation, sort_violations


class TestViolation:
    def test_as_dict(self) -> None:
        v = Violation(field="isbn", message=ISBN_FORMAT)
        assert v.as_dict() == {"field": "isbn", "message": ISBN_FORMAT}

    def test_set_deduplicates(self) -> None:
        violations = {
            Violation(field="isbn", message=ISBN_FORMAT),
            Violation(field="isbn", message=ISBN_FORMAT),
        }
        assert len(violations) == 1

    def test_same_field_different_messages_are_distinct(self) -> None:
        violations = {
            Violation(field="isbn", message=ISBN_DEFINED),
            Violation(field="isbn", message=ISBN_FORMAT),
        }
        assert len(violations) == 2


class TestSortViolations:
    def test_table_order(self) -> None:
        violations = {
            Violation(field="price", message=PRICE_POSITIVE),
            Violation(field="isbn", message=ISBN_FORMAT),
            Violation(field="author", message=AUTHOR_DEFINED),
            Violation(field="isbn", message=ISBN_DEFINED),
        }
        ordered = sort_violations(violations, BOOK_RULES)
        assert [v.message for v in ordered] == [
            ISBN_DEFINED,
            ISBN_FORMAT,
            AUTHOR_DEFINED,
            PRICE_POSITIVE,
        ]

    def test_unknown_messages_sort_last(self) -> None:
        extra = Violation(field="publisher", message="Unknown rule")
        ordered = sort_violations({extra, Violation(field="isbn", message=ISBN_FORMAT)}, BOOK_RULES)
        assert ordered[-1] == extra

    def test_empty(self) -> None:
        assert sort_violations(set(), BOOK_RULES) == []
