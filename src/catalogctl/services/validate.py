"""ValidationService: runs the book rule table over incoming records.

Records arrive either as ``Book`` instances or as raw mappings loaded from
JSON. Mappings that cannot be coerced into a ``Book`` are *malformed* and
reported with ``MALFORMED_RECORD``; well-typed books that fail field rules
are reported with ``CONSTRAINT_VIOLATION``. Neither case raises.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from catalogctl.domain.book import Book
from catalogctl.domain.rules import RuleTable, build_rules, describe_rules, validate
from catalogctl.domain.violations import sort_violations
from catalogctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from catalogctl.config.settings import CatalogSettings

logger = logging.getLogger(__name__)


def _malformed_errors(exc: ValidationError) -> list[dict[str, str]]:
    return [
        {"loc": ".".join(str(part) for part in err["loc"]) or "record", "msg": err["msg"]}
        for err in exc.errors()
    ]


class ValidationService:
    """Validates book records against the configured rule table.

    The rule table is built once at construction from
    ``settings.validation``; with no settings the default table is used.
    """

    def __init__(self, settings: CatalogSettings | None = None) -> None:
        isbn_checksum = settings.validation.isbn_checksum if settings is not None else False
        self._isbn_checksum = isbn_checksum
        self._rules: RuleTable = build_rules(isbn_checksum=isbn_checksum)

    @property
    def rules(self) -> RuleTable:
        return self._rules

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate_book(self, record: Book | Mapping[str, Any]) -> ServiceResult:
        """Validate a single record."""
        entry, error = self._evaluate(record)
        if error is not None:
            return ServiceResult(ok=False, op="validate_book", data=entry, error=error)
        return ServiceResult(ok=True, op="validate_book", data=entry)

    def validate_records(
        self,
        records: Sequence[Book | Mapping[str, Any]],
        *,
        partial: bool = False,
    ) -> ServiceResult:
        """Validate many records. Stops at the first failure unless *partial* is True."""
        results: list[dict[str, Any]] = []
        failures: list[dict[str, Any]] = []

        for i, record in enumerate(records):
            entry, error = self._evaluate(record)
            results.append({"index": i, **entry})
            if error is None:
                continue
            failures.append({"index": i, "code": error.code, "message": error.message})
            if not partial:
                return ServiceResult(
                    ok=False,
                    op="validate_records",
                    data={"records": results, "failures": failures},
                    error=ServiceError(
                        code="BATCH_FAILED",
                        message=f"Record {i} failed: {error.message}",
                        detail=error.detail,
                    ),
                )

        all_ok = len(failures) == 0
        return ServiceResult(
            ok=all_ok,
            op="validate_records",
            data={
                "records": results,
                "failures": failures,
                "count": len(records),
                "valid_count": len(records) - len(failures),
            },
            error=ServiceError(
                code="BATCH_PARTIAL",
                message=f"{len(failures)} of {len(records)} records failed",
            )
            if not all_ok
            else None,
        )

    def list_rules(self) -> ServiceResult:
        """Describe the active rule table."""
        rows = describe_rules(self._rules)
        return ServiceResult(
            ok=True,
            op="list_rules",
            data={"rules": rows, "count": len(rows)},
            meta={"isbn_checksum": self._isbn_checksum},
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _evaluate(
        self, record: Book | Mapping[str, Any]
    ) -> tuple[dict[str, Any], ServiceError | None]:
        """Return ``(data_entry, error)`` for one record; *error* is None when accepted."""
        if isinstance(record, Book):
            book = record
        else:
            try:
                book = Book.model_validate(record)
            except ValidationError as exc:
                errors = _malformed_errors(exc)
                logger.debug("Malformed book record: %s", errors)
                return (
                    {"valid": False, "errors": errors},
                    ServiceError(
                        code="MALFORMED_RECORD",
                        message="Record cannot be read as a book",
                        detail={"errors": errors},
                    ),
                )

        found = sort_violations(validate(book, self._rules), self._rules)
        violations = [v.as_dict() for v in found]
        logger.debug("Validated book %r: %d violation(s)", book.isbn, len(violations))
        entry: dict[str, Any] = {
            "isbn": book.isbn,
            "title": book.title,
            "valid": not violations,
            "violations": violations,
        }
        if not violations:
            return entry, None
        return entry, ServiceError(
            code="CONSTRAINT_VIOLATION",
            message=f"Book violates {len(violations)} constraint(s)",
            detail={"violations": violations},
        )
