"""Command group: validate book records (book, file)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from catalogctl.commands._base import CatalogGroup
from catalogctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from catalogctl.commands._context import AppContext

_VALIDATE_EXAMPLES = """\
  catalogctl validate book --isbn 1234567890 --title "Title" --author "Author" --price 9.90
  catalogctl validate file books.json
  catalogctl validate file books.json --partial
  catalogctl --json validate file books.json"""


@click.group(cls=CatalogGroup, examples=_VALIDATE_EXAMPLES)
@click.pass_obj
def validate(app: AppContext) -> None:
    """Validate book records against the catalog rules."""


@validate.command(
    examples="""\
  catalogctl validate book --isbn 1234567890 --title "Title" --author "Author" --price 9.90
  catalogctl validate book --isbn 0306406152 --title "Title" --author "Author" --price 12 \\
      --publisher "Polarsophia"
  catalogctl --json validate book --isbn a234567890 --title "Title" --author "Author" --price 0"""
)
@click.option("--isbn", default="", help="ISBN-10 (9 digits followed by a digit or X).")
@click.option("--title", default="", help="Book title.")
@click.option("--author", default="", help="Book author.")
@click.option("--price", type=float, default=None, help="Price, must be greater than zero.")
@click.option("--publisher", default=None, help="Publisher (optional).")
@click.pass_obj
def book(
    app: AppContext,
    isbn: str,
    title: str,
    author: str,
    price: float | None,
    publisher: str | None,
) -> None:
    """Validate one book given by options."""
    from catalogctl.domain.book import Book

    record = Book.of(isbn, title, author, price, publisher)
    app.emit(app.service.validate_book(record))


@validate.command(
    examples="""\
  catalogctl validate file books.json
  catalogctl validate file books.json --partial
  catalogctl -q validate file books.json --partial"""
)
@click.argument("file", type=click.Path(exists=True))
@click.option(
    "--partial",
    is_flag=True,
    help="Report every record instead of stopping at the first failure.",
)
@click.pass_obj
def file(app: AppContext, file: str, partial: bool) -> None:
    """Validate book records from a JSON file.

    FILE must contain a JSON object (one book) or an array of objects,
    each with "isbn", "title", "author", "price" and optionally
    "publisher" keys.
    """
    try:
        with open(file, encoding="utf-8") as f:
            payload = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
        app.emit(
            ServiceResult(
                ok=False,
                op="validate_records",
                error=ServiceError(
                    code="invalid_file",
                    message=f"Error reading {file}: {exc}",
                ),
            )
        )
        return

    if isinstance(payload, dict):
        app.emit(app.service.validate_book(payload))
    elif isinstance(payload, list):
        app.emit(app.service.validate_records(payload, partial=partial))
    else:
        app.emit(
            ServiceResult(
                ok=False,
                op="validate_records",
                error=ServiceError(
                    code="invalid_format",
                    message="JSON file must contain an object or a top-level array.",
                ),
            )
        )
