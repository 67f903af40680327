"""Command: list the active validation rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from catalogctl.commands._base import CatalogCommand

if TYPE_CHECKING:
    from catalogctl.commands._context import AppContext


@click.command(
    cls=CatalogCommand,
    examples="""\
  catalogctl rules
  catalogctl --json rules
  CATALOGCTL_VALIDATION__ISBN_CHECKSUM=true catalogctl rules""",
)
@click.pass_obj
def rules(app: AppContext) -> None:
    """List the field rules applied to book records."""
    app.emit(app.service.list_rules())
