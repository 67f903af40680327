"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the validation service and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from catalogctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from catalogctl.config.settings import CatalogSettings
    from catalogctl.services.result import ServiceResult
    from catalogctl.services.validate import ValidationService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The validation service
    is created on first use so ``--help`` and ``--version`` stay cheap.
    """

    def __init__(self, settings: CatalogSettings) -> None:
        self.settings = settings
        self._service: ValidationService | None = None

        from catalogctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> ValidationService:
        """The validation service (created lazily on first access)."""
        if self._service is None:
            from catalogctl.services.validate import ValidationService

            self._service = ValidationService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            color=self.settings.output.color,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
