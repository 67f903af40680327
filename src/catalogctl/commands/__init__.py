"""Subcommand modules for catalogctl.

Provides register_commands() which uses deferred imports to keep
``catalogctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from catalogctl.commands.validate import validate

    cli.add_command(validate)

    # --- Standalone commands ---
    from catalogctl.commands.rules import rules

    cli.add_command(rules)
