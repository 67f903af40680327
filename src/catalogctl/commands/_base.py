"""Click base classes shared by the validate group and the rules command.

Both accept an ``examples`` string. Passing ``--examples`` prints it and
exits before any required argument (such as ``validate file FILE``) is
checked, so sample invocations are reachable without a real input file.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Append an eager ``--examples`` option that echoes *examples* and exits."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class CatalogCommand(click.Command):
    """Command with an optional ``--examples`` flag (``rules``, ``validate book``)."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class CatalogGroup(click.Group):
    """Group with an optional ``--examples`` flag.

    Commands registered with ``@group.command(examples=...)`` are built as
    :class:`CatalogCommand`, as the ``validate`` subcommands are.
    """

    command_class = CatalogCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)
