"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich text and tables) or
machines (--json). The formatter layer adapts ServiceResult to the
requested output mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table

from catalogctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from catalogctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Rendering options derived from CLI flags and the [output] section."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    color: bool = True
    width: int | None = None


def _violation_table(violations: list[dict[str, str]]) -> Table:
    table = Table(show_header=True, header_style="cat.key", box=None, pad_edge=False)
    table.add_column("field", style="cat.field")
    table.add_column("message")
    for row in violations:
        table.add_row(escape(row["field"]), escape(row["message"]))
    return table


def _record_label(entry: dict[str, Any]) -> str:
    isbn = entry.get("isbn") or "<no isbn>"
    title = entry.get("title") or "<untitled>"
    return f"[cat.isbn]{escape(str(isbn))}[/] {escape(str(title))}"


def _render_records(console: Console, records: list[dict[str, Any]], *, quiet: bool) -> None:
    for entry in records:
        prefix = f"  #{entry['index']}"
        if entry.get("errors"):
            console.print(f"{prefix} [cat.error]malformed[/]")
            if not quiet:
                for err in entry["errors"]:
                    console.print(f"      {escape(err['loc'])}: {escape(err['msg'])}")
        elif entry.get("valid"):
            if not quiet:
                console.print(f"{prefix} [cat.ok]valid[/] {_record_label(entry)}")
        else:
            console.print(f"{prefix} [cat.error]invalid[/] {_record_label(entry)}")
            if not quiet:
                console.print(_violation_table(entry.get("violations", [])))


def _render_data(console: Console, data: dict[str, Any], *, quiet: bool) -> None:
    if "rules" in data:
        console.print(_violation_table(data["rules"]))
        return
    if "records" in data:
        _render_records(console, data["records"], quiet=quiet)
        return
    if quiet:
        return
    for key, value in data.items():
        if key in ("violations", "errors"):
            continue
        console.print(f"  [cat.key]{escape(key)}:[/] {escape(str(value))}")


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode; defaults to human-readable text.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    console = create_console(no_color=not settings.color, width=settings.width)
    if result.ok:
        console.print(f"[cat.ok]OK[/]: [cat.op]{result.op}[/]")
        _render_data(console, result.data, quiet=settings.quiet)
        if settings.verbose and result.meta:
            for key, value in result.meta.items():
                console.print(f"  [cat.key]{escape(key)}:[/] {escape(str(value))}")
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(f"[cat.error]ERROR[/]: [cat.op]{result.op}[/] - {escape(message)}")
        detail = result.error.detail if result.error else {}
        if "records" in result.data:
            _render_records(console, result.data["records"], quiet=settings.quiet)
        else:
            if detail.get("violations"):
                console.print(_violation_table(detail["violations"]))
            for err in detail.get("errors", []):
                console.print(f"  {escape(err['loc'])}: {escape(err['msg'])}")
    return get_output(console).rstrip("\n")
