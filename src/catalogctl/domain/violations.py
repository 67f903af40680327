"""Constraint violations reported by the record validator."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Violation:
    """A single rule failure on one field."""

    field: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


def sort_violations(
    violations: Iterable[Violation],
    rules: Mapping[str, Sequence[Any]],
) -> list[Violation]:
    """Order *violations* by field order, then rule order, of *rules*.

    Violations whose message is not in the table sort last, alphabetically.
    """
    rank: dict[tuple[str, str], int] = {}
    for field_name, field_rules in rules.items():
        for rule in field_rules:
            rank.setdefault((field_name, rule.message), len(rank))
    return sorted(
        violations,
        key=lambda v: (rank.get((v.field, v.message), len(rank)), v.field, v.message),
    )
