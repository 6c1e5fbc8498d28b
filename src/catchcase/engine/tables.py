"""
Enum-keyed rule tables.

Every reducer that branches on a closed enum does so through a table
keyed by that enum, checked here when the module defining it is imported.
Adding an enum member without updating every table fails at import.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Mapping

from ..exceptions import RuleTableError


def missing_members(table: Mapping[Any, Any], enum_cls: type[Enum]) -> set[Enum]:
    """Enum members with no entry in the table."""
    return set(enum_cls) - set(table)


def ensure_exhaustive(table: Mapping[Any, Any], enum_cls: type[Enum], name: str) -> None:
    """
    Raise if a rule table does not cover every member of its enum.

    Raises:
        RuleTableError: Listing the uncovered members
    """
    missing = missing_members(table, enum_cls)
    if missing:
        labels = ", ".join(sorted(m.name for m in missing))
        raise RuleTableError(
            message=f"{name} does not cover {enum_cls.__name__}: {labels}",
            details={"table": name, "missing": sorted(m.name for m in missing)},
        )


def ensure_partition(groups: Iterable[Iterable[Enum]], enum_cls: type[Enum], name: str) -> None:
    """
    Raise unless the groups cover every enum member exactly once.

    Raises:
        RuleTableError: On a missing or duplicated member
    """
    seen: list[Enum] = [m for group in groups for m in group]
    duplicates = {m for m in seen if seen.count(m) > 1}
    if duplicates:
        labels = ", ".join(sorted(m.name for m in duplicates))
        raise RuleTableError(
            message=f"{name} lists {enum_cls.__name__} members more than once: {labels}",
            details={"table": name, "duplicates": sorted(m.name for m in duplicates)},
        )
    ensure_exhaustive({m: True for m in seen}, enum_cls, name)
