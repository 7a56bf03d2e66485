"""Data models for the line counter: records, extraction rules, settings, ordering."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class Record:
    """One counted identifier.

    count == 0 marks an identifier that was seen on input during this run but
    never incremented; such records are never written to disk.
    """

    identifier: str
    count: int = 0
    full_line: str = ""             # latest raw line for this identifier (not persisted)

    def __post_init__(self) -> None:
        if not self.full_line:
            self.full_line = self.identifier

    @classmethod
    def from_dict(cls, d: dict[str, object]) -> Record:
        line = d["line"]
        count = d["count"]
        if not isinstance(line, str) or isinstance(count, bool) or not isinstance(count, int):
            msg = f"invalid entry: {d!r}"
            raise TypeError(msg)
        return cls(identifier=line, count=count)

    def to_dict(self) -> dict[str, object]:
        return {"count": self.count, "line": self.identifier}


@dataclass(frozen=True)
class ExtractRule:
    """Split a line on `delimiter` and take the part at index `field`."""

    delimiter: str
    field: int

    def __post_init__(self) -> None:
        if not self.delimiter:
            msg = "delimiter must not be empty"
            raise ValueError(msg)
        if self.field < 0:
            msg = f"field must be >= 0, got {self.field}"
            raise ValueError(msg)

    def extract(self, line: str) -> str:
        """Return the identifier part of line, or "" when it has too few parts."""
        parts = line.split(self.delimiter)
        if len(parts) > self.field:
            return parts[self.field]
        return ""


def _now() -> datetime:
    return datetime.now(UTC)


@dataclass
class Settings:
    """Per-store configuration, persisted under "conf"."""

    name: str
    edited: datetime = field(default_factory=_now)
    rule: ExtractRule | None = None

    def touch(self) -> None:
        self.edited = _now()

    def to_dict(self) -> dict[str, object]:
        # The on-disk format has no null: an unset rule is ("", -1).
        return {
            "name": self.name,
            "edited": self.edited.isoformat(),
            "delimiter": self.rule.delimiter if self.rule else "",
            "field": self.rule.field if self.rule else -1,
        }

    @classmethod
    def from_dict(cls, d: dict[str, object]) -> Settings:
        name = d["name"]
        edited = d["edited"]
        delimiter = d.get("delimiter", "")
        field_index = d.get("field", -1)
        if not isinstance(name, str) or not isinstance(edited, str):
            msg = f"invalid conf: {d!r}"
            raise TypeError(msg)
        if not isinstance(delimiter, str) or isinstance(field_index, bool) or not isinstance(field_index, int):
            msg = f"invalid extraction rule: {d!r}"
            raise TypeError(msg)
        # Both unset or both valid; ExtractRule rejects a half-set pair.
        rule = None if (delimiter, field_index) == ("", -1) else ExtractRule(delimiter, field_index)
        return cls(name=name, edited=datetime.fromisoformat(edited), rule=rule)


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


def compare_identifiers(a: str, b: str) -> int:
    """Case-insensitive comparison with a case-sensitive tie-break per character.

    When one identifier is a prefix of the other the shorter one sorts first.
    """
    for ca, cb in zip(a, b, strict=False):
        la, lb = ca.lower(), cb.lower()
        if la != lb:
            return -1 if la < lb else 1
        if ca != cb:
            return -1 if ca < cb else 1
    return (len(a) > len(b)) - (len(a) < len(b))


def compare_records(a: Record, b: Record, *, tie_break: bool) -> int:
    """Order by count ascending; with tie_break, equal counts fall back to identifiers."""
    if a.count != b.count:
        return -1 if a.count < b.count else 1
    if not tie_break:
        return 0
    return compare_identifiers(a.identifier, b.identifier)


def sort_key(*, tie_break: bool) -> Callable[[Record], object]:
    """Key function equivalent to compare_records for list.sort / sorted."""
    return functools.cmp_to_key(functools.partial(compare_records, tie_break=tie_break))
