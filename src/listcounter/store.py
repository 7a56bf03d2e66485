"""In-memory store: records keyed by identifier plus the store's settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from listcounter.models import Record, Settings, sort_key

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from listcounter.models import ExtractRule


class Store:
    """A named set of counted records.

    Identifiers are unique. Dict order is only meaningful right after a sort,
    which the CLI does after all mutation is finished.
    """

    def __init__(self, settings: Settings, records: Iterable[Record] = ()) -> None:
        self.settings = settings
        self._records: dict[str, Record] = {}
        for r in records:
            if r.identifier in self._records:
                msg = f"duplicate identifier: {r.identifier!r}"
                raise ValueError(msg)
            self._records[r.identifier] = r

    @classmethod
    def empty(cls, name: str, rule: ExtractRule | None = None) -> Store:
        return cls(Settings(name=name, rule=rule))

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self.settings.name

    @property
    def rule(self) -> ExtractRule | None:
        return self.settings.rule

    @property
    def records(self) -> list[Record]:
        return list(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records.values())

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._records

    def find(self, identifier: str) -> Record | None:
        return self._records.get(identifier)

    def counts(self) -> dict[str, int]:
        """identifier -> count snapshot."""
        return {r.identifier: r.count for r in self._records.values()}

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def increment(self, identifier: str) -> Record:
        """Bump the count of identifier, adding it with count 1 if missing."""
        record = self._records.get(identifier)
        if record is None:
            record = Record(identifier=identifier, count=1)
            self._records[identifier] = record
        else:
            record.count += 1
        return record

    def merge_line(self, identifier: str, full_line: str) -> Record:
        """Record a sighting from input without touching the count.

        New identifiers enter with count 0, so unless they are incremented in
        the same run they are pruned before the next save.
        """
        record = self._records.get(identifier)
        if record is None:
            record = Record(identifier=identifier, count=0, full_line=full_line)
            self._records[identifier] = record
        else:
            record.full_line = full_line
        return record

    def remove(self, identifier: str) -> bool:
        """Drop identifier. Returns False (and changes nothing) if it is absent."""
        return self._records.pop(identifier, None) is not None

    def drop_empty(self) -> int:
        """Remove every record with count <= 0. Returns how many were removed."""
        empty = [k for k, r in self._records.items() if r.count <= 0]
        for k in empty:
            del self._records[k]
        return len(empty)

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def _tie_break(self, tie_break: bool | None) -> bool:
        # Identifier tie-breaks only apply to whole-line stores.
        return self.settings.rule is None if tie_break is None else tie_break

    def sort_ascending(self, tie_break: bool | None = None) -> list[Record]:
        """Reorder in place, lowest count first. Returns the ordered records."""
        ordered = sorted(self._records.values(), key=sort_key(tie_break=self._tie_break(tie_break)))
        self._records = {r.identifier: r for r in ordered}
        return ordered

    def sort_descending(self, tie_break: bool | None = None) -> list[Record]:
        """Exact reverse of sort_ascending."""
        ordered = self.sort_ascending(tie_break)
        ordered.reverse()
        self._records = {r.identifier: r for r in ordered}
        return ordered
