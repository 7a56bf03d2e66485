"""Merge lines from an input stream into a Store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from listcounter.errors import StorageError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import TextIO

    from listcounter.store import Store

logger = logging.getLogger("listcounter.ingest")


def identifier_for(store: Store, line: str) -> str:
    """The dedup key of line under the store's extraction rule ("" means skip)."""
    rule = store.rule
    return rule.extract(line) if rule is not None else line


def ingest_lines(store: Store, lines: Iterable[str]) -> int:
    """Merge lines into store. Returns how many lines produced an identifier.

    Counts are never changed here: new identifiers enter with count 0 and
    existing ones only get their full line refreshed.
    """
    merged = skipped = 0
    for raw in lines:
        line = raw.rstrip("\r\n")
        identifier = identifier_for(store, line)
        if not identifier:
            skipped += 1
            continue
        store.merge_line(identifier, line)
        merged += 1
    logger.debug("ingested %d line(s), skipped %d", merged, skipped)
    return merged


def read_stream(store: Store, stream: TextIO) -> int:
    """Ingest stream unless it is an interactive terminal."""
    if stream.isatty():
        logger.debug("input is a terminal, nothing to ingest")
        return 0
    try:
        return ingest_lines(store, stream)
    except UnicodeDecodeError as exc:
        msg = f"input is not valid {exc.encoding}: {exc.reason}"
        raise StorageError(msg) from exc
