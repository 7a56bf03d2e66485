"""Exceptions raised by the store, persistence and ingestion layers.

Every one of these aborts the current invocation; the CLI turns them into a
diagnostic on stderr and a non-zero exit status.
"""

from __future__ import annotations


class ListCounterError(Exception):
    """Base class for all listcounter failures."""


class ConfigMismatchError(ListCounterError):
    """The stored extraction rule differs from the one requested for this run."""


class CorruptStoreError(ListCounterError):
    """The backing file is not a valid store document."""


class StorageError(ListCounterError):
    """Reading or writing the backing file failed."""


class PathIsDirectoryError(StorageError):
    """The backing file path points at a directory."""
