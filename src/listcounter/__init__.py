"""Line-frequency counter backed by one JSON file per named database.

Layout:
    $XDG_DATA_HOME/go-listcounter/
        <name>.json     # {"conf": {...}, "db": [{"count": N, "line": ...}, ...]}

Lines piped in are listed alongside stored ones; only explicit increments
change counts, and records with a count of zero are never written.
"""

from listcounter.config import CounterConfig, load_config
from listcounter.errors import (
    ConfigMismatchError,
    CorruptStoreError,
    ListCounterError,
    PathIsDirectoryError,
    StorageError,
)
from listcounter.filestore import FileStore, decode_store, encode_store
from listcounter.ingest import ingest_lines, read_stream
from listcounter.models import ExtractRule, Record, Settings
from listcounter.store import Store

__all__ = [
    "ConfigMismatchError",
    "CorruptStoreError",
    "CounterConfig",
    "ExtractRule",
    "FileStore",
    "ListCounterError",
    "PathIsDirectoryError",
    "Record",
    "Settings",
    "StorageError",
    "Store",
    "decode_store",
    "encode_store",
    "ingest_lines",
    "load_config",
    "read_stream",
]
