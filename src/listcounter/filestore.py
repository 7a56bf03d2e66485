"""Read and write <name>.json database files.

FileStore is the public API:
    files = FileStore(load_config().data_dir)
    store = files.load("todo")
    store.increment("write docs")
    files.save(store)

File layout (whole file rewritten on every save):
    {
      "conf": {"name": "todo", "edited": "2026-...", "delimiter": "", "field": -1},
      "db": [{"count": 3, "line": "write docs"}, ...]
    }

Records with count <= 0 are dropped before encoding and after decoding.
There is no locking: two processes saving the same database race and the
last writer wins.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from listcounter.errors import ConfigMismatchError, CorruptStoreError, PathIsDirectoryError, StorageError
from listcounter.models import Record, Settings
from listcounter.store import Store

if TYPE_CHECKING:
    from listcounter.models import ExtractRule

logger = logging.getLogger("listcounter.filestore")


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def encode_store(store: Store) -> str:
    """Prune empty records and serialize the store to a JSON document."""
    store.drop_empty()
    doc = {
        "conf": store.settings.to_dict(),
        "db": [r.to_dict() for r in store],
    }
    return json.dumps(doc, ensure_ascii=False)


def decode_store(data: str | bytes) -> Store:
    """Parse a JSON document into a Store, then prune empty records."""
    try:
        doc: Any = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        msg = f"malformed database file: {exc}"
        raise CorruptStoreError(msg) from exc

    if not isinstance(doc, dict) or not isinstance(doc.get("conf"), dict):
        msg = "database file has no \"conf\" object"
        raise CorruptStoreError(msg)
    entries = doc.get("db")
    if entries is None:
        entries = []
    if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
        msg = "database file \"db\" is not a list of entries"
        raise CorruptStoreError(msg)

    try:
        settings = Settings.from_dict(doc["conf"])
        store = Store(settings, (Record.from_dict(e) for e in entries))
    except (KeyError, TypeError, ValueError) as exc:
        msg = f"invalid database file: {exc}"
        raise CorruptStoreError(msg) from exc

    dropped = store.drop_empty()
    if dropped:
        logger.debug("dropped %d empty record(s) from %s", dropped, settings.name)
    return store


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


class FileStore:
    """One JSON file per named database under data_dir."""

    def __init__(self, data_dir: Path | str) -> None:
        self.data_dir = Path(data_dir)

    def path_for(self, name: str) -> Path:
        return self.data_dir / f"{name}.json"

    def _read(self, path: Path) -> bytes | None:
        """Return the file's bytes, or None when there is nothing usable to read."""
        if path.is_dir():
            msg = f"database path is a directory: {path}"
            raise PathIsDirectoryError(msg)
        try:
            f = path.open("rb")
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.warning("cannot open %s (%s), starting with an empty database", path, exc)
            return None
        with f:
            try:
                return f.read()
            except OSError as exc:
                msg = f"failed to read {path}: {exc}"
                raise StorageError(msg) from exc

    def load(self, name: str, rule: ExtractRule | None = None) -> Store:
        """Load database `name`, or return an empty one if it has no usable file.

        Raises ConfigMismatchError when the file was written with a different
        extraction rule than `rule`.
        """
        path = self.path_for(name)
        data = self._read(path)
        if not data:
            logger.debug("no data at %s, new database %r", path, name)
            return Store.empty(name, rule)

        store = decode_store(data)
        if store.rule != rule:
            msg = (
                f"database {name!r} uses {_describe(store.rule)}, "
                f"but {_describe(rule)} was requested"
            )
            raise ConfigMismatchError(msg)
        if store.name != name:
            logger.warning("database at %s is named %r, using %r", path, store.name, name)
            store.settings.name = name
        logger.debug("loaded %d record(s) from %s", len(store), path)
        return store

    def save(self, store: Store) -> Path:
        """Overwrite the store's file with its current contents."""
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            msg = f"failed to create {self.data_dir}: {exc}"
            raise StorageError(msg) from exc

        path = self.path_for(store.name)
        store.settings.touch()
        text = encode_store(store)
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            msg = f"failed to write {path}: {exc}"
            raise StorageError(msg) from exc
        logger.debug("saved %d record(s) to %s", len(store), path)
        return path


def _describe(rule: ExtractRule | None) -> str:
    if rule is None:
        return "whole lines"
    return f"delimiter {rule.delimiter!r} field {rule.field}"
