"""Shared plumbing for the JSON-file repositories.

Every repository keeps one JSON document on disk.  Read-modify-write
cycles run under a lock shared by all handles to the same file, which is
what makes the product store's conditional stock decrement atomic within
a process.  Writes go to a sibling temp file first and are then swapped
in, so a crash never leaves a half-written document.
"""

from __future__ import annotations

import json
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

_LOCKS: dict[Path, threading.RLock] = {}
_LOCKS_GUARD = threading.Lock()


class StorageError(Exception):
    """The backing store could not be read or written."""


def _lock_for(path: Path) -> threading.RLock:
    with _LOCKS_GUARD:
        return _LOCKS.setdefault(path, threading.RLock())


class JsonDocumentFile:

    def __init__(self, file_path: Path, empty: Any) -> None:
        self._file_path = file_path.resolve()
        self._empty = empty
        self._lock = _lock_for(self._file_path)
        self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold the file's lock across a read-modify-write cycle."""
        with self._lock:
            yield

    def read(self) -> Any:
        with self._lock:
            try:
                return json.loads(self._file_path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                raise StorageError(f"Corrupt data file {self._file_path}: {exc}") from exc
            except OSError as exc:
                raise StorageError(f"Cannot read {self._file_path}: {exc}") from exc

    def write(self, data: Any) -> None:
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        with self._lock:
            try:
                tmp_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
                tmp_path.replace(self._file_path)
            except OSError as exc:
                raise StorageError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        with self._lock:
            if not self._file_path.exists():
                try:
                    self._file_path.parent.mkdir(parents=True, exist_ok=True)
                except OSError as exc:
                    raise StorageError(
                        f"Cannot create data directory {self._file_path.parent}: {exc}"
                    ) from exc
                self.write(self._empty)
