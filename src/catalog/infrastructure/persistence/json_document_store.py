"""A collection of JSON documents kept in one file.

Writes go to a temporary file that then replaces the original, so a
reader never sees a half-written collection. ``locked()`` serializes
read-check-write sequences: a thread lock covers the current process
and a ``<file>.lock`` file lock covers every other process, such as a
second CLI invocation running at the same time.
"""

from __future__ import annotations

import json
import os
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock, Timeout

from catalog.domain.exceptions import ConcurrencyConflictError

DEFAULT_LOCK_TIMEOUT = 10.0

_LOCKS: dict[Path, threading.RLock] = {}
_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _LOCKS_GUARD:
        return _LOCKS.setdefault(path, threading.RLock())


class JsonDocumentStore:

    def __init__(self, file_path: Path, lock_timeout: float = DEFAULT_LOCK_TIMEOUT) -> None:
        self._file_path = Path(file_path).resolve()
        self._lock = _lock_for(self._file_path)
        self._file_lock = FileLock(
            str(self._file_path) + ".lock", timeout=lock_timeout
        )
        self._ensure_file()

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold the collection exclusively, across threads and processes.

        Raises ConcurrencyConflictError if another process keeps the
        collection locked for longer than the lock timeout.
        """
        with self._lock:
            try:
                self._file_lock.acquire()
            except Timeout as exc:
                raise ConcurrencyConflictError(
                    f"'{self._file_path.name}' is locked by another process"
                ) from exc
            try:
                yield
            finally:
                self._file_lock.release()

    def load(self) -> list[dict]:
        with self._lock:
            return json.loads(self._file_path.read_text(encoding="utf-8"))

    def persist(self, documents: list[dict]) -> None:
        with self.locked():
            tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
            tmp_path.write_text(
                json.dumps(documents, indent=2) + "\n", encoding="utf-8"
            )
            os.replace(tmp_path, self._file_path)

    def upsert(self, document: dict) -> None:
        """Replace the document with the same ``id``, or append it."""
        with self.locked():
            documents = self.load()
            for i, raw in enumerate(documents):
                if raw["id"] == document["id"]:
                    documents[i] = document
                    break
            else:
                documents.append(document)
            self.persist(documents)

    def _ensure_file(self) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        with self.locked():
            if not self._file_path.exists():
                self._file_path.write_text("[]", encoding="utf-8")
