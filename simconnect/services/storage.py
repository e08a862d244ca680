import threading
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

from simconnect.models import StorageEntry


_locks_guard = threading.Lock()
_key_locks: dict[str, threading.Lock] = {}


def _lock_for(key: str) -> threading.Lock:
    with _locks_guard:
        lock = _key_locks.get(key)
        if lock is None:
            lock = threading.Lock()
            _key_locks[key] = lock
        return lock


@contextmanager
def locked_keys(*keys: str) -> Iterator[None]:
    # Always acquire in sorted order so two writers touching the same keys cannot deadlock.
    locks = [_lock_for(key) for key in sorted(set(keys))]
    for lock in locks:
        lock.acquire()
    try:
        yield
    finally:
        for lock in reversed(locks):
            lock.release()


class KeyValueStore:
    """Text values by key, backed by the ``storage_entries`` table.

    ``set`` only stages the write in the session; nothing is durable until
    ``commit``, so several keys can be written as one unit.
    """

    def __init__(self, db: Session):
        self.db = db

    def _entry(self, key: str, *, for_update: bool = False) -> StorageEntry | None:
        return self.db.get(
            StorageEntry,
            key,
            populate_existing=True,
            with_for_update=for_update or None,
        )

    def get(self, key: str, *, for_update: bool = False) -> str | None:
        entry = self._entry(key, for_update=for_update)
        return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        entry = self._entry(key)
        if entry:
            entry.value = value
        else:
            self.db.add(StorageEntry(key=key, value=value))
        # Flush so a later refreshing read in the same transaction sees this value.
        self.db.flush()

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
