"""Thread-safe keyed storage backing the in-memory repositories.

A plain dict guarded by a reader/writer lock: any number of readers may
hold the lock together, a writer holds it alone.  A waiting writer
blocks new readers.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar

T = TypeVar("T")


class ReadWriteLock:

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._waiting_writers += 1
            while self._writer or self._readers:
                self._cond.wait()
            self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class KeyedStorage(Generic[T]):
    """String-keyed store; iteration follows insertion order."""

    def __init__(self) -> None:
        self._data: dict[str, T] = {}
        self._lock = ReadWriteLock()

    def get(self, key: str) -> T | None:
        with self._lock.read():
            return self._data.get(key)

    def set(self, key: str, value: T) -> None:
        with self._lock.write():
            self._data[key] = value

    def set_if_absent(self, key: str, value: T) -> bool:
        """Store *value* unless *key* is taken; True if it was stored.

        The check and the write happen under one write lock, so two
        concurrent creators of the same key cannot both succeed.
        """
        with self._lock.write():
            if key in self._data:
                return False
            self._data[key] = value
            return True

    def contains(self, key: str) -> bool:
        with self._lock.read():
            return key in self._data

    def values(self) -> list[T]:
        with self._lock.read():
            return list(self._data.values())

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._data)
