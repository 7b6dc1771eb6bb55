# questionnaire/services/store.py
"""
In-memory submission store.
One instance per application, created in create_app and reached through
request.app.state; records live until the process exits.
"""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator, List

from questionnaire.models import Submission


class RWLock:
    """Many readers or a single writer.

    A writer that is waiting holds off new readers, so a steady stream of
    snapshots cannot starve appends.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


class SubmissionStore:
    """Append-only list of submissions guarded by an RWLock."""

    def __init__(self):
        self._submissions: List[Submission] = []
        self._lock = RWLock()

    def append(self, record: Submission) -> int:
        """Append a record and return the store size including it."""
        with self._lock.write_locked():
            self._submissions.append(record)
            return len(self._submissions)

    def snapshot(self) -> List[Submission]:
        """Copy of all records in append order."""
        with self._lock.read_locked():
            return list(self._submissions)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._submissions)
