"""Ordered in-memory collection of records keyed by a string ``id``."""

import threading
from collections.abc import Callable
from typing import Any, Generic, Protocol, TypeVar

from .ids import IdMinter


class HasId(Protocol):
    id: str


RecordT = TypeVar("RecordT", bound=HasId)


class Collection(Generic[RecordT]):
    """
    Insertion-ordered sequence of records.

    Lookups are first-match linear scans by ``id``. Every mutation runs under a
    re-entrant lock so the collection stays consistent when served from more
    than one thread.
    """

    def __init__(self, name: str, id_minter: IdMinter):
        self.name = name
        self._records: list[RecordT] = []
        self._id_minter = id_minter
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._records)

    def all(self) -> list[RecordT]:
        """Return a snapshot of every record in insertion order."""
        with self._lock:
            return list(self._records)

    def append(self, record: RecordT) -> RecordT:
        with self._lock:
            self._records.append(record)
        return record

    def create(self, build: Callable[[str], RecordT]) -> RecordT:
        """
        Mint an id, build a record with it and append it.

        Args:
            build: Called with the new id; returns the record to store

        Returns:
            The appended record
        """
        with self._lock:
            record = build(self._id_minter.next_id(len(self._records)))
            self._records.append(record)
        return record

    def find_by_id(self, record_id: str) -> RecordT | None:
        with self._lock:
            return next((r for r in self._records if r.id == record_id), None)

    def remove_by_id(self, record_id: str) -> RecordT | None:
        """Remove the first record with ``record_id`` and return it, or None."""
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == record_id:
                    return self._records.pop(index)
        return None

    def filter_by_field(self, field: str, value: Any) -> list[RecordT]:
        """Records whose ``field`` equals ``value`` exactly, in insertion order."""
        with self._lock:
            return [r for r in self._records if getattr(r, field) == value]

    def toggle(self, record_id: str, field: str) -> RecordT | None:
        """Flip a boolean field in place on the first matching record."""
        with self._lock:
            record = self.find_by_id(record_id)
            if record is not None:
                setattr(record, field, not getattr(record, field))
            return record

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
            self._id_minter.reset()
