from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from threading import Lock
from typing import TYPE_CHECKING

from payments_settlement.application.ports import LockProvider

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(slots=True)
class _LockEntry:
    lock: Lock = field(default_factory=Lock)
    holders: int = 0


class InMemoryLockProvider(LockProvider):
    """In-memory lock provider using reference-counted per-identifier locks.

    Implementation:
    1. Global lock protects the entry map and the holder counts
    2. Entry lock serializes access to the specific payment identifier
    3. The last holder (or waiter) to leave removes the entry

    Identifiers come from callers, including ones that were never
    registered, so entries live only while someone holds or waits on them.

    Limitations:
    - Single-process only (locks don't work across processes)
    """

    def __init__(self) -> None:
        self._locks: dict[str, _LockEntry] = {}
        self._global_lock = Lock()

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        with self._global_lock:
            entry = self._locks.get(resource_id)
            if entry is None:
                entry = self._locks[resource_id] = _LockEntry()
            entry.holders += 1

        try:
            with entry.lock:
                yield
        finally:
            with self._global_lock:
                entry.holders -= 1
                if entry.holders == 0:
                    del self._locks[resource_id]


class NoOpLockProvider(LockProvider):
    """Lock provider that performs no locking.

    For single-threaded unit tests only. Never use it in a test that
    checks settlement exclusivity.
    """

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:  # noqa: ARG002
        yield
