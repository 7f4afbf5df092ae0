"""Tests for LockProvider implementations.

Tests cover:
- InMemoryLockProvider per-identifier serialization
- Lock release on exception and cleanup of idle entries
- NoOpLockProvider for single-threaded tests
"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor, wait

import pytest

from payments_settlement.application.ports import LockProvider
from payments_settlement.infrastructure.lock_provider import (
    InMemoryLockProvider,
    NoOpLockProvider,
)

# =============================================================================
# InMemoryLockProvider Tests
# =============================================================================


class TestInMemoryLockProviderBasics:
    def test_implements_lock_provider_interface(self) -> None:
        assert isinstance(InMemoryLockProvider(), LockProvider)

    def test_same_identifier_can_be_acquired_sequentially(self) -> None:
        provider = InMemoryLockProvider()
        acquisitions = 0

        with provider.acquire("order-1"):
            acquisitions += 1

        with provider.acquire("order-1"):
            acquisitions += 1

        assert acquisitions == 2

    def test_different_identifiers_use_different_locks(self) -> None:
        provider = InMemoryLockProvider()

        with provider.acquire("order-1"), provider.acquire("order-2"):
            assert provider._locks["order-1"].lock is not provider._locks["order-2"].lock


class TestInMemoryLockProviderCleanup:
    def test_entry_exists_only_while_held(self) -> None:
        provider = InMemoryLockProvider()

        with provider.acquire("order-1"):
            assert provider._locks["order-1"].holders == 1

        assert provider._locks == {}

    def test_distinct_identifiers_do_not_accumulate(self) -> None:
        provider = InMemoryLockProvider()

        for i in range(1000):
            with provider.acquire(f"order-{i}"):
                pass

        assert provider._locks == {}

    def test_entry_removed_after_contention(self) -> None:
        provider = InMemoryLockProvider()

        def worker() -> None:
            with provider.acquire("order-1"):
                time.sleep(0.001)

        with ThreadPoolExecutor(max_workers=5) as executor:
            futures = [executor.submit(worker) for _ in range(20)]
            wait(futures, timeout=10)

        for future in futures:
            future.result()
        assert provider._locks == {}


class TestInMemoryLockProviderExceptionSafety:
    def test_lock_released_on_exception(self) -> None:
        provider = InMemoryLockProvider()

        with pytest.raises(RuntimeError), provider.acquire("order-1"):
            raise RuntimeError("Simulated failure")

        assert provider._locks == {}
        with provider.acquire("order-1"):
            pass


class TestInMemoryLockProviderConcurrency:
    def test_same_identifier_never_held_by_two_threads(self) -> None:
        provider = InMemoryLockProvider()
        inside = 0
        max_inside = 0
        count_lock = threading.Lock()

        def worker() -> None:
            nonlocal inside, max_inside
            with provider.acquire("order-1"):
                with count_lock:
                    inside += 1
                    max_inside = max(max_inside, inside)
                time.sleep(0.01)
                with count_lock:
                    inside -= 1

        with ThreadPoolExecutor(max_workers=5) as executor:
            wait([executor.submit(worker) for _ in range(10)], timeout=10)

        assert max_inside == 1

    def test_different_identifiers_allow_parallel_access(self) -> None:
        provider = InMemoryLockProvider()
        inside = 0
        max_inside = 0
        count_lock = threading.Lock()
        barrier = threading.Barrier(3, timeout=5)

        def worker(identifier: str) -> None:
            nonlocal inside, max_inside
            with provider.acquire(identifier):
                with count_lock:
                    inside += 1
                    max_inside = max(max_inside, inside)
                barrier.wait()
                with count_lock:
                    inside -= 1

        with ThreadPoolExecutor(max_workers=3) as executor:
            futures = [executor.submit(worker, f"order-{i}") for i in range(3)]
            wait(futures, timeout=10)

        for future in futures:
            future.result()
        assert max_inside == 3


# =============================================================================
# NoOpLockProvider Tests
# =============================================================================


class TestNoOpLockProvider:
    def test_implements_lock_provider_interface(self) -> None:
        assert isinstance(NoOpLockProvider(), LockProvider)

    def test_same_identifier_can_be_nested(self) -> None:
        provider = NoOpLockProvider()
        acquisitions = 0

        with provider.acquire("order-1"):
            acquisitions += 1
            with provider.acquire("order-1"):
                acquisitions += 1

        assert acquisitions == 2

    def test_exception_propagates(self) -> None:
        provider = NoOpLockProvider()

        with pytest.raises(RuntimeError, match="test error"), provider.acquire("order-1"):
            raise RuntimeError("test error")
