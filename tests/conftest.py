"""Shared pytest fixtures for the test suite."""

from datetime import UTC, datetime
from decimal import Decimal

import pytest
import structlog

from payments_settlement.infrastructure.lock_provider import InMemoryLockProvider
from payments_settlement.infrastructure.payment_repository import InMemoryPaymentRepository
from payments_settlement.infrastructure.time_provider import FixedTimeProvider

VALID_CARD = "1234567890123456"


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def lock_provider() -> InMemoryLockProvider:
    """An in-memory lock provider for testing."""
    return InMemoryLockProvider()


@pytest.fixture
def payment_repository() -> InMemoryPaymentRepository:
    return InMemoryPaymentRepository()


@pytest.fixture
def amount() -> Decimal:
    return Decimal("100.00")


@pytest.fixture
def valid_card() -> str:
    return VALID_CARD


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Keep structlog configuration from leaking between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def restore_root_logger():
    """Undo root logger changes made by setup_logging()."""
    import logging

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
