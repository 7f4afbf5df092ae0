"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Persistence: In-memory payment repository
- Card storage: Plaintext passthrough and in-memory token vault
- Time Provider: Clock abstraction for testability
- Locking: Per-identifier locks for settlement exclusivity
- Logging: structlog configuration

Infrastructure adapters implement the ports defined in the application layer.
"""

from payments_settlement.infrastructure.card_tokenizer import (
    InMemoryCardVault,
    PlaintextCardTokenizer,
)
from payments_settlement.infrastructure.lock_provider import InMemoryLockProvider, NoOpLockProvider
from payments_settlement.infrastructure.payment_repository import InMemoryPaymentRepository
from payments_settlement.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider

__all__ = [
    "FixedTimeProvider",
    "InMemoryCardVault",
    "InMemoryLockProvider",
    "InMemoryPaymentRepository",
    "NoOpLockProvider",
    "PlaintextCardTokenizer",
    "SystemTimeProvider",
]
