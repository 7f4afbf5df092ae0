"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from payments_settlement.application.ports.card_tokenizer import CardTokenizer
from payments_settlement.application.ports.lock_provider import LockProvider
from payments_settlement.application.ports.payment_repository import PaymentRepository
from payments_settlement.application.ports.time_provider import TimeProvider

__all__ = [
    "CardTokenizer",
    "LockProvider",
    "PaymentRepository",
    "TimeProvider",
]
