from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payments_settlement.domain.entities import Payment
    from payments_settlement.domain.value_objects import PaymentIdentifier


class PaymentRepository(ABC):
    """Port for payment persistence.

    Contract:
    - find_by_identifier() returns None if no payment has that identifier (no exception)
    - save() performs upsert keyed by payment.id: creates if new, updates if exists
    - Implementations are NOT thread-safe; callers must ensure serialization
    - Storage failures propagate as exceptions; they are never swallowed

    Thread safety note:
    Repositories assume the caller has acquired the per-identifier lock via
    LockProvider before invoking methods. This matches database behavior
    where transaction isolation is external to the repository.
    """

    @abstractmethod
    def find_by_identifier(self, identifier: PaymentIdentifier) -> Payment | None:
        """Retrieve a payment by its business identifier.

        Returns:
            The Payment entity if found, None otherwise.
            Returned entity is a copy; mutations do not affect stored state.
        """

    @abstractmethod
    def save(self, payment: Payment) -> Payment:
        """Persist a payment (upsert semantics).

        Creates the payment if it doesn't exist, updates if it does.
        The payment.id and payment.identifier must not change between
        creation and updates.

        Returns:
            The payment as stored.
        """
