from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from payments_settlement.application.ports import PaymentRepository
from payments_settlement.domain.exceptions import DuplicatePaymentError, PaymentNotFoundError

if TYPE_CHECKING:
    from payments_settlement.domain.entities import Payment
    from payments_settlement.domain.value_objects import PaymentId, PaymentIdentifier


class InMemoryPaymentRepository(PaymentRepository):
    """In-memory payment repository.

    Implementation notes:
    - Primary storage keyed by PaymentId; a secondary index maps
      PaymentIdentifier to PaymentId for find_by_identifier()
    - Returns deep copies on read and stores deep copies on save
    - NOT thread-safe; relies on external LockProvider for serialization

    Copy-on-read rationale:
    Returning copies catches bugs where code mutates an entity without
    calling save(). This mimics ORM behavior where fetched entities are
    detached from the session until explicitly merged/committed.
    """

    def __init__(self) -> None:
        self._payments: dict[PaymentId, Payment] = {}
        self._by_identifier: dict[PaymentIdentifier, PaymentId] = {}

    def find_by_identifier(self, identifier: PaymentIdentifier) -> Payment | None:
        payment_id = self._by_identifier.get(identifier)
        if payment_id is None:
            return None
        return copy.deepcopy(self._payments[payment_id])

    def get(self, payment_id: PaymentId) -> Payment:
        """Strict lookup by storage key.

        Raises:
            PaymentNotFoundError: If no payment has this ID.
        """
        payment = self._payments.get(payment_id)
        if payment is None:
            raise PaymentNotFoundError(f"Payment not found: {payment_id.value}")
        return copy.deepcopy(payment)

    def save(self, payment: Payment) -> Payment:
        existing_id = self._by_identifier.get(payment.identifier)
        if existing_id is not None and existing_id != payment.id:
            raise DuplicatePaymentError(
                f"Identifier {payment.identifier} already belongs to payment {existing_id.value}"
            )

        self._payments[payment.id] = copy.deepcopy(payment)
        self._by_identifier[payment.identifier] = payment.id
        return copy.deepcopy(payment)

    def __len__(self) -> int:
        return len(self._payments)
