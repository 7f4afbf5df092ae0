from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from payments_settlement.domain.entities import Payment
from payments_settlement.domain.exceptions import DuplicatePaymentError
from payments_settlement.domain.value_objects import PaymentIdentifier

if TYPE_CHECKING:
    from payments_settlement.application.dtos import RegisterPaymentRequest
    from payments_settlement.application.ports import (
        LockProvider,
        PaymentRepository,
        TimeProvider,
    )

logger = structlog.get_logger(__name__)


class RegisterPaymentUseCase:
    """Creates a pending payment that can later be settled.

    Duplicate policy: an identifier can be registered once. A second
    registration under the same identifier raises DuplicatePaymentError
    and leaves the existing record untouched, paid or not.
    """

    def __init__(
        self,
        lock_provider: LockProvider,
        time_provider: TimeProvider,
        payment_repository: PaymentRepository,
    ) -> None:
        self._lock_provider = lock_provider
        self._time_provider = time_provider
        self._payment_repo = payment_repository

    def execute(self, request: RegisterPaymentRequest) -> Payment:
        """Register a pending payment.

        Args:
            request: Identifier, amount and optional timestamp.

        Returns:
            The stored Payment (paid=False, card_number=None).

        Raises:
            InvalidIdentifierError: Identifier is empty or too long.
            InvalidAmountError: Amount is not a positive exact decimal.
            InvalidTimestampError: Requested timestamp is naive.
            DuplicatePaymentError: Identifier is already registered.
        """
        identifier = PaymentIdentifier(value=request.identifier)

        with self._lock_provider.acquire(str(identifier)):
            if self._payment_repo.find_by_identifier(identifier) is not None:
                logger.warning(
                    "payment_registration_rejected",
                    identifier=str(identifier),
                    reason="duplicate_identifier",
                )
                raise DuplicatePaymentError(f"Payment already registered: {identifier}")

            timestamp = self._time_provider.stamp(request.timestamp)
            payment = Payment.create(
                identifier=identifier,
                amount=request.amount,
                timestamp=timestamp,
            )
            stored = self._payment_repo.save(payment)

        logger.info(
            "payment_registered",
            identifier=str(identifier),
            payment_id=str(stored.id.value),
            amount=str(stored.amount),
        )
        return stored
