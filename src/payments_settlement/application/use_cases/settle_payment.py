from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

import structlog

from payments_settlement.application.dtos import (
    FailureReason,
    SettlementFailure,
    SettlementResult,
    SettlementSuccess,
)
from payments_settlement.domain.exceptions import InvalidIdentifierError
from payments_settlement.domain.value_objects import CardNumber, PaymentIdentifier

if TYPE_CHECKING:
    from payments_settlement.application.dtos import SettlePaymentRequest
    from payments_settlement.application.ports import (
        CardTokenizer,
        LockProvider,
        PaymentRepository,
    )

logger = structlog.get_logger(__name__)


def _amounts_match(registered: Decimal, submitted: object) -> bool:
    """Exact numeric equality; non-finite or inexact submissions never match."""
    if isinstance(submitted, bool) or not isinstance(submitted, (Decimal, int)):
        return False
    # sNaN signals on comparison; finiteness is checked first.
    submitted = Decimal(submitted)
    return submitted.is_finite() and registered == submitted


class SettlePaymentUseCase:
    """Orchestrates the settlement workflow.

    Responsibilities:
    - Acquire the per-identifier lock for the whole read-validate-write
    - Look up the pending payment by business identifier
    - Validate amount (exact Decimal equality), then card format
    - Transition pending → paid exactly once and persist

    Checks run in a fixed order and the first failing check decides the
    outcome. Every outcome is returned as a SettlementResult; business
    failures never raise. Repository and tokenizer errors propagate.
    """

    def __init__(
        self,
        lock_provider: LockProvider,
        payment_repository: PaymentRepository,
        card_tokenizer: CardTokenizer,
    ) -> None:
        self._lock_provider = lock_provider
        self._payment_repo = payment_repository
        self._card_tokenizer = card_tokenizer

    def execute(self, request: SettlePaymentRequest) -> SettlementResult:
        """Execute the settlement workflow.

        Returns:
            SettlementSuccess when the payment was settled by this call, or
            SettlementFailure with reason NOT_FOUND, AMOUNT_MISMATCH,
            INVALID_CARD or ALREADY_PROCESSED. Results carry the trimmed
            identifier once it parses, the raw one otherwise.
        """
        try:
            identifier = PaymentIdentifier(value=request.identifier)
        except InvalidIdentifierError:
            # Nothing can be registered under an invalid identifier.
            return self._fail(request.identifier, FailureReason.NOT_FOUND, amount=None)

        with self._lock_provider.acquire(str(identifier)):
            return self._execute_within_lock(identifier, request)

    def _execute_within_lock(
        self,
        identifier: PaymentIdentifier,
        request: SettlePaymentRequest,
    ) -> SettlementResult:
        key = str(identifier)

        payment = self._payment_repo.find_by_identifier(identifier)
        if payment is None:
            return self._fail(key, FailureReason.NOT_FOUND, amount=None)

        # Report the registered amount, not the submitted one.
        if not _amounts_match(payment.amount, request.amount):
            return self._fail(key, FailureReason.AMOUNT_MISMATCH, amount=payment.amount)

        if not CardNumber.is_well_formed(request.card_number):
            return self._fail(key, FailureReason.INVALID_CARD, amount=payment.amount)

        if payment.paid:
            return self._fail(key, FailureReason.ALREADY_PROCESSED, amount=payment.amount)

        card_number = CardNumber(value=request.card_number)
        paid_payment = payment.mark_paid(self._card_tokenizer.tokenize(card_number))
        self._payment_repo.save(paid_payment)

        logger.info(
            "payment_settled",
            identifier=key,
            payment_id=str(paid_payment.id.value),
            amount=str(paid_payment.amount),
            card=card_number.masked(),
        )
        return SettlementSuccess(
            amount=paid_payment.amount,
            identifier=key,
            card_number=card_number.value,
        )

    def _fail(
        self,
        identifier: str,
        reason: FailureReason,
        amount: Decimal | None,
    ) -> SettlementFailure:
        logger.info(
            "payment_settlement_failed",
            identifier=identifier,
            reason=reason.name,
        )
        return SettlementFailure(reason=reason, amount=amount, identifier=identifier)
