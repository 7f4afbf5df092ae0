"""Payment entity with pending → paid state machine."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import UTC
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from payments_settlement.domain.exceptions import (
    InvalidAmountError,
    InvalidStateTransitionError,
    InvalidTimestampError,
)
from payments_settlement.domain.value_objects.payment_id import PaymentId

if TYPE_CHECKING:
    from datetime import datetime

    from payments_settlement.domain.value_objects.payment_identifier import (
        PaymentIdentifier,
    )


class PaymentState(Enum):
    """Payment lifecycle states."""

    PENDING = "pending"
    PAID = "paid"


@dataclass(frozen=True, slots=True)
class Payment:
    """Payment entity with state machine behavior.

    Payment is immutable (frozen dataclass). All state-changing methods
    return a new Payment instance.

    State machine:
        - pending → paid (mark_paid)
        - paid is terminal (no further transitions)

    Invariants:
        - amount and timestamp never change after creation
        - card_number is set only when paid is True
    """

    id: PaymentId
    identifier: PaymentIdentifier
    amount: Decimal
    timestamp: datetime
    paid: bool = False
    card_number: str | None = None

    @classmethod
    def create(
        cls,
        identifier: PaymentIdentifier,
        amount: Decimal,
        timestamp: datetime,
    ) -> Payment:
        """Factory method to create a pending Payment with validation.

        Args:
            identifier: Caller-chosen business key.
            amount: Exact amount to be settled; must be a positive Decimal.
            timestamp: Registration time; any aware datetime, stored as UTC.

        Returns:
            A new Payment in PENDING state with a fresh PaymentId.

        Raises:
            InvalidAmountError: If amount is not a finite Decimal > 0.
            InvalidTimestampError: If timestamp is naive.
        """
        if isinstance(amount, bool) or not isinstance(amount, (Decimal, int)):
            raise InvalidAmountError(
                f"Payment amount must be an exact decimal, got {type(amount).__name__}"
            )

        amount = Decimal(amount)
        if not amount.is_finite() or amount <= 0:
            raise InvalidAmountError(f"Payment amount must be greater than 0, got {amount}")

        if timestamp.tzinfo is None or timestamp.utcoffset() is None:
            raise InvalidTimestampError(f"Payment timestamp must be timezone-aware, got {timestamp!r}")

        return cls(
            id=PaymentId.generate(),
            identifier=identifier,
            amount=amount,
            timestamp=timestamp.astimezone(UTC),
        )

    @property
    def state(self) -> PaymentState:
        return PaymentState.PAID if self.paid else PaymentState.PENDING

    def mark_paid(self, card_reference: str) -> Payment:
        """Settle the payment.

        Args:
            card_reference: What to store for the card; either the card
                number itself or a token issued by a CardTokenizer.

        Returns:
            New Payment instance in PAID state.

        Raises:
            InvalidStateTransitionError: If the payment is already paid.

        Note:
            This method does NOT validate amount or card format. The
            settlement use case checks those first so it can report
            them as settlement failures instead of exceptions.
        """
        if self.paid:
            raise InvalidStateTransitionError(
                f"Cannot settle payment in state {self.state.value}; "
                f"must be in {PaymentState.PENDING.value} state"
            )

        return replace(self, paid=True, card_number=card_reference)
