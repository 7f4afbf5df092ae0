"""Data Transfer Objects for use case input/output.

Settlement never raises for business outcomes. It returns a
SettlementResult: either SettlementSuccess or SettlementFailure, tagged
by ``status`` and, for failures, by ``reason``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime
    from decimal import Decimal


@dataclass(frozen=True, slots=True)
class RegisterPaymentRequest:
    """Input DTO for the RegisterPayment use case.

    ``timestamp`` is optional; when omitted the use case's TimeProvider
    stamps the registration.
    """

    identifier: str
    amount: Decimal
    timestamp: datetime | None = None


@dataclass(frozen=True, slots=True)
class SettlePaymentRequest:
    """Input DTO for the SettlePayment use case. Never persisted."""

    identifier: str
    card_number: str | None
    amount: Decimal


class SettlementStatus(Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


class FailureReason(Enum):
    """Why a settlement was refused. The value is the caller-facing message."""

    NOT_FOUND = "Payment request not found"
    AMOUNT_MISMATCH = "Amount does not match the payment request"
    INVALID_CARD = "Invalid credit card number"
    ALREADY_PROCESSED = "Payment request already processed"

    @property
    def message(self) -> str:
        return self.value


SUCCESS_MESSAGE = "Payment processed successfully"


@dataclass(frozen=True, slots=True)
class SettlementSuccess:
    """The payment was settled by this call."""

    amount: Decimal
    identifier: str
    card_number: str

    status = SettlementStatus.SUCCESS
    message = SUCCESS_MESSAGE
    paid = True
    is_success = True


@dataclass(frozen=True, slots=True)
class SettlementFailure:
    """The payment was not settled; the stored record is unchanged.

    ``amount`` is the *registered* amount, or None when no payment
    matched the identifier.
    """

    reason: FailureReason
    amount: Decimal | None
    identifier: str

    status = SettlementStatus.FAILED
    paid = False
    is_success = False

    @property
    def message(self) -> str:
        return self.reason.message


SettlementResult = SettlementSuccess | SettlementFailure
