"""Value objects - Immutable objects defined by their attributes."""

from payments_settlement.domain.value_objects.card_number import CardNumber
from payments_settlement.domain.value_objects.payment_id import PaymentId
from payments_settlement.domain.value_objects.payment_identifier import PaymentIdentifier

__all__ = [
    "CardNumber",
    "PaymentId",
    "PaymentIdentifier",
]
