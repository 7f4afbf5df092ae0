"""Domain entities - Objects with identity and lifecycle."""

from payments_settlement.domain.entities.payment import Payment, PaymentState

__all__ = [
    "Payment",
    "PaymentState",
]
