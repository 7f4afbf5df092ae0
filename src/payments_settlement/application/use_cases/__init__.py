"""Use cases - One class per application operation."""

from payments_settlement.application.use_cases.register_payment import RegisterPaymentUseCase
from payments_settlement.application.use_cases.settle_payment import SettlePaymentUseCase

__all__ = [
    "RegisterPaymentUseCase",
    "SettlePaymentUseCase",
]
