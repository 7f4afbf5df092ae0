from __future__ import annotations

from typing import TYPE_CHECKING, Any

from payments_settlement.application.dtos import SettlementSuccess

if TYPE_CHECKING:
    from decimal import Decimal

    from payments_settlement.application.dtos import SettlementResult
    from payments_settlement.domain.entities import Payment


def _render_amount(amount: Decimal | None) -> str | None:
    # Strings keep Decimal precision through JSON encoders.
    return None if amount is None else str(amount)


def present_payment(payment: Payment) -> dict[str, Any]:
    """Render a registered payment."""
    return {
        "id": str(payment.id.value),
        "identifier": str(payment.identifier),
        "amount": _render_amount(payment.amount),
        "timestamp": payment.timestamp.isoformat(),
        "paid": payment.paid,
        "cardNumber": payment.card_number,
    }


def present_settlement(result: SettlementResult) -> dict[str, Any]:
    """Render a settlement outcome.

    Success and failure share one shape; ``cardNumber`` is only
    present on success.
    """
    body: dict[str, Any] = {
        "status": result.status.value,
        "message": result.message,
        "amount": _render_amount(result.amount),
        "identifier": result.identifier,
        "paid": result.paid,
    }
    if isinstance(result, SettlementSuccess):
        body["cardNumber"] = result.card_number
    return body
