"""Entrypoints layer - Delivery-facing adapters.

Entrypoints translate use case output into plain response bodies for a
transport (HTTP, CLI). Routing and status codes live outside this package;
every settlement outcome renders as a normal response body.
"""

from payments_settlement.entrypoints.presenters import present_payment, present_settlement

__all__ = [
    "present_payment",
    "present_settlement",
]
