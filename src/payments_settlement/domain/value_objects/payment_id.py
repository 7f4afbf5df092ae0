from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True, slots=True)
class PaymentId:
    """Storage key for a payment record.

    Distinct from the caller-chosen PaymentIdentifier: PaymentId is
    generated at registration and is never exposed as a lookup key.
    """

    value: UUID

    @classmethod
    def generate(cls) -> PaymentId:
        """Generate a new unique PaymentId."""
        return cls(value=uuid4())
