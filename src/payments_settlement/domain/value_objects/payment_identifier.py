from __future__ import annotations

from dataclasses import dataclass

from payments_settlement.domain.exceptions import InvalidIdentifierError

MAX_LENGTH = 255


@dataclass(frozen=True)
class PaymentIdentifier:
    """Caller-chosen business key naming one payment intent.

    Rules:
      - Non-empty, max 255 chars
      - Whitespace is trimmed (normalization)
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidIdentifierError(
                f"Payment identifier must be a string, got {type(self.value).__name__}"
            )

        normalized = self.value.strip()

        if normalized != self.value:
            object.__setattr__(self, "value", normalized)

        if not normalized:
            raise InvalidIdentifierError("Payment identifier cannot be empty")

        if len(normalized) > MAX_LENGTH:
            raise InvalidIdentifierError(
                f"Payment identifier cannot exceed {MAX_LENGTH} characters"
            )

    def __str__(self) -> str:
        return self.value
