from __future__ import annotations

import re
from dataclasses import dataclass

from payments_settlement.domain.exceptions import InvalidCardNumberError

CARD_NUMBER_LENGTH = 16
_CARD_NUMBER_PATTERN = re.compile(r"[0-9]{16}")


@dataclass(frozen=True, slots=True)
class CardNumber:
    """Card number accepted for settlement.

    Format policy: exactly 16 ASCII decimal digits. No separators, no
    surrounding whitespace, no Luhn check, no brand detection. Unlike
    PaymentIdentifier, the value is NOT normalized.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.is_well_formed(self.value):
            raise InvalidCardNumberError(
                f"Card number must be exactly {CARD_NUMBER_LENGTH} digits"
            )

    @staticmethod
    def is_well_formed(value: object) -> bool:
        """Check the format policy without raising."""
        if not isinstance(value, str):
            return False
        return _CARD_NUMBER_PATTERN.fullmatch(value) is not None

    @property
    def last_four(self) -> str:
        return self.value[-4:]

    def masked(self) -> str:
        """Return the number with all but the last four digits hidden."""
        return "*" * (CARD_NUMBER_LENGTH - 4) + self.last_four

    def __repr__(self) -> str:
        return f"CardNumber('{self.masked()}')"
