from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payments_settlement.domain.value_objects import CardNumber


class CardTokenizer(ABC):
    """Port for the card storage boundary.

    Contract:
    - tokenize() receives an already well-formed CardNumber
    - tokenize() returns the reference persisted as Payment.card_number
    - Failures propagate as exceptions; settlement does not catch them

    Implementations decide whether the stored reference is the card number
    itself or an opaque token held elsewhere.
    """

    @abstractmethod
    def tokenize(self, card_number: CardNumber) -> str:
        """Return the reference to store for this card number."""
