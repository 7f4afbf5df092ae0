from __future__ import annotations

import secrets
from threading import Lock
from typing import TYPE_CHECKING

from payments_settlement.application.ports import CardTokenizer

if TYPE_CHECKING:
    from payments_settlement.domain.value_objects import CardNumber

TOKEN_PREFIX = "tok_"


class PlaintextCardTokenizer(CardTokenizer):
    """Stores the card number itself.

    Keeps the historical behavior where Payment.card_number holds the
    full, unmasked number.
    """

    def tokenize(self, card_number: CardNumber) -> str:
        return card_number.value


class InMemoryCardVault(CardTokenizer):
    """Issues opaque tokens and keeps the card numbers in process memory.

    Payments then only carry ``tok_...`` references. detokenize() is the
    only way back to the number.
    """

    def __init__(self) -> None:
        self._cards: dict[str, str] = {}
        self._lock = Lock()

    def tokenize(self, card_number: CardNumber) -> str:
        token = f"{TOKEN_PREFIX}{secrets.token_hex(12)}"
        with self._lock:
            self._cards[token] = card_number.value
        return token

    def detokenize(self, token: str) -> str | None:
        with self._lock:
            return self._cards.get(token)
