"""Wires use cases to in-memory adapters."""

from __future__ import annotations

from dataclasses import dataclass

from payments_settlement.application.ports import CardTokenizer
from payments_settlement.application.use_cases import (
    RegisterPaymentUseCase,
    SettlePaymentUseCase,
)
from payments_settlement.config import Settings, get_settings
from payments_settlement.infrastructure import (
    InMemoryCardVault,
    InMemoryLockProvider,
    InMemoryPaymentRepository,
    PlaintextCardTokenizer,
    SystemTimeProvider,
)
from payments_settlement.infrastructure.logging import setup_logging


@dataclass(frozen=True, slots=True)
class UseCases:
    register_payment: RegisterPaymentUseCase
    settle_payment: SettlePaymentUseCase
    payment_repository: InMemoryPaymentRepository
    card_tokenizer: CardTokenizer


def build_use_cases(
    settings: Settings | None = None,
    configure_logging: bool = True,
) -> UseCases:
    """Build both use cases sharing one repository and one lock provider.

    Registration and settlement must share the lock provider so that a
    registration and a settlement for the same identifier serialize.
    Logging is configured from the same settings unless the host
    application already owns logging and passes configure_logging=False.
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings)

    lock_provider = InMemoryLockProvider()
    repository = InMemoryPaymentRepository()
    tokenizer: CardTokenizer = (
        InMemoryCardVault() if settings.tokenize_cards else PlaintextCardTokenizer()
    )

    return UseCases(
        register_payment=RegisterPaymentUseCase(
            lock_provider=lock_provider,
            time_provider=SystemTimeProvider(),
            payment_repository=repository,
        ),
        settle_payment=SettlePaymentUseCase(
            lock_provider=lock_provider,
            payment_repository=repository,
            card_tokenizer=tokenizer,
        ),
        payment_repository=repository,
        card_tokenizer=tokenizer,
    )
