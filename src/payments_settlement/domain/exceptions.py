"""Domain exceptions for payments-settlement.

Exception hierarchy:
    DomainException (base)
    ├── State & Transition Errors
    │   └── InvalidStateTransitionError
    ├── Lookup & Registration Errors
    │   ├── PaymentNotFoundError
    │   └── DuplicatePaymentError
    └── Validation Errors
        ├── InvalidIdentifierError
        ├── InvalidAmountError
        ├── InvalidTimestampError
        └── InvalidCardNumberError

Settlement outcomes (not found, amount mismatch, invalid card, already
processed) are NOT exceptions; they are returned as SettlementFailure values.
These exceptions cover registration misuse and programming errors only.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# State & Transition Errors
# =============================================================================


class InvalidStateTransitionError(DomainException):
    """Raised when a state transition violates the payment state machine.

    Valid transitions:
        - pending → paid

    Paid is terminal; marking a paid payment as paid again is rejected.
    """


# =============================================================================
# Lookup & Registration Errors
# =============================================================================


class PaymentNotFoundError(DomainException):
    """Raised by strict repository lookups when a payment does not exist."""


class DuplicatePaymentError(DomainException):
    """Raised when registering an identifier that is already registered.

    This is a CLIENT ERROR (HTTP 409 Conflict). The existing payment
    is left untouched.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidTimestampError(DomainException):
    """Raised when a registration timestamp has no timezone."""


class InvalidIdentifierError(DomainException):
    """Raised when a business identifier is empty or too long."""


class InvalidAmountError(DomainException):
    """Raised when a registration amount is not a positive exact decimal."""


class InvalidCardNumberError(DomainException):
    """Raised when constructing a CardNumber from a malformed value."""
