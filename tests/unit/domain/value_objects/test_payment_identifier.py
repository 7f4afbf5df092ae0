import pytest

from payments_settlement.domain.exceptions import InvalidIdentifierError
from payments_settlement.domain.value_objects import PaymentIdentifier


class TestPaymentIdentifierCreation:
    def test_creates_valid_identifier(self) -> None:
        identifier = PaymentIdentifier(value="12345")

        assert identifier.value == "12345"
        assert str(identifier) == "12345"

    def test_creates_identifier_with_max_length(self) -> None:
        identifier = PaymentIdentifier(value="a" * 255)

        assert len(identifier.value) == 255

    def test_accepts_free_form_characters(self) -> None:
        identifier = PaymentIdentifier(value="order #42 / café")

        assert identifier.value == "order #42 / café"


class TestPaymentIdentifierNormalization:
    def test_trims_surrounding_whitespace(self) -> None:
        identifier = PaymentIdentifier(value="  12345  ")

        assert identifier.value == "12345"

    def test_trimmed_identifiers_are_equal(self) -> None:
        assert PaymentIdentifier(value=" 12345") == PaymentIdentifier(value="12345")


class TestPaymentIdentifierValidation:
    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    def test_raises_for_blank_value(self, raw: str) -> None:
        with pytest.raises(InvalidIdentifierError, match="cannot be empty"):
            PaymentIdentifier(value=raw)

    def test_raises_for_too_long_value(self) -> None:
        with pytest.raises(InvalidIdentifierError, match="255"):
            PaymentIdentifier(value="a" * 256)

    def test_raises_for_non_string(self) -> None:
        with pytest.raises(InvalidIdentifierError):
            PaymentIdentifier(value=12345)  # type: ignore[arg-type]
