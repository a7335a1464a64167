"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from localmart.domain.exceptions import ValidationError
from localmart.domain.model.value_objects import DeliveryAddress, Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation_defaults_to_shillings(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "KES"

    def test_of_factory_from_float(self):
        assert Money.of(0.1).amount == Decimal("0.1")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_addition_and_multiplication(self):
        assert Money.of("7.50") * 3 + Money.of("1") == Money.of("23.50")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "KES") + Money(Decimal("5"), "USD")

    def test_str_formatting(self):
        assert str(Money.of("150")) == "KES 150.00"

    def test_differs_from_respects_tolerance(self):
        tolerance = Decimal("0.01")
        assert not Money.of("10.00").differs_from(Money.of("10.01"), tolerance)
        assert Money.of("10.00").differs_from(Money.of("10.02"), tolerance)
        assert Money.of("10.00").differs_from(Money.of("5.00"), tolerance)


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    @pytest.mark.parametrize("value", [0, -3])
    def test_non_positive_rejected(self, value):
        with pytest.raises(ValidationError, match="at least 1"):
            Quantity(value)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(1.5)


# ── DeliveryAddress ──────────────────────────────────────────────────────────


class TestDeliveryAddress:

    def test_fields_are_trimmed(self):
        address = DeliveryAddress(street="  1 Kenyatta Ave ", city=" Nairobi", phone="0700 ")
        assert address.street == "1 Kenyatta Ave"
        assert address.city == "Nairobi"
        assert address.phone == "0700"

    @pytest.mark.parametrize(
        "street, city, phone, message",
        [
            ("", "Nairobi", "0700", "Street address is required"),
            ("1 Main", "   ", "0700", "City is required"),
            ("1 Main", "Nairobi", "", "Phone number is required"),
        ],
    )
    def test_blank_field_rejected(self, street, city, phone, message):
        with pytest.raises(ValidationError, match=message):
            DeliveryAddress(street=street, city=city, phone=phone)
