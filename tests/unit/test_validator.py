"""Tests for form validation."""

import math

import pytest

from paysim.core.validator import is_valid, parse_amount, validate
from paysim.models import FormField, FormSnapshot


def _snapshot(**overrides):
    data = {
        "cardholderName": "Jo",
        "cardNumber": "4111111111111111",
        "expiryDate": "12/29",
        "cvv": "123",
        "amount": "10.00",
    }
    data.update(overrides)
    return FormSnapshot(**data)


class TestValidForm:
    def test_valid_snapshot_has_no_errors(self):
        assert validate(_snapshot()) == {}
        assert is_valid(_snapshot())

    def test_grouped_card_number(self):
        assert validate(_snapshot(cardNumber="4111 1111 1111 1111")) == {}

    def test_expired_date_not_checked(self):
        assert validate(_snapshot(expiryDate="01/20")) == {}

    def test_card_number_without_luhn(self):
        assert validate(_snapshot(cardNumber="1234567890123")) == {}


class TestEmptyForm:
    def test_every_field_reports(self):
        errors = validate(FormSnapshot())
        assert set(errors) == set(FormField)
        assert len(errors) == 5

    def test_required_messages(self):
        errors = validate(FormSnapshot())
        assert errors[FormField.CARDHOLDER_NAME] == "Name on card is required"
        assert errors[FormField.CARD_NUMBER] == "Card number is required"
        assert errors[FormField.EXPIRY_DATE] == "Expiry date is required"
        assert errors[FormField.CVV] == "CVV is required"
        assert errors[FormField.AMOUNT] == "Amount is required"


class TestCardholderName:
    def test_blank_after_trim(self):
        errors = validate(_snapshot(cardholderName="   "))
        assert errors == {FormField.CARDHOLDER_NAME: "Name on card is required"}

    def test_too_short(self):
        errors = validate(_snapshot(cardholderName=" J "))
        assert errors == {FormField.CARDHOLDER_NAME: "Name must be at least 2 characters"}


class TestCardNumber:
    @pytest.mark.parametrize("number", ["411111111111", "41111111111111111111"])
    def test_out_of_range(self, number):
        errors = validate(_snapshot(cardNumber=number))
        assert errors == {FormField.CARD_NUMBER: "Invalid card number"}

    def test_whitespace_only_is_required(self):
        errors = validate(_snapshot(cardNumber="   "))
        assert errors == {FormField.CARD_NUMBER: "Card number is required"}


class TestExpiryDate:
    @pytest.mark.parametrize("expiry", ["1/29", "12/2", "1229", "12/29/1", "12/"])
    def test_bad_shape(self, expiry):
        errors = validate(_snapshot(expiryDate=expiry))
        assert errors == {FormField.EXPIRY_DATE: "Invalid expiry date (MM/YY)"}

    @pytest.mark.parametrize("expiry", ["00/29", "13/29", "ab/29"])
    def test_bad_month(self, expiry):
        errors = validate(_snapshot(expiryDate=expiry))
        assert errors == {FormField.EXPIRY_DATE: "Invalid month"}

    def test_year_not_checked(self):
        assert validate(_snapshot(expiryDate="12/ab")) == {}


class TestCVV:
    @pytest.mark.parametrize("cvv", ["1", "12", "12345"])
    def test_bad_length(self, cvv):
        errors = validate(_snapshot(cvv=cvv))
        assert errors == {FormField.CVV: "CVV must be 3-4 digits"}

    def test_four_digits(self):
        assert validate(_snapshot(cvv="1234")) == {}


class TestAmount:
    def test_zero_and_text_fail_alike(self):
        zero = validate(_snapshot(amount="0"))
        text = validate(_snapshot(amount="abc"))
        assert zero == text == {FormField.AMOUNT: "Amount must be greater than 0"}

    @pytest.mark.parametrize("amount", ["-5", ".", "0.00", "1e999"])
    def test_rejected(self, amount):
        errors = validate(_snapshot(amount=amount))
        assert errors == {FormField.AMOUNT: "Amount must be greater than 0"}

    def test_multiple_points_parse_leniently(self):
        assert validate(_snapshot(amount="1.2.3")) == {}

    def test_independent_of_other_fields(self):
        errors = validate(_snapshot(cvv="", amount="0"))
        assert set(errors) == {FormField.CVV, FormField.AMOUNT}


class TestParseAmount:
    def test_plain(self):
        assert parse_amount("10.50") == 10.5

    def test_leading_point(self):
        assert parse_amount(".5") == 0.5

    def test_trailing_point(self):
        assert parse_amount("7.") == 7.0

    def test_trailing_text_ignored(self):
        assert parse_amount("1.2.3") == 1.2
        assert parse_amount("12abc") == 12.0

    def test_non_ascii_digits_not_parsed(self):
        assert math.isnan(parse_amount("１２"))
        assert parse_amount("5１") == 5.0

    def test_no_number(self):
        assert math.isnan(parse_amount("abc"))
        assert math.isnan(parse_amount(""))
        assert math.isnan(parse_amount("."))
