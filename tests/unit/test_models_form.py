"""Tests for form models."""

from paysim.models import FormField, FormSnapshot, FormState


class TestFormSnapshot:
    def test_defaults_empty(self):
        snapshot = FormSnapshot()
        assert all(snapshot.get(field) == "" for field in FormField)

    def test_wire_names(self):
        snapshot = FormSnapshot(cardholderName="Jo", cardNumber="4111", expiryDate="12/29")
        assert snapshot.cardholder_name == "Jo"
        assert snapshot.get(FormField.CARD_NUMBER) == "4111"
        assert snapshot.get("expiryDate") == "12/29"

    def test_with_value_returns_copy(self):
        snapshot = FormSnapshot()
        updated = snapshot.with_value(FormField.CVV, "123")
        assert updated.cvv == "123"
        assert snapshot.cvv == ""


class TestFormField:
    def test_labels(self):
        assert FormField.CARDHOLDER_NAME.label == "Name on Card"
        assert FormField.AMOUNT.label == "Payment Amount ($)"

    def test_values(self):
        assert [f.value for f in FormField] == [
            "cardholderName",
            "cardNumber",
            "expiryDate",
            "cvv",
            "amount",
        ]


class TestFormState:
    def test_initial(self):
        state = FormState()
        assert state.is_valid
        assert state.submitting is False
        assert state.snapshot == FormSnapshot()

    def test_with_errors(self):
        state = FormState(errors={FormField.CVV: "CVV is required"})
        assert not state.is_valid
