"""Checkout form data models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FormField(str, Enum):
    """Payment form fields, valued by their wire names."""

    CARDHOLDER_NAME = "cardholderName"
    CARD_NUMBER = "cardNumber"
    EXPIRY_DATE = "expiryDate"
    CVV = "cvv"
    AMOUNT = "amount"

    @property
    def label(self) -> str:
        """Human-readable field label."""
        return _LABELS[self]


_LABELS = {
    FormField.CARDHOLDER_NAME: "Name on Card",
    FormField.CARD_NUMBER: "Card Number",
    FormField.EXPIRY_DATE: "Expiry Date",
    FormField.CVV: "CVV",
    FormField.AMOUNT: "Payment Amount ($)",
}

_ATTRS = {
    FormField.CARDHOLDER_NAME: "cardholder_name",
    FormField.CARD_NUMBER: "card_number",
    FormField.EXPIRY_DATE: "expiry_date",
    FormField.CVV: "cvv",
    FormField.AMOUNT: "amount",
}

ValidationErrors = dict[FormField, str]


class FormSnapshot(BaseModel):
    """Current contents of the payment form, as displayed."""

    model_config = ConfigDict(populate_by_name=True)

    cardholder_name: str = Field(default="", alias="cardholderName")
    card_number: str = Field(default="", alias="cardNumber")
    expiry_date: str = Field(default="", alias="expiryDate")
    cvv: str = Field(default="")
    amount: str = Field(default="")

    def get(self, field: FormField) -> str:
        """Return the value of a form field."""
        return getattr(self, _ATTRS[FormField(field)])

    def with_value(self, field: FormField, value: str) -> "FormSnapshot":
        """Return new snapshot with one field replaced."""
        return self.model_copy(update={_ATTRS[FormField(field)]: value})


class FormState(BaseModel):
    """Form snapshot plus its current errors and submission flag."""

    snapshot: FormSnapshot = Field(default_factory=FormSnapshot)
    errors: ValidationErrors = Field(default_factory=dict)
    submitting: bool = False

    @property
    def is_valid(self) -> bool:
        """True when no field currently carries an error."""
        return not self.errors
