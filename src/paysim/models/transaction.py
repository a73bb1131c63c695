"""Transaction result models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TransactionStatus(str, Enum):
    """Outcome of a simulated payment."""

    SUCCESS = "Success"
    FAILED = "Failed"  # Reserved; no flow produces it yet


class TransactionRecord(BaseModel):
    """Immutable result of a submitted payment.

    Serialized with camelCase keys, which is the format kept in the
    durable mirror.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    cardholder_name: str = Field(..., alias="cardholderName")
    masked_card_number: str = Field(
        ...,
        alias="maskedCardNumber",
        pattern=r"^\*{4} \*{4} \*{4} \S{0,4}$",
    )
    expiry_date: str = Field(..., alias="expiryDate")
    amount: str = Field(..., description="Fixed 2-decimal amount")
    status: TransactionStatus
    transaction_id: str = Field(..., alias="transactionId")

    @property
    def is_success(self) -> bool:
        return self.status == TransactionStatus.SUCCESS

    @property
    def amount_display(self) -> str:
        """Format amount for display."""
        return f"${self.amount}"

    def to_json(self) -> str:
        """Serialize to the mirror wire format."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: str) -> "TransactionRecord":
        """Parse the mirror wire format.

        Raises:
            pydantic.ValidationError: If the content is malformed
        """
        return cls.model_validate_json(data)
