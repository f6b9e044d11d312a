"""Data models for the order email CC extension."""

from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, Field

UserId = Union[int, str]

EDIT_USERS = "edit_users"
SEND_ORDER_EMAILS = "send_order_emails"


class EmailType(str, Enum):
    """Customer-facing transactional order emails that may carry CC headers."""

    ON_HOLD = "customer_on_hold_order"
    PROCESSING = "customer_processing_order"
    COMPLETED = "customer_completed_order"
    REFUNDED = "customer_refunded_order"
    PARTIALLY_REFUNDED = "customer_partially_refunded_order"
    INVOICE = "customer_invoice"
    FAILED = "customer_failed_order"


class OrderRef(BaseModel):
    """Read-only view of a host order, as far as this extension cares."""

    order_id: UserId | None = Field(default=None, description="Host order identifier")
    user_id: UserId | None = Field(
        default=None,
        description="Owning customer; None, 0 or empty means guest checkout",
    )


class Actor(BaseModel):
    """The identity performing a profile edit.

    Authorization is decided by the host; this extension only inspects the
    capability flags it is handed.
    """

    user_id: UserId | None = Field(default=None, description="Acting user, if known")
    capabilities: frozenset[str] = Field(
        default_factory=frozenset,
        description="Capability flags granted by the host (e.g. edit_users)",
    )

    def can_edit_user(self, user_id: UserId) -> bool:
        """Editors may change any profile; everybody may change their own."""
        if EDIT_USERS in self.capabilities:
            return True
        return self.user_id is not None and str(self.user_id) == str(user_id)

    def can_send_order_emails(self) -> bool:
        """Dispatchers and editors may see the CC list an order email will get."""
        return bool(self.capabilities & {SEND_ORDER_EMAILS, EDIT_USERS})


class UserContactProfile(BaseModel):
    """Additional CC addresses attached to one user."""

    user_id: UserId
    additional_emails: list[str] = Field(default_factory=list)

    @property
    def raw(self) -> str:
        """Stored representation: addresses joined by ``", "``."""
        return ", ".join(self.additional_emails)


class ProfileField(BaseModel):
    """Descriptor of the single text input the host renders on a user profile."""

    field_id: str = Field(description="Form field name, identical to the persistence key")
    label: str = Field(default="Additional Email Addresses")
    description: str = Field(
        default=(
            "Enter additional email addresses separated by commas. These addresses "
            "will receive copies of all order related emails sent to this customer. "
            "Example: email1@example.com, email2@example.com"
        ),
    )
    value: str = Field(default="", description="Current stored address list")
