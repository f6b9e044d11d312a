"""Request/response schemas for the admin API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from .models import OrderRef, UserId


class AdditionalEmailsUpdate(BaseModel):
    value: str = Field(default="", description="Comma-separated addresses as typed by the admin")


class AdditionalEmailsOut(BaseModel):
    user_id: UserId
    value: str
    additional_emails: list[str]


class EmailHeadersRequest(BaseModel):
    """An outbound order email about to be handed to the transport."""

    email_type: str
    order: OrderRef | None = None
    headers: list[str] | str | None = Field(default_factory=list)


class EmailHeadersResponse(BaseModel):
    headers: Any
