"""
Outgoing email models.

These mirror the request/response shapes of the mailer: a send request with
optional base64 attachments, and the send result the routes hand back to the
front-end. JSON field names are camelCase (``statusText``, ``mimeType``) so the
browser log table reads them directly.
"""

import base64
import binascii
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Attachment(BaseModel):
    """A single outgoing file attachment, content already base64-encoded."""

    model_config = ConfigDict(populate_by_name=True)

    filename: str
    mime_type: str = Field(alias="mimeType")
    content: str  # base64 of the file bytes

    @field_validator("content")
    @classmethod
    def content_must_be_base64(cls, v: str) -> str:
        try:
            base64.b64decode(v, validate=True)
        except (binascii.Error, ValueError):
            raise ValueError("attachment content must be valid base64")
        return v

    def decoded(self) -> bytes:
        """Return the raw attachment bytes."""
        return base64.b64decode(self.content)


class SendEmailParams(BaseModel):
    """
    Email request handed to GmailMailer.send_email.

    sender_email defaults to the address the mailer was initialized with,
    sender_name to the domain part of the sender address, and subject to
    "No Subject".
    """

    model_config = ConfigDict(populate_by_name=True)

    recipient_email: str = Field(alias="recipientEmail")
    sender_email: Optional[str] = Field(default=None, alias="senderEmail")
    sender_name: Optional[str] = Field(default=None, alias="senderName")
    subject: Optional[str] = None
    message: str
    attachments: list[Attachment] = []


class SendEmailResponse(BaseModel):
    """Outcome of a single send attempt."""

    model_config = ConfigDict(populate_by_name=True)

    sent: bool
    status: Optional[int] = None
    status_text: Optional[str] = Field(default=None, alias="statusText")
    response_url: Optional[str] = Field(default=None, alias="responseUrl")
    message: Optional[str] = None
    gmail_response: Optional[Any] = Field(default=None, alias="gmailResponse")


class OperationResult(SendEmailResponse):
    """Send result tagged with the demo operation that produced it."""

    operation: str

    @classmethod
    def from_response(cls, operation: str, response: SendEmailResponse) -> "OperationResult":
        return cls(operation=operation, **response.model_dump())


class InitializeClientResponse(BaseModel):
    status: bool
    message: str
