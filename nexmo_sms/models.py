"""Shared Pydantic data models for nexmo-sms."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# --- Enums ---


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"


class MessageType(str, Enum):
    TEXT = "text"
    UNICODE = "unicode"
    BINARY = "binary"
    WAPPUSH = "wappush"


class ReceiptStatus(str, Enum):
    DELIVERED = "DELIVERED"
    EXPIRED = "EXPIRED"
    FAILED = "FAILED"
    BUFFERED = "BUFFERED"
    OTHER = "OTHER"


# --- Request Models ---


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    secret: str = Field(repr=False)


class RestCommand(BaseModel):
    """A named REST operation and the URL template it expands."""

    model_config = ConfigDict(frozen=True)

    name: str
    method: HttpMethod
    url_template: str
    form_encoded: bool = False  # parameters travel in the request body


class PreparedRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    command: str
    method: HttpMethod
    url: str
    body: bytes | None = None
    headers: dict[str, str] = Field(default_factory=dict)


class RawResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    status_code: int
    body: bytes = b""


# --- Send Models ---


class MessagePart(BaseModel):
    """One segment of a (possibly multi-part) outbound message."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    status_text: str
    error_text: str = ""
    message_id: str = ""
    to: str = ""
    network: str = ""
    remaining_balance: Decimal | None = None
    price: Decimal = Decimal("0")

    @property
    def ok(self) -> bool:
        return self.status_code == 0


class SendResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    message_count: int
    messages: list[MessagePart]
    total_cost: Decimal
    response: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return bool(self.messages) and all(m.ok for m in self.messages)


# --- Webhook Models ---


class InboundMessage(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    to: str
    from_: str = Field(alias="from")
    text: str
    network_code: str = ""
    message_id: str = ""


class Receipt(BaseModel):
    """Delivery receipt. ``found`` is False when the payload held none."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    found: bool = False
    to: str = ""
    from_: str = Field(default="", alias="from")
    network_code: str = ""
    message_id: str = ""
    status: ReceiptStatus | None = None
    raw_status: str = ""
    received_time: datetime | None = None

    def exists(self) -> bool:
        return self.found
