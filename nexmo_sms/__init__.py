"""Client library for the Nexmo SMS gateway REST API.

This package provides:
- Account lookups (balance, pricing, number inventory)
- Outbound text, binary and WAP push messages
- Inbound message and delivery receipt webhook parsing
"""

from nexmo_sms.account import Account
from nexmo_sms.config import ClientSettings
from nexmo_sms.errors import (
    ConfigurationError,
    GatewayError,
    InvalidEncodingError,
    MalformedResponseError,
    NoDataError,
    PreconditionFailedError,
    TransportError,
    UnknownCommandError,
)
from nexmo_sms.messaging.message import Message
from nexmo_sms.messaging.overview import format_overview
from nexmo_sms.messaging.receipt import parse_receipt
from nexmo_sms.models import (
    Credentials,
    HttpMethod,
    InboundMessage,
    MessagePart,
    MessageType,
    PreparedRequest,
    RawResponse,
    Receipt,
    ReceiptStatus,
    RestCommand,
    SendResult,
)
from nexmo_sms.rest.builder import RequestBuilder, build_request
from nexmo_sms.rest.commands import DEFAULT_REGISTRY, CommandRegistry
from nexmo_sms.rest.transport import HttpxTransport, Transport

__all__ = [
    # Exceptions
    "ConfigurationError",
    "GatewayError",
    "InvalidEncodingError",
    "MalformedResponseError",
    "NoDataError",
    "PreconditionFailedError",
    "TransportError",
    "UnknownCommandError",
    # Facades
    "Account",
    "Message",
    # Components
    "ClientSettings",
    "CommandRegistry",
    "DEFAULT_REGISTRY",
    "HttpxTransport",
    "RequestBuilder",
    "Transport",
    "build_request",
    "format_overview",
    "parse_receipt",
    # Models
    "Credentials",
    "HttpMethod",
    "InboundMessage",
    "MessagePart",
    "MessageType",
    "PreparedRequest",
    "RawResponse",
    "Receipt",
    "ReceiptStatus",
    "RestCommand",
    "SendResult",
]
