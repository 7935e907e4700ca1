"""Exception hierarchy for gateway calls."""

from __future__ import annotations


class GatewayError(Exception):
    """Base class for every failure raised by this package."""


class ConfigurationError(GatewayError):
    """Raised when required client settings are missing or invalid."""


class UnknownCommandError(GatewayError):
    """Raised when a REST command name is not in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown REST command: {name}")


class TransportError(GatewayError):
    """No HTTP round trip could be completed."""


class MalformedResponseError(GatewayError):
    """The gateway answered with something that cannot be decoded."""


class NoDataError(GatewayError):
    """The gateway answered, but the expected field was absent."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Response carries no '{field}' field")


class InvalidEncodingError(GatewayError):
    """Caller supplied text that is not valid UTF-8."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"'{field}' needs to be a valid UTF-8 encoded string")


class PreconditionFailedError(GatewayError):
    """The operation is not valid in the facade's current state."""
