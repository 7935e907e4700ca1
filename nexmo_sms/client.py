"""Common plumbing shared by the Account and Message facades."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from nexmo_sms.config import ClientSettings
from nexmo_sms.models import Credentials, RawResponse
from nexmo_sms.rest.builder import RequestBuilder
from nexmo_sms.rest.normalizer import decode_response
from nexmo_sms.rest.transport import HttpxTransport, Transport

logger = logging.getLogger(__name__)

_C = TypeVar("_C", bound="GatewayClient")


class GatewayClient:
    """Holds credentials, a request builder and a transport."""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        transport: Transport | None = None,
        builder: RequestBuilder | None = None,
    ) -> None:
        self._credentials = Credentials(key=api_key, secret=api_secret)
        self._builder = builder or RequestBuilder()
        self._owned_transport: HttpxTransport | None = None
        if transport is None:
            self._owned_transport = HttpxTransport()
            transport = self._owned_transport
        self._transport = transport

    @classmethod
    def from_settings(cls: type[_C], settings: ClientSettings) -> _C:
        transport = HttpxTransport(timeout=settings.timeout, verify=settings.verify_tls)
        client = cls(
            settings.api_key,
            settings.api_secret,
            transport=transport,
            builder=RequestBuilder(base_url=settings.base_url),
        )
        client._owned_transport = transport
        return client

    @classmethod
    def from_env(cls: type[_C]) -> _C:
        """Create a client configured from NEXMO_* environment variables."""
        return cls.from_settings(ClientSettings.from_env())

    def _execute(
        self, command: str, params: Mapping[str, object] | None = None,
    ) -> RawResponse:
        request = self._builder.build(command, self._credentials, params)
        raw = self._transport.send(request)
        logger.debug("%s -> HTTP %d", command, raw.status_code)
        return raw

    def _fetch(
        self, command: str, params: Mapping[str, object] | None = None,
    ) -> Any | None:
        """Run ``command`` and return its normalized response tree."""
        return decode_response(self._execute(command, params).body)

    def close(self) -> None:
        if self._owned_transport is not None:
            self._owned_transport.close()

    def __enter__(self: _C) -> _C:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
