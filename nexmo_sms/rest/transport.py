"""HTTP transport for prepared gateway requests."""

from __future__ import annotations

import logging
import time
from typing import Protocol

import httpx

from nexmo_sms.errors import TransportError
from nexmo_sms.models import PreparedRequest, RawResponse

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = 30.0


class Transport(Protocol):
    def send(self, request: PreparedRequest) -> RawResponse: ...


class HttpxTransport:
    """Executes requests with a synchronous ``httpx.Client``.

    Network failures surface as TransportError. There is no retry here;
    that policy belongs above the transport.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: float = _DEFAULT_TIMEOUT,
        verify: bool = True,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout, verify=verify)

    def send(self, request: PreparedRequest) -> RawResponse:
        t0 = time.monotonic()
        try:
            resp = self._client.request(
                request.method.value,
                request.url,
                content=request.body,
                headers=request.headers,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            # The URL embeds credentials, so only the command name is logged.
            logger.warning(
                "Request %s failed: %s", request.command, type(exc).__name__,
            )
            raise TransportError(f"{request.command}: {type(exc).__name__}") from exc

        logger.debug(
            "Request %s returned %d in %dms",
            request.command,
            resp.status_code,
            int((time.monotonic() - t0) * 1000),
        )
        return RawResponse(status_code=resp.status_code, body=resp.content)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
