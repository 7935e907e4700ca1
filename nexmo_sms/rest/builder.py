"""Turn a REST command plus call parameters into a concrete request."""

from __future__ import annotations

import re
from collections.abc import Mapping
from urllib.parse import quote, urlencode

from nexmo_sms.models import Credentials, PreparedRequest, RestCommand
from nexmo_sms.rest.commands import DEFAULT_REGISTRY, CommandRegistry

DEFAULT_BASE_URL = "https://rest.nexmo.com"

_PLACEHOLDER = re.compile(r"\{(\w+)\}")
_ACCEPT_JSON = {"Accept": "application/json"}
_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def expand_template(
    template: str, credentials: Credentials, params: Mapping[str, object],
) -> str:
    """Substitute credentials and parameters into ``template``.

    Placeholders without a matching parameter are left as literal text.
    """
    values: dict[str, object] = {**params, "k": credentials.key, "s": credentials.secret}

    def _sub(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in values:
            return match.group(0)
        return quote(str(values[name]), safe="")

    return _PLACEHOLDER.sub(_sub, template)


def build_request(
    command: RestCommand,
    credentials: Credentials,
    params: Mapping[str, object] | None = None,
    base_url: str = DEFAULT_BASE_URL,
) -> PreparedRequest:
    params = params or {}
    headers = dict(_ACCEPT_JSON)
    body: bytes | None = None

    if command.form_encoded:
        path = command.url_template
        form = {str(k): str(v) for k, v in params.items()}
        form["username"] = credentials.key
        form["password"] = credentials.secret
        body = urlencode(form).encode("ascii")
        headers["Content-Type"] = _FORM_CONTENT_TYPE
    else:
        path = expand_template(command.url_template, credentials, params)

    return PreparedRequest(
        command=command.name,
        method=command.method,
        url=f"{base_url.rstrip('/')}{path}",
        body=body,
        headers=headers,
    )


class RequestBuilder:
    """Binds a base URL and command registry for repeated builds."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        registry: CommandRegistry = DEFAULT_REGISTRY,
    ) -> None:
        self._base_url = base_url
        self._registry = registry

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    def build(
        self,
        command: str | RestCommand,
        credentials: Credentials,
        params: Mapping[str, object] | None = None,
    ) -> PreparedRequest:
        if isinstance(command, str):
            command = self._registry.resolve(command)
        return build_request(command, credentials, params, self._base_url)
