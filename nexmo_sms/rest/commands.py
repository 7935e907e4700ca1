"""REST command registry.

Maps operation names to the HTTP method and URL template they expand.
``{k}`` and ``{s}`` stand for the account key and secret; every other
``{name}`` placeholder is filled from the call parameters.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from nexmo_sms.errors import UnknownCommandError
from nexmo_sms.models import HttpMethod, RestCommand

GET_BALANCE = "getBalance"
GET_PRICING = "getPricing"
GET_OWN_NUMBERS = "getOwnNumbers"
SEARCH_NUMBERS = "searchNumbers"
BUY_NUMBER = "buyNumber"
CANCEL_NUMBER = "cancelNumber"
SEND_SMS = "sendSMS"


class CommandRegistry(Mapping[str, RestCommand]):
    """Read-only lookup of :class:`RestCommand` by name."""

    def __init__(self, commands: Iterable[RestCommand]) -> None:
        self._commands: Mapping[str, RestCommand] = MappingProxyType(
            {cmd.name: cmd for cmd in commands},
        )

    def __getitem__(self, name: str) -> RestCommand:
        return self._commands[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def resolve(self, name: str) -> RestCommand:
        """Return the command called ``name`` or raise UnknownCommandError."""
        try:
            return self._commands[name]
        except KeyError:
            raise UnknownCommandError(name) from None


DEFAULT_REGISTRY = CommandRegistry([
    RestCommand(
        name=GET_BALANCE,
        method=HttpMethod.GET,
        url_template="/account/get-balance/{k}/{s}",
    ),
    RestCommand(
        name=GET_PRICING,
        method=HttpMethod.GET,
        url_template="/account/get-pricing/outbound/{k}/{s}/{countryCode}",
    ),
    RestCommand(
        name=GET_OWN_NUMBERS,
        method=HttpMethod.GET,
        url_template="/account/numbers/{k}/{s}",
    ),
    RestCommand(
        name=SEARCH_NUMBERS,
        method=HttpMethod.GET,
        url_template="/number/search/{k}/{s}/{countryCode}?pattern={pattern}",
    ),
    RestCommand(
        name=BUY_NUMBER,
        method=HttpMethod.POST,
        url_template="/number/buy/{k}/{s}/{countryCode}/{msisdn}",
    ),
    RestCommand(
        name=CANCEL_NUMBER,
        method=HttpMethod.POST,
        url_template="/number/cancel/{k}/{s}/{countryCode}/{msisdn}",
    ),
    RestCommand(
        name=SEND_SMS,
        method=HttpMethod.POST,
        url_template="/sms/json",
        form_encoded=True,
    ),
])
