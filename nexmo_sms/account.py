"""Account balance, pricing and number inventory.

Lookups are memoized for the lifetime of the instance. The cache never
expires and is not invalidated by purchases or cancellations.
"""

from __future__ import annotations

import copy
import logging
import threading
from collections.abc import Callable
from decimal import Decimal
from typing import Any

from nexmo_sms.client import GatewayClient
from nexmo_sms.errors import NoDataError
from nexmo_sms.messaging.cost import to_decimal
from nexmo_sms.rest.commands import (
    BUY_NUMBER,
    CANCEL_NUMBER,
    GET_BALANCE,
    GET_OWN_NUMBERS,
    GET_PRICING,
    SEARCH_NUMBERS,
)
from nexmo_sms.rest.normalizer import lookup

logger = logging.getLogger(__name__)

_BALANCE_KEY = "balance"
_NUMBERS_KEY = "numbers"


class Account(GatewayClient):
    """Handles interaction with a gateway account.

    Usage::

        account = Account(api_key, api_secret)
        account.balance()
        account.sms_pricing("gb")
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._cache: dict[str, Any] = {}
        self._cache_lock = threading.Lock()

    def balance(self) -> Decimal:
        """Account balance in euros."""
        return self._cached(_BALANCE_KEY, self._fetch_balance)

    def sms_pricing(self, country_code: str) -> Decimal:
        """Price of one outbound SMS to ``country_code``."""
        pricing = self._pricing(country_code)
        price = lookup(pricing, "mt")
        if price is None:
            raise NoDataError("mt")
        return to_decimal(price, "mt")

    def dialing_code(self, country_code: str) -> str:
        """International dialing prefix for ``country_code``."""
        pricing = self._pricing(country_code)
        prefix = lookup(pricing, "prefix")
        if prefix is None:
            raise NoDataError("prefix")
        return str(prefix)

    def numbers_list(self) -> list[dict[str, Any]]:
        """Numbers owned by the account; empty when there are none."""
        data = self._cached(_NUMBERS_KEY, self._fetch_own_numbers)
        numbers = lookup(data, "numbers")
        if not isinstance(numbers, list):
            return []
        # Callers own the result; the cached fragment must stay untouched.
        return copy.deepcopy(numbers)

    def numbers_search(self, country_code: str, pattern: str) -> list[dict[str, Any]]:
        """Search numbers available to buy. Results are never cached."""
        data = self._fetch(SEARCH_NUMBERS, {
            "countryCode": country_code.upper(),
            "pattern": pattern,
        })
        numbers = lookup(data, "numbers")
        if not isinstance(numbers, list):
            raise NoDataError("numbers")
        return list(numbers)

    def numbers_buy(self, country_code: str, msisdn: str) -> bool:
        """Purchase ``msisdn``. True iff the gateway answered HTTP 200."""
        raw = self._execute(BUY_NUMBER, {
            "countryCode": country_code.upper(),
            "msisdn": msisdn,
        })
        if raw.status_code != 200:
            logger.warning("Number purchase rejected with HTTP %d", raw.status_code)
        return raw.status_code == 200

    def numbers_cancel(self, country_code: str, msisdn: str) -> bool:
        """Cancel ``msisdn``. True iff the gateway answered HTTP 200."""
        raw = self._execute(CANCEL_NUMBER, {
            "countryCode": country_code.upper(),
            "msisdn": msisdn,
        })
        if raw.status_code != 200:
            logger.warning("Number cancellation rejected with HTTP %d", raw.status_code)
        return raw.status_code == 200

    # --- cache ---

    def _cached(self, key: str, fetch: Callable[[], Any]) -> Any:
        """Return the cached fragment for ``key``, fetching it on a miss.

        The fetch runs outside the lock; concurrent misses may both fetch,
        and the last one to finish wins.
        """
        with self._cache_lock:
            if key in self._cache:
                logger.debug("Account cache hit: %s", key)
                return self._cache[key]
        value = fetch()
        with self._cache_lock:
            self._cache[key] = value
        return value

    def _pricing(self, country_code: str) -> dict[str, Any]:
        code = country_code.upper()
        return self._cached(f"pricing:{code}", lambda: self._fetch_pricing(code))

    def _fetch_balance(self) -> Decimal:
        value = lookup(self._fetch(GET_BALANCE), "value")
        if value is None:
            raise NoDataError("value")
        return to_decimal(value, "value")

    def _fetch_pricing(self, country_code: str) -> dict[str, Any]:
        data = self._fetch(GET_PRICING, {"countryCode": country_code})
        if not data or not isinstance(data, dict):
            raise NoDataError("pricing")
        return data

    def _fetch_own_numbers(self) -> Any:
        data = self._fetch(GET_OWN_NUMBERS)
        if data is None:
            raise NoDataError("numbers")
        return data
