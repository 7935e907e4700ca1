"""Text validity checks, unicode detection and hex encoding."""

from __future__ import annotations

from nexmo_sms.errors import InvalidEncodingError


def ensure_text(value: str | bytes, field: str) -> str:
    """Return ``value`` as str, raising InvalidEncodingError if it is not UTF-8."""
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidEncodingError(field) from None
    if not isinstance(value, str):
        raise InvalidEncodingError(field)
    try:
        # Lone surrogates survive in str but cannot be sent.
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidEncodingError(field) from None
    return value


def requires_unicode(message: str, override: bool | None = None) -> bool:
    """Whether ``message`` must be sent as a unicode-type SMS.

    An explicit ``override`` always wins; otherwise any code point above
    127 forces unicode.
    """
    if override is not None:
        return bool(override)
    return any(ord(ch) > 127 for ch in message)


def hex_encode(value: str | bytes) -> str:
    if isinstance(value, str):
        value = value.encode("utf-8")
    return value.hex()
