"""Sender ID (originator) clean-up.

Networks may reject a badly formatted originator and still bill for the
message, so the value is corrected rather than rejected.
"""

from __future__ import annotations

import re

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")
_LETTER = re.compile(r"[a-zA-Z]")

MAX_ALPHANUMERIC_LENGTH = 11
MAX_NUMERIC_LENGTH = 15


def validate_originator(raw: object) -> str:
    """Return ``raw`` reformatted to satisfy the gateway's sender ID rules."""
    ret = _NON_ALNUM.sub("", str(raw))

    if _LETTER.search(ret):
        return ret[:MAX_ALPHANUMERIC_LENGTH]

    # Numeric: international 00 prefix is dropped before truncation.
    if ret.startswith("00"):
        ret = ret[2:]
    return ret[:MAX_NUMERIC_LENGTH]
