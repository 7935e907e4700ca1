"""Decode gateway responses and normalize their key names.

The gateway mixes ``network-code`` style keys with plain ones. Every
mapping key has its hyphens removed so callers look fields up by a single
canonical spelling (``networkcode``, ``messageprice``, ``messagecount``).
"""

from __future__ import annotations

import json
from typing import Any

from nexmo_sms.errors import MalformedResponseError


def normalize_keys(tree: Any) -> Any:
    """Return a copy of ``tree`` with ``-`` stripped from all mapping keys."""
    if isinstance(tree, dict):
        return {
            _strip(key): normalize_keys(value)
            for key, value in tree.items()
        }
    if isinstance(tree, list):
        return [normalize_keys(item) for item in tree]
    return tree


def _strip(key: Any) -> Any:
    return key.replace("-", "") if isinstance(key, str) else key


def decode_response(body: bytes) -> Any | None:
    """Decode a JSON response body into a normalized tree.

    Returns None for an empty body. Raises MalformedResponseError when the
    body is not UTF-8 JSON.
    """
    if not body or not body.strip():
        return None
    try:
        decoded = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedResponseError(f"Response is not valid JSON: {exc}") from exc
    return normalize_keys(decoded)


def lookup(tree: Any, *path: str | int) -> Any | None:
    """Walk ``path`` through ``tree``; None if any step is missing.

    String steps index mappings, integer steps index sequences.
    """
    node = tree
    for step in path:
        if isinstance(step, str) and isinstance(node, dict):
            node = node.get(step)
        elif isinstance(step, int) and isinstance(node, list):
            if not -len(node) <= step < len(node):
                return None
            node = node[step]
        else:
            return None
        if node is None:
            return None
    return node
