"""Query-string encoding for request parameters.

Empty values are dropped before encoding: ``None`` and zero-length strings,
sequences and sets. Numbers, booleans and mappings (even empty ones) are
always kept, so ``{"max_dist": 0}`` still encodes to ``max_dist=0``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from typing import Any
from urllib.parse import urlencode


def is_empty(value: Any) -> bool:
    """Whether ``value`` should be left out of a query string."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, Sequence, Set)):
        return len(value) == 0
    return False


def skip_empty(params: Mapping[str, Any]) -> dict[str, Any]:
    """Copy of ``params`` without empty values, in the original key order."""
    return {key: value for key, value in params.items() if not is_empty(value)}


def _wire_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return json.dumps(value, separators=(",", ":"), default=str)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.value
    return value


def encode(params: Mapping[str, Any] | None) -> str:
    """
    Encode parameters as ``application/x-www-form-urlencoded``.

    Sequence values are written as repeated keys, one per element, in order.
    Mapping values are a single pair carrying compact JSON, so ``{}`` is kept
    as ``%7B%7D`` rather than being expanded into its keys.

    Args:
        params: Mapping of wire names to values. ``None`` encodes to ``""``.

    Returns:
        Query string without the leading ``?``.
    """
    if not params:
        return ""
    pairs: dict[str, Any] = {}
    for key, value in skip_empty(params).items():
        if isinstance(value, (list, tuple, Set)):
            pairs[key] = [_wire_value(v) for v in value]
        else:
            pairs[key] = _wire_value(value)
    return urlencode(pairs, doseq=True)
