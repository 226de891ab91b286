"""Library for encoding rule part values as recurrence rule text.

Rule parts are always encoded in the same order: FREQ, INTERVAL, BYMINUTE,
BYHOUR, BYDAY, WKST. Parts that are unset, empty, or hold the default
interval are omitted entirely. Repeated values are sorted so that the
same rule always encodes to the same text.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
import logging
from typing import Any

from .parsing.segment import ParsedSegment, encode_segments
from .types.enum import WEEKDAY_ORDER, RuleKey, Weekday
from .validators import DEFAULT_INTERVAL, VALUE_SEPARATOR

__all__ = [
    "encode_rule_parts",
]

_LOGGER = logging.getLogger(__name__)


def _sort_key(value: Any) -> Any:
    if isinstance(value, Weekday):
        return WEEKDAY_ORDER[value]
    return value


def _encode_value(value: Any) -> str | None:
    """Encode a single rule part value, or None if it should be omitted."""
    if isinstance(value, Collection) and not isinstance(value, str):
        if not value:
            return None
        return VALUE_SEPARATOR.join(str(item) for item in sorted(value, key=_sort_key))
    return str(value)


def encode_rule_parts(data: Mapping[str, Any]) -> str:
    """Encode a dictionary keyed by lower case rule part name as rule text.

    The values are expected to already be validated.
    """
    segments: list[ParsedSegment] = []
    for key in RuleKey:
        if (value := data.get(key.value.lower())) is None:
            continue
        if key is RuleKey.INTERVAL and value == DEFAULT_INTERVAL:
            continue
        if (encoded := _encode_value(value)) is None:
            continue
        segments.append(ParsedSegment(key=key.value, value=encoded))
    _LOGGER.debug("Encoding segments %s", segments)
    return encode_segments(segments)
