"""Library for parsing recurrence rule text into rule part values.

An input rule like 'FREQ=WEEKLY;BYDAY=MO,WE' is converted into a dictionary
keyed by the lower case rule part name, which is the input to the
`RecurrenceRule` model:

  {'freq': Frequency.WEEKLY, 'byday': {Weekday.MONDAY, Weekday.WEDNESDAY}}

Every value is validated as it is parsed, and parsing stops at the first
rule part that fails.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any

from .exceptions import MissingFrequencyError, UnknownKeyError
from .parsing.segment import parse_segments
from .types.enum import RuleKey, create_enum_validator
from .validators import (
    parse_by_day,
    parse_by_hour,
    parse_by_minute,
    parse_frequency,
    parse_interval,
    parse_wkst,
)

__all__ = [
    "RuleInputDict",
    "parse_rule_parts",
]

_LOGGER = logging.getLogger(__name__)

RuleInputDict = dict[str, Any]

_RULE_KEY_VALIDATOR = create_enum_validator(RuleKey)

_RULE_PART_PARSERS: dict[RuleKey, Callable[[str], Any]] = {
    RuleKey.FREQ: parse_frequency,
    RuleKey.INTERVAL: parse_interval,
    RuleKey.BYMINUTE: parse_by_minute,
    RuleKey.BYHOUR: parse_by_hour,
    RuleKey.BYDAY: parse_by_day,
    RuleKey.WKST: parse_wkst,
}


def _fold_rule_parts(rrule: str) -> dict[RuleKey, str]:
    """Map each rule part name to its raw value, the last value wins."""
    values: dict[RuleKey, str] = {}
    for segment in parse_segments(rrule):
        if (key := _RULE_KEY_VALIDATOR(segment.key)) is None:
            raise UnknownKeyError(segment.key)
        if key in values:
            _LOGGER.debug(
                "Rule part %s repeated in '%s', using value '%s'",
                key,
                rrule,
                segment.value,
            )
        values[key] = segment.value
    return values


def parse_rule_parts(rrule: str) -> RuleInputDict:
    """Parse the recurrence rule text as a dictionary of validated values."""
    result: RuleInputDict = {}
    for key, value in _fold_rule_parts(rrule).items():
        _LOGGER.debug("Parsing rule part %s with value '%s'", key, value)
        result[key.value.lower()] = _RULE_PART_PARSERS[key](value)
    if RuleKey.FREQ.value.lower() not in result:
        raise MissingFrequencyError(rrule)
    return result
