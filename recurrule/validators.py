"""Validators for the individual parts of a recurrence rule.

The predicates in this module are pure range checks used both when parsing
a rule from text and when validating a rule before it is encoded. The
parse functions convert the raw text value of a single rule part into
its python value, raising the error specific to that part.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
import logging
import re
from typing import Any

from .exceptions import (
    InvalidByDayError,
    InvalidByHourError,
    InvalidByMinuteError,
    InvalidFrequencyError,
    InvalidIntervalError,
    InvalidWkstError,
)
from .types.enum import Frequency, Weekday, create_enum_validator

__all__ = [
    "DEFAULT_INTERVAL",
    "is_integer",
    "is_valid_interval",
    "is_valid_minute",
    "is_valid_hour",
    "invalid_values",
    "parse_integer",
    "parse_frequency",
    "parse_interval",
    "parse_by_minute",
    "parse_by_hour",
    "parse_by_day",
    "parse_wkst",
]

_LOGGER = logging.getLogger(__name__)

DEFAULT_INTERVAL = 1
"""The rfc5545 default interval, which is never encoded."""

MINUTES = range(0, 60)
HOURS = range(0, 24)
VALUE_SEPARATOR = ","

_INTEGER_RE = re.compile(r"[-+]?[0-9]+")

_frequency_validator = create_enum_validator(Frequency)
_weekday_validator = create_enum_validator(Weekday)


def is_integer(value: Any) -> bool:
    """Return true if the value is an int, excluding bool."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_interval(value: int) -> bool:
    """Return true if the interval is a positive integer."""
    return is_integer(value) and value > 0


def is_valid_minute(value: int) -> bool:
    """Return true if the value is a minute of the hour in [0,59]."""
    return is_integer(value) and value in MINUTES


def is_valid_hour(value: int) -> bool:
    """Return true if the value is an hour of the day in [0,23]."""
    return is_integer(value) and value in HOURS


def invalid_values(
    values: Iterable[Any], predicate: Callable[[Any], bool]
) -> list[Any]:
    """Return the values that do not satisfy the predicate, sorted when possible."""
    invalid = [value for value in values if not predicate(value)]
    try:
        return sorted(invalid)
    except TypeError:
        return invalid


def parse_integer(value: str) -> int | None:
    """Parse a base-10 integer literal, or None if not an integer."""
    if not _INTEGER_RE.fullmatch(value):
        return None
    try:
        return int(value)
    except ValueError:
        # Literal exceeds the interpreter's integer string conversion limit
        _LOGGER.debug("Unable to convert integer literal of length %d", len(value))
        return None


def parse_frequency(value: str) -> Frequency:
    """Parse a FREQ value."""
    if (frequency := _frequency_validator(value)) is None:
        raise InvalidFrequencyError(value)
    return frequency


def parse_interval(value: str) -> int:
    """Parse an INTERVAL value as a positive integer."""
    interval = parse_integer(value)
    if interval is None or not is_valid_interval(interval):
        raise InvalidIntervalError(value)
    return interval


def _parse_int_set(
    value: str,
    predicate: Callable[[Any], bool],
    error: Callable[[list[Any]], Exception],
) -> set[int]:
    """Parse a comma separated list of integers, reporting all invalid tokens."""
    result: set[int] = set()
    invalid: list[Any] = []
    for token in value.split(VALUE_SEPARATOR):
        number = parse_integer(token)
        if number is None:
            invalid.append(token)
        elif not predicate(number):
            invalid.append(number)
        else:
            result.add(number)
    if invalid:
        _LOGGER.debug("Invalid values %s in '%s'", invalid, value)
        raise error(invalid)
    return result


def parse_by_minute(value: str) -> set[int]:
    """Parse a BYMINUTE value list."""
    return _parse_int_set(value, is_valid_minute, InvalidByMinuteError)


def parse_by_hour(value: str) -> set[int]:
    """Parse a BYHOUR value list."""
    return _parse_int_set(value, is_valid_hour, InvalidByHourError)


def parse_by_day(value: str) -> set[Weekday]:
    """Parse a BYDAY value list, failing on the first invalid day."""
    result: set[Weekday] = set()
    for token in value.split(VALUE_SEPARATOR):
        if (weekday := _weekday_validator(token)) is None:
            raise InvalidByDayError(token)
        result.add(weekday)
    return result


def parse_wkst(value: str) -> Weekday:
    """Parse a WKST value."""
    if (weekday := _weekday_validator(value)) is None:
        raise InvalidWkstError(value)
    return weekday
