"""Exceptions for the recurrule library.

Every failure raised by the library is a `RecurrenceRuleError`. Failures
that relate to the value of a single rule part derive from `FieldValueError`
and carry the `RuleKey` of that part, so a caller can present either the
message text or the kind of failure directly.

The whole-rule validator collects all field failures before raising. When
more than one field is invalid the failures are raised together as a
`MultipleInvalidError` rather than reporting only the first.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .types.enum import Frequency, RuleKey, Weekday

__all__ = [
    "RecurrenceRuleError",
    "EmptyInputError",
    "MalformedSegmentError",
    "UnknownKeyError",
    "FieldValueError",
    "MissingFrequencyError",
    "InvalidFrequencyError",
    "InvalidIntervalError",
    "InvalidByMinuteError",
    "InvalidByHourError",
    "InvalidByDayError",
    "InvalidWkstError",
    "MultipleInvalidError",
]


def _allowed(values: Sequence[Any]) -> str:
    return ", ".join(str(value) for value in values)


class RecurrenceRuleError(Exception):
    """Base exception for all recurrule errors.

    The 'message' attribute contains a human-readable message about the
    error that occurred. The 'detailed_error' attribute can provide additional
    information about the error, such as the underlying validation error.
    """

    def __init__(self, message: str, *, detailed_error: str | None = None) -> None:
        """Initialize the RecurrenceRuleError with a message."""
        super().__init__(message)
        self.message = message
        self.detailed_error = detailed_error


class EmptyInputError(RecurrenceRuleError):
    """Exception raised when the RRULE string to parse is empty."""

    def __init__(self) -> None:
        super().__init__("Empty RRULE string")


class MalformedSegmentError(RecurrenceRuleError):
    """Exception raised when a segment is not a clean KEY=VALUE pair."""

    def __init__(self, segment: str, rrule: str) -> None:
        super().__init__(
            f"Malformed RRULE segment '{segment}' in '{rrule}': "
            "expected KEY=VALUE"
        )
        self.segment = segment
        self.rrule = rrule


class UnknownKeyError(RecurrenceRuleError):
    """Exception raised for a rule part name that is not supported."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Unknown or unsupported RRULE key: {key or '{empty}'}")
        self.key = key


class FieldValueError(RecurrenceRuleError, ValueError):
    """Exception raised when the value of a single rule part is invalid.

    This is also a ValueError so that it may be raised from within pydantic
    validators, which only capture ValueError and AssertionError.
    """

    key: RuleKey

    def __init__(self, key: RuleKey, message: str) -> None:
        super().__init__(message)
        self.key = key


class MissingFrequencyError(FieldValueError):
    """Exception raised when a rule has no FREQ part.

    The 'rrule' attribute holds the string that was parsed, or None when
    the error was raised while validating a rule for serialization.
    """

    def __init__(self, rrule: str | None = None) -> None:
        message = f"{RuleKey.FREQ} is required"
        if rrule is not None:
            message = f"{message}, RRULE string attempted to parse: {rrule}"
        super().__init__(RuleKey.FREQ, message)
        self.rrule = rrule


class InvalidFrequencyError(FieldValueError):
    """Exception raised for a FREQ value outside the supported frequencies."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            RuleKey.FREQ,
            f"Invalid {RuleKey.FREQ} input: {value!r}, must be one of: "
            f"{_allowed(list(Frequency))}",
        )
        self.value = value


class InvalidIntervalError(FieldValueError):
    """Exception raised when INTERVAL is not a positive integer."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            RuleKey.INTERVAL,
            f"Invalid {RuleKey.INTERVAL} input: {value!r}, must be a positive integer",
        )
        self.value = value


class InvalidByMinuteError(FieldValueError):
    """Exception raised with every BYMINUTE value outside [0,59]."""

    def __init__(self, values: Sequence[Any]) -> None:
        super().__init__(
            RuleKey.BYMINUTE,
            f"Invalid {RuleKey.BYMINUTE} input(s): {list(values)!r}, "
            "allowed range [0,59]",
        )
        self.values = list(values)


class InvalidByHourError(FieldValueError):
    """Exception raised with every BYHOUR value outside [0,23]."""

    def __init__(self, values: Sequence[Any]) -> None:
        super().__init__(
            RuleKey.BYHOUR,
            f"Invalid {RuleKey.BYHOUR} input(s): {list(values)!r}, "
            "allowed range [0,23]",
        )
        self.values = list(values)


class InvalidByDayError(FieldValueError):
    """Exception raised for a BYDAY token that is not a day of the week."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            RuleKey.BYDAY,
            f"Invalid {RuleKey.BYDAY} input: {value!r}, must be one of: "
            f"{_allowed(list(Weekday))}",
        )
        self.value = value


class InvalidWkstError(FieldValueError):
    """Exception raised for a WKST token that is not a day of the week."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            RuleKey.WKST,
            f"Invalid {RuleKey.WKST} input: {value!r}, must be one of: "
            f"{_allowed(list(Weekday))}",
        )
        self.value = value


class MultipleInvalidError(RecurrenceRuleError):
    """Exception raised when more than one rule part is invalid.

    The 'errors' attribute holds the individual failures in rule part order.
    """

    def __init__(self, errors: Sequence[FieldValueError]) -> None:
        self.errors = list(errors)
        lines = [f"{index}. {error.message}" for index, error in enumerate(self.errors, 1)]
        super().__init__(
            "\n".join(["Multiple invalid RRULE parts:", *lines])
        )
