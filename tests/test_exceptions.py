"""Tests for recurrence rule error messages."""

import pytest

from recurrule.exceptions import (
    EmptyInputError,
    FieldValueError,
    InvalidByDayError,
    InvalidByHourError,
    InvalidByMinuteError,
    InvalidFrequencyError,
    InvalidIntervalError,
    InvalidWkstError,
    MalformedSegmentError,
    MissingFrequencyError,
    MultipleInvalidError,
    RecurrenceRuleError,
    UnknownKeyError,
)
from recurrule.types import RuleKey


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (EmptyInputError(), "Empty RRULE string"),
        (
            MalformedSegmentError("FREQ", "FREQ;INTERVAL=2"),
            "Malformed RRULE segment 'FREQ' in 'FREQ;INTERVAL=2': expected KEY=VALUE",
        ),
        (UnknownKeyError("COUNT"), "Unknown or unsupported RRULE key: COUNT"),
        (UnknownKeyError(""), "Unknown or unsupported RRULE key: {empty}"),
        (MissingFrequencyError(), "FREQ is required"),
        (
            MissingFrequencyError("INTERVAL=2"),
            "FREQ is required, RRULE string attempted to parse: INTERVAL=2",
        ),
        (
            InvalidFrequencyError("Daily"),
            "Invalid FREQ input: 'Daily', must be one of: DAILY, WEEKLY",
        ),
        (
            InvalidIntervalError("0"),
            "Invalid INTERVAL input: '0', must be a positive integer",
        ),
        (
            InvalidByMinuteError([60, -1]),
            "Invalid BYMINUTE input(s): [60, -1], allowed range [0,59]",
        ),
        (
            InvalidByHourError([24]),
            "Invalid BYHOUR input(s): [24], allowed range [0,23]",
        ),
        (
            InvalidByDayError("XX"),
            "Invalid BYDAY input: 'XX', must be one of: SU, MO, TU, WE, TH, FR, SA",
        ),
        (
            InvalidWkstError("XX"),
            "Invalid WKST input: 'XX', must be one of: SU, MO, TU, WE, TH, FR, SA",
        ),
    ],
)
def test_message(error: RecurrenceRuleError, message: str) -> None:
    """Test the human readable message of each error."""
    assert error.message == message
    assert str(error) == message


@pytest.mark.parametrize(
    ("error", "key"),
    [
        (MissingFrequencyError(), RuleKey.FREQ),
        (InvalidFrequencyError("X"), RuleKey.FREQ),
        (InvalidIntervalError(0), RuleKey.INTERVAL),
        (InvalidByMinuteError([60]), RuleKey.BYMINUTE),
        (InvalidByHourError([24]), RuleKey.BYHOUR),
        (InvalidByDayError("X"), RuleKey.BYDAY),
        (InvalidWkstError("X"), RuleKey.WKST),
    ],
)
def test_field_value_error_key(error: FieldValueError, key: RuleKey) -> None:
    """Test field errors carry the rule part they relate to."""
    assert error.key == key
    assert isinstance(error, ValueError)


def test_multiple_invalid() -> None:
    """Test the numbered message of multiple failures."""
    error = MultipleInvalidError(
        [MissingFrequencyError(), InvalidByHourError([30])]
    )
    assert error.message == (
        "Multiple invalid RRULE parts:\n"
        "1. FREQ is required\n"
        "2. Invalid BYHOUR input(s): [30], allowed range [0,23]"
    )
    assert len(error.errors) == 2
    assert not isinstance(error, ValueError)


def test_detailed_error() -> None:
    """Test the optional detailed error."""
    assert RecurrenceRuleError("message").detailed_error is None
    error = RecurrenceRuleError("message", detailed_error="details")
    assert error.detailed_error == "details"
