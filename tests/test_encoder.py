"""Tests for encoding recurrence rules as text."""

import pytest

from recurrule import Frequency, RecurrenceRule, Weekday, encode_rule, parse_rule
from recurrule.encoder import encode_rule_parts
from recurrule.exceptions import (
    InvalidByHourError,
    InvalidByMinuteError,
    InvalidIntervalError,
    MissingFrequencyError,
    MultipleInvalidError,
)


def test_encode_rule_parts() -> None:
    """Test encoding values keyed by rule part name in a fixed order."""
    assert (
        encode_rule_parts(
            {
                "wkst": Weekday.MONDAY,
                "byday": {Weekday.SATURDAY, Weekday.SUNDAY},
                "byhour": {12, 3},
                "freq": Frequency.WEEKLY,
            }
        )
        == "FREQ=WEEKLY;BYHOUR=3,12;BYDAY=SU,SA;WKST=MO"
    )


def test_encode_rule_parts_omits_empty() -> None:
    """Test empty and default values contribute no segment."""
    assert (
        encode_rule_parts(
            {
                "freq": Frequency.DAILY,
                "interval": 1,
                "byminute": set(),
                "byhour": set(),
                "byday": set(),
            }
        )
        == "FREQ=DAILY"
    )


def test_encode_frequency_only() -> None:
    """Test encoding a rule with only a frequency."""
    assert encode_rule(RecurrenceRule(freq=Frequency.WEEKLY)) == "FREQ=WEEKLY"


@pytest.mark.parametrize(
    ("interval", "expected"),
    [
        (1, "FREQ=DAILY"),
        (2, "FREQ=DAILY;INTERVAL=2"),
        (30, "FREQ=DAILY;INTERVAL=30"),
    ],
)
def test_encode_interval(interval: int, expected: str) -> None:
    """Test the default interval is never encoded."""
    rule = RecurrenceRule(freq=Frequency.DAILY, interval=interval)
    assert rule.as_rrule_str() == expected


def test_encode_scenario() -> None:
    """Test encoding a parsed rule keeps every rule part."""
    rrule = "FREQ=WEEKLY;INTERVAL=2;BYDAY=MO,WE,FR;BYMINUTE=30,45;WKST=TH"
    rule = parse_rule(rrule)
    encoded = encode_rule(rule)
    assert encoded == "FREQ=WEEKLY;INTERVAL=2;BYMINUTE=30,45;BYDAY=MO,WE,FR;WKST=TH"
    assert parse_rule(encoded) == rule


def test_encode_is_deterministic() -> None:
    """Test the same set of values always encodes to the same text."""
    first = RecurrenceRule(freq="DAILY", by_minute=[45, 0, 15, 30])
    second = RecurrenceRule(freq="DAILY", by_minute=[30, 15, 45, 0])
    assert first.as_rrule_str() == second.as_rrule_str()
    assert first.as_rrule_str() == "FREQ=DAILY;BYMINUTE=0,15,30,45"


def test_missing_frequency() -> None:
    """Test an empty rule can't be encoded."""
    with pytest.raises(MissingFrequencyError) as exc_info:
        encode_rule(RecurrenceRule())
    assert exc_info.value.rrule is None


def test_single_invalid_part() -> None:
    """Test a single invalid rule part is raised directly."""
    rule = RecurrenceRule(freq=Frequency.DAILY)
    rule.by_minute.add(60)
    with pytest.raises(InvalidByMinuteError) as exc_info:
        encode_rule(rule)
    assert exc_info.value.values == [60]


def test_multiple_invalid_parts() -> None:
    """Test all invalid rule parts are reported in rule part order."""
    rule = RecurrenceRule(freq=Frequency.DAILY)
    rule.by_hour = {30}
    rule.interval = 0
    with pytest.raises(MultipleInvalidError) as exc_info:
        encode_rule(rule)
    errors = exc_info.value.errors
    assert [type(error) for error in errors] == [InvalidIntervalError, InvalidByHourError]
    assert errors[0].value == 0
    assert errors[1].values == [30]
    assert exc_info.value.message == "\n".join(
        [
            "Multiple invalid RRULE parts:",
            "1. Invalid INTERVAL input: 0, must be a positive integer",
            "2. Invalid BYHOUR input(s): [30], allowed range [0,23]",
        ]
    )


def test_every_part_invalid() -> None:
    """Test every checked rule part failing at once."""
    rule = RecurrenceRule()
    rule.interval = -1
    rule.by_minute = {-1, 60, 10}
    rule.by_hour = {-1, 24, 10}
    with pytest.raises(MultipleInvalidError) as exc_info:
        encode_rule(rule)
    errors = exc_info.value.errors
    assert [type(error) for error in errors] == [
        MissingFrequencyError,
        InvalidIntervalError,
        InvalidByMinuteError,
        InvalidByHourError,
    ]
    assert errors[2].values == [-1, 60]
    assert errors[3].values == [-1, 24]
