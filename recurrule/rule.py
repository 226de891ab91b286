"""Implementation of the recurrence rule value model.

A `RecurrenceRule` holds the parts of an rfc5545 RRULE that describe how
often an event repeats. A rule is created either by parsing rule text or by
constructing it directly, then may be modified in place before being encoded
back to rule text.

This is an example of reading a rule, adding a time of day, and encoding
the result:

```python
from recurrule import RecurrenceRule

rule = RecurrenceRule.from_rrule("FREQ=WEEKLY;INTERVAL=2;BYDAY=MO,WE,FR")
rule.add_by_hour(9)
rule.add_by_minute(0, 30)
print(rule.as_rrule_str())
```

The above example will output:
```
FREQ=WEEKLY;INTERVAL=2;BYMINUTE=0,30;BYHOUR=9;BYDAY=MO,WE,FR
```

Values are validated at three points. Parsing validates each rule part
as it is read. The `add_*` methods validate each new value before it is
added. Assigning a field checks only the type of the value, so a rule may
hold an out of range value (e.g. an interval of 0) until it is encoded, at
which point all rule parts are validated together.
"""

from __future__ import annotations

from collections.abc import Iterable
import copy
import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .encoder import encode_rule_parts
from .exceptions import (
    FieldValueError,
    InvalidByDayError,
    InvalidByHourError,
    InvalidByMinuteError,
    InvalidIntervalError,
    MissingFrequencyError,
    MultipleInvalidError,
    RecurrenceRuleError,
    UnknownKeyError,
)
from .parser import parse_rule_parts
from .types.enum import Frequency, RuleKey, Weekday, create_enum_validator
from .validators import (
    DEFAULT_INTERVAL,
    invalid_values,
    is_integer,
    is_valid_hour,
    is_valid_interval,
    is_valid_minute,
    parse_frequency,
    parse_integer,
    parse_wkst,
)

__all__ = [
    "RecurrenceRule",
    "parse_rule",
    "encode_rule",
    "validate_rule",
]

_LOGGER = logging.getLogger(__name__)

_KEY_ORDER = {key: index for index, key in enumerate(RuleKey)}
_weekday_validator = create_enum_validator(Weekday)


def _int_set(value: Any, error: type[InvalidByMinuteError | InvalidByHourError]) -> Any:
    """Check a collection holds only integers, without checking their range."""
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise error([value])
    values = list(value)
    if invalid := [item for item in values if not is_integer(item)]:
        raise error(invalid)
    return set(values)


def _weekdays(values: Iterable[Any]) -> set[Weekday]:
    result: set[Weekday] = set()
    for value in values:
        if (weekday := _weekday_validator(value)) is None:
            raise InvalidByDayError(value)
        result.add(weekday)
    return result


def _rule_error(err: ValidationError) -> RecurrenceRuleError:
    """Translate a pydantic validation error into a recurrence rule error."""
    errors: list[FieldValueError] = []
    for error in err.errors():
        if error["type"] == "extra_forbidden":
            return UnknownKeyError(str(error["loc"][0]))
        if isinstance(field_error := error.get("ctx", {}).get("error"), FieldValueError):
            errors.append(field_error)
            continue
        return RecurrenceRuleError(
            f"Failed to validate recurrence rule: {error['msg']}",
            detailed_error=str(err),
        )
    if len(errors) == 1:
        return errors[0]
    errors.sort(key=lambda field_error: _KEY_ORDER[field_error.key])
    return MultipleInvalidError(errors)


class RecurrenceRule(BaseModel):
    """A recurrence rule specification.

    Only the DAILY and WEEKLY frequencies and the BYMINUTE, BYHOUR, BYDAY
    and WKST rule parts are supported. Parts of rfc5545 not supported:
      UNTIL, COUNT
      By second, month day, year day, week number, month, set position
      Weekday occurrence values in BYDAY (e.g. 1MO)
    """

    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
        extra="forbid",
    )

    freq: Optional[Frequency] = None
    """Frequency of the rule, required before the rule can be encoded."""

    interval: int = DEFAULT_INTERVAL
    """Interval at which the recurrence rule repeats."""

    by_minute: set[int] = Field(alias="byminute", default_factory=set)
    """Minutes of the hour between 0 and 59."""

    by_hour: set[int] = Field(alias="byhour", default_factory=set)
    """Hours of the day between 0 and 23.

    The hours and minutes are distributive, so the rule designates every
    combination of an hour and a minute as a time of day.
    """

    by_weekday: set[Weekday] = Field(alias="byday", default_factory=set)
    """Supported days of the week."""

    wkst: Optional[Weekday] = None
    """The day on which the workweek starts, or Monday when unset."""

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as err:
            _LOGGER.debug("Failed to create recurrence rule %s", err)
            raise _rule_error(err) from err

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except ValidationError as err:
            _LOGGER.debug("Failed to assign recurrence rule field %s: %s", name, err)
            raise _rule_error(err) from err

    @field_validator("freq", mode="before")
    @classmethod
    def coerce_freq(cls, value: Any) -> Frequency | None:
        if value is None:
            return None
        return parse_frequency(value)

    @field_validator("interval", mode="before")
    @classmethod
    def coerce_interval(cls, value: Any) -> int:
        if is_integer(value):
            return value
        if isinstance(value, str) and (interval := parse_integer(value)) is not None:
            return interval
        raise InvalidIntervalError(value)

    @field_validator("by_minute", mode="before")
    @classmethod
    def coerce_by_minute(cls, value: Any) -> Any:
        return _int_set(value, InvalidByMinuteError)

    @field_validator("by_hour", mode="before")
    @classmethod
    def coerce_by_hour(cls, value: Any) -> Any:
        return _int_set(value, InvalidByHourError)

    @field_validator("by_weekday", mode="before")
    @classmethod
    def coerce_by_weekday(cls, value: Any) -> set[Weekday]:
        if isinstance(value, str) or not isinstance(value, Iterable):
            raise InvalidByDayError(value)
        return _weekdays(value)

    @field_validator("wkst", mode="before")
    @classmethod
    def coerce_wkst(cls, value: Any) -> Weekday | None:
        if value is None:
            return None
        return parse_wkst(value)

    def add_by_minute(self, *values: int) -> None:
        """Add minutes of the hour, rejecting all values if any are invalid."""
        if invalid := invalid_values(values, is_valid_minute):
            raise InvalidByMinuteError(invalid)
        self.by_minute.update(values)

    def add_by_hour(self, *values: int) -> None:
        """Add hours of the day, rejecting all values if any are invalid."""
        if invalid := invalid_values(values, is_valid_hour):
            raise InvalidByHourError(invalid)
        self.by_hour.update(values)

    def add_by_weekday(self, *values: Weekday | str) -> None:
        """Add days of the week, rejecting all values if any are invalid."""
        self.by_weekday.update(_weekdays(values))

    def discard_by_minute(self, *values: int) -> None:
        """Remove minutes of the hour if present."""
        self.by_minute.difference_update(values)

    def discard_by_hour(self, *values: int) -> None:
        """Remove hours of the day if present."""
        self.by_hour.difference_update(values)

    def discard_by_weekday(self, *values: Weekday | str) -> None:
        """Remove days of the week if present."""
        self.by_weekday.difference_update(_weekdays(values))

    def copy_and_validate(self, update: dict[str, Any] | None = None) -> RecurrenceRule:
        """Create a new rule with updated values and validate it.

        The update is keyed by field name. The returned rule shares no state
        with this rule.
        """
        data = self.model_dump()
        data.update(update or {})
        new_rule = self.__class__(**copy.deepcopy(data))
        validate_rule(new_rule)
        return new_rule

    def as_rrule_str(self) -> str:
        """Return the rule as an RRULE string."""
        return encode_rule(self)

    @classmethod
    def from_rrule(cls, rrule_str: str) -> RecurrenceRule:
        """Create a RecurrenceRule object from an RRULE string."""
        return cls(**parse_rule_parts(rrule_str))


def validate_rule(rule: RecurrenceRule) -> None:
    """Validate all parts of the rule, raising every failure found.

    A single invalid rule part is raised directly, while multiple failures
    are raised together in rule part order as a MultipleInvalidError.
    """
    errors: list[FieldValueError] = []
    if rule.freq is None:
        errors.append(MissingFrequencyError())
    if not is_valid_interval(rule.interval):
        errors.append(InvalidIntervalError(rule.interval))
    if invalid := invalid_values(rule.by_minute, is_valid_minute):
        errors.append(InvalidByMinuteError(invalid))
    if invalid := invalid_values(rule.by_hour, is_valid_hour):
        errors.append(InvalidByHourError(invalid))
    if not errors:
        return
    _LOGGER.debug("Recurrence rule failed validation: %s", errors)
    if len(errors) == 1:
        raise errors[0]
    raise MultipleInvalidError(errors)


def parse_rule(rrule_str: str) -> RecurrenceRule:
    """Parse an RRULE string into a RecurrenceRule."""
    return RecurrenceRule.from_rrule(rrule_str)


def encode_rule(rule: RecurrenceRule) -> str:
    """Validate the rule and encode it as an RRULE string."""
    validate_rule(rule)
    return encode_rule_parts(rule.model_dump(by_alias=True, exclude_none=True))
