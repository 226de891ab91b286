"""Enumerated token alphabets used by recurrence rules.

Each alphabet is a closed set of upper case rfc5545 tokens. Tokens are
matched case-sensitively with a single lookup, so "Daily" is not a valid
frequency.
"""

from collections.abc import Callable
import enum
from typing import TypeVar, Type

__all__ = [
    "Frequency",
    "Weekday",
    "RuleKey",
    "WEEKDAY_ORDER",
    "create_enum_validator",
]

T = TypeVar("T", bound=enum.Enum)


class Weekday(str, enum.Enum):
    """Corresponds to a day of the week."""

    SUNDAY = "SU"
    MONDAY = "MO"
    TUESDAY = "TU"
    WEDNESDAY = "WE"
    THURSDAY = "TH"
    FRIDAY = "FR"
    SATURDAY = "SA"

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


class Frequency(str, enum.Enum):
    """Type of recurrence rule.

    Frequencies SECONDLY, MINUTELY, HOURLY, MONTHLY, YEARLY are not supported.
    """

    DAILY = "DAILY"
    """Repeating events based on an interval of a day or more."""

    WEEKLY = "WEEKLY"
    """Repeating events based on an interval of a week or more."""

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


class RuleKey(str, enum.Enum):
    """Name of a supported recurrence rule part.

    Members are declared in the order rule parts are encoded.
    """

    FREQ = "FREQ"
    INTERVAL = "INTERVAL"
    BYMINUTE = "BYMINUTE"
    BYHOUR = "BYHOUR"
    BYDAY = "BYDAY"
    WKST = "WKST"

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


WEEKDAY_ORDER = {weekday: index for index, weekday in enumerate(Weekday)}
"""Sort key for encoding weekdays in a stable order starting with Sunday."""


def create_enum_validator(enum_type: Type[T]) -> Callable[[str], T | None]:
    """Return a function that looks up a token in the enum, or None."""

    def validate(value: str) -> T | None:
        try:
            return enum_type(value)
        except ValueError:
            return None

    return validate
