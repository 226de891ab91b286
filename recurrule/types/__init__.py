"""Library of rfc5545 token types used by recurrence rules."""

from .enum import Frequency, RuleKey, Weekday

__all__ = [
    "Frequency",
    "RuleKey",
    "Weekday",
]
