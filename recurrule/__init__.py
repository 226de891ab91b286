"""
.. include:: ../README.md
"""

from .rule import RecurrenceRule, encode_rule, parse_rule, validate_rule
from .types import Frequency, RuleKey, Weekday

__all__ = [
    "RecurrenceRule",
    "Frequency",
    "RuleKey",
    "Weekday",
    "parse_rule",
    "encode_rule",
    "validate_rule",
    "exceptions",
    "types",
    "validators",
]
