"""Library for handling the KEY=VALUE segments of a recurrence rule.

A recurrence rule is a list of rule parts separated by semicolons, where
each rule part is a name and value separated by an equals sign. This is
a very simple tokenizer that converts the rule text into an object
structure, without attempting to interpret the meaning of the names or
values themselves.

For example, given a rule of:

  FREQ=WEEKLY;BYDAY=MO,WE

This library would create a list of ParsedSegment objects:

  [
    ParsedSegment(key='FREQ', value='WEEKLY'),
    ParsedSegment(key='BYDAY', value='MO,WE'),
  ]

Repeated values such as the days above are left comma separated for the
individual rule part parsers.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import logging

from recurrule.exceptions import EmptyInputError, MalformedSegmentError

__all__ = [
    "ParsedSegment",
    "parse_segments",
    "encode_segments",
]

_LOGGER = logging.getLogger(__name__)

SEGMENT_SEPARATOR = ";"
KEY_VALUE_SEPARATOR = "="


@dataclass
class ParsedSegment:
    """A single rule part of a recurrence rule."""

    key: str
    value: str

    def rrule(self) -> str:
        """Encode a ParsedSegment into the serialized format."""
        return f"{self.key}{KEY_VALUE_SEPARATOR}{self.value}"


def _parse_segment(segment: str, rrule: str) -> ParsedSegment:
    parts = segment.split(KEY_VALUE_SEPARATOR)
    if len(parts) != 2 or not parts[1]:
        raise MalformedSegmentError(segment, rrule)
    key, value = parts
    return ParsedSegment(key=key, value=value)


def parse_segments(rrule: str) -> list[ParsedSegment]:
    """Parse the rule text into a list of segments.

    The segment key may be empty, which is left to the caller to reject
    as an unknown rule part.
    """
    if not rrule:
        raise EmptyInputError()
    segments = [
        _parse_segment(segment, rrule)
        for segment in rrule.split(SEGMENT_SEPARATOR)
    ]
    _LOGGER.debug("Parsed segments %s", segments)
    return segments


def encode_segments(segments: Iterable[ParsedSegment]) -> str:
    """Encode a list of segments as rule text."""
    return SEGMENT_SEPARATOR.join(segment.rrule() for segment in segments)
