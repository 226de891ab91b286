"""Test fixtures."""

from collections.abc import Callable
import enum
from typing import Any

import pytest

from recurrule import RecurrenceRule


def _encode_value(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, (set, frozenset)):
        return sorted(_encode_value(item) for item in value)
    return value


def rule_as_dict(rule: RecurrenceRule) -> dict[str, Any]:
    """Dump a rule as a dict for comparison to golden, omitting empty values."""
    return {
        key: _encode_value(value)
        for key, value in rule.model_dump(by_alias=True).items()
        if value
    }


@pytest.fixture
def rule_encoder() -> Callable[[RecurrenceRule], dict[str, Any]]:
    """Fixture that dumps a rule as a dict."""
    return rule_as_dict
