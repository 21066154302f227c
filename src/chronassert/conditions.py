"""Closed set of comparison conditions and their predicates."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping

from chronassert.errors import InvalidConditionError


class Condition(str, Enum):
    MORE_THAN = "more_than"
    AT_LEAST = "at_least"
    EXACTLY = "exactly"
    WITHIN = "within"
    LESS_THAN = "less_than"


@dataclass(frozen=True)
class Predicate:
    """Comparator for a condition plus the label shown in failure messages.

    Attributes:
        comparator: Called as ``comparator(actual, expected)``.
        label: Phrase used verbatim in messages (e.g. "at least").
    """

    comparator: Callable[[timedelta, timedelta], bool]
    label: str

    def is_matched_by(self, actual: timedelta, expected: timedelta) -> bool:
        return self.comparator(actual, expected)


def _build_predicates() -> Mapping[Condition, Predicate]:
    table = {
        Condition.MORE_THAN: Predicate(lambda actual, expected: actual > expected, "more than"),
        Condition.AT_LEAST: Predicate(lambda actual, expected: actual >= expected, "at least"),
        Condition.EXACTLY: Predicate(lambda actual, expected: actual == expected, "exactly"),
        # Upper bound only, not a symmetric window around zero.
        Condition.WITHIN: Predicate(lambda actual, expected: actual <= expected, "within"),
        Condition.LESS_THAN: Predicate(lambda actual, expected: actual < expected, "less than"),
    }
    missing = [c.value for c in Condition if c not in table]
    if missing:
        raise RuntimeError(f"No predicate registered for conditions: {', '.join(missing)}")
    return MappingProxyType(table)


PREDICATES: Mapping[Condition, Predicate] = _build_predicates()


def resolve(condition: Condition | str) -> Predicate:
    """Return the predicate for *condition*.

    Accepts a ``Condition`` member or its string value. Anything else raises
    ``InvalidConditionError``.
    """
    if not isinstance(condition, Condition):
        try:
            condition = Condition(condition)
        except ValueError:
            raise InvalidConditionError(condition) from None
    return PREDICATES[condition]
