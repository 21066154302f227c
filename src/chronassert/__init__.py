"""Fluent assertions on the time distance between two datetimes."""

from chronassert.assertions import (
    AndConstraint,
    AssertionResult,
    DateTimeAssertions,
    TimeSpanAssertions,
    should,
)
from chronassert.conditions import Condition, Predicate, resolve
from chronassert.errors import (
    AssertionFailedError,
    ChronassertError,
    InvalidConditionError,
    InvalidStateError,
)
from chronassert.execution import CollectingReporter, RaisingReporter, Reporter

__all__ = [
    "AndConstraint",
    "AssertionFailedError",
    "AssertionResult",
    "ChronassertError",
    "CollectingReporter",
    "Condition",
    "DateTimeAssertions",
    "InvalidConditionError",
    "InvalidStateError",
    "Predicate",
    "RaisingReporter",
    "Reporter",
    "TimeSpanAssertions",
    "resolve",
    "should",
]
