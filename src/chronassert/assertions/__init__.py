"""Fluent datetime comparison assertions."""

from chronassert.assertions.base import AndConstraint, AssertionResult
from chronassert.assertions.datetimes import DateTimeAssertions, should
from chronassert.assertions.timespan import TimeSpanAssertions

__all__ = [
    "AndConstraint",
    "AssertionResult",
    "DateTimeAssertions",
    "TimeSpanAssertions",
    "should",
]
