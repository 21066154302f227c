"""Fluent assertions on a ``datetime`` subject."""

from __future__ import annotations

from datetime import datetime, timedelta

from chronassert.assertions.timespan import TimeSpanAssertions
from chronassert.conditions import Condition
from chronassert.execution import RaisingReporter, Reporter


class DateTimeAssertions:
    """Entry point for distance checks on a datetime.

    >>> should(build_finished).be_within(timedelta(seconds=10)).before(deployed)
    """

    def __init__(self, subject: datetime | None, reporter: Reporter | None = None):
        self.subject = subject
        self.reporter = reporter if reporter is not None else RaisingReporter()

    def be_more_than(self, span: timedelta) -> TimeSpanAssertions:
        return self.have_difference(Condition.MORE_THAN, span)

    def be_at_least(self, span: timedelta) -> TimeSpanAssertions:
        return self.have_difference(Condition.AT_LEAST, span)

    def be_exactly(self, span: timedelta) -> TimeSpanAssertions:
        return self.have_difference(Condition.EXACTLY, span)

    def be_within(self, span: timedelta) -> TimeSpanAssertions:
        return self.have_difference(Condition.WITHIN, span)

    def be_less_than(self, span: timedelta) -> TimeSpanAssertions:
        return self.have_difference(Condition.LESS_THAN, span)

    def have_difference(self, condition: Condition | str, span: timedelta) -> TimeSpanAssertions:
        return TimeSpanAssertions(self, self.subject, condition, span)


def should(subject: datetime | None, reporter: Reporter | None = None) -> DateTimeAssertions:
    return DateTimeAssertions(subject, reporter=reporter)
