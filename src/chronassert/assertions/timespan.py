"""Assertions on the time distance between two datetimes."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any

from chronassert.assertions.base import AndConstraint
from chronassert.conditions import Condition, resolve
from chronassert.errors import InvalidStateError

if TYPE_CHECKING:
    from chronassert.assertions.datetimes import DateTimeAssertions

_FAILURE_TEMPLATE = (
    "Expected date and/or time {{1}} to be {label} {{2}} {direction} {{0}}{{reason}}, "
    "but it differs {{3}}."
)


class TimeSpanAssertions:
    """Checks that a subject lies a given distance before or after a target.

    Created by ``DateTimeAssertions`` (``be_within``, ``be_at_least``...). The
    predicate for the condition is resolved once here and reused by
    ``before`` and ``after``.
    """

    def __init__(
        self,
        parent: DateTimeAssertions,
        subject: datetime | None,
        condition: Condition | str,
        tolerance: timedelta,
    ):
        self._parent = parent
        self._subject = subject
        self._tolerance = tolerance
        self._predicate = resolve(condition)

    @property
    def subject(self) -> datetime | None:
        return self._subject

    @property
    def tolerance(self) -> timedelta:
        return self._tolerance

    def before(
        self, target: datetime, reason: str = "", *reason_args: Any
    ) -> AndConstraint[DateTimeAssertions]:
        """Assert the subject occurs the configured distance before *target*."""
        subject = self._require_subject()
        actual = target - subject
        return self._evaluate("before", target, subject, actual, reason, reason_args)

    def after(
        self, target: datetime, reason: str = "", *reason_args: Any
    ) -> AndConstraint[DateTimeAssertions]:
        """Assert the subject occurs the configured distance after *target*."""
        subject = self._require_subject()
        actual = subject - target
        return self._evaluate("after", target, subject, actual, reason, reason_args)

    def _require_subject(self) -> datetime:
        if self._subject is None:
            raise InvalidStateError("Cannot compare a missing date and/or time")
        return self._subject

    def _evaluate(
        self,
        direction: str,
        target: datetime,
        subject: datetime,
        actual: timedelta,
        reason: str,
        reason_args: tuple[Any, ...],
    ) -> AndConstraint[DateTimeAssertions]:
        if not self._predicate.is_matched_by(actual, self._tolerance):
            template = _FAILURE_TEMPLATE.format(
                label=self._predicate.label, direction=direction
            )
            self._parent.reporter.fail(
                template,
                target,
                subject,
                self._tolerance,
                actual,
                reason=reason,
                reason_args=reason_args,
            )
        return AndConstraint(self._parent)
