"""Failure reporting for assertions.

Assertions never raise or record failures themselves. They hand a message
template to a ``Reporter``, which decides what a failure means: raising an
exception inside a test, or collecting the message for a batch report.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Sequence

from chronassert.errors import AssertionFailedError
from chronassert.formatting import format_value


def format_reason(reason: str, *reason_args: Any) -> str:
    """Turn a caller-supplied reason into a message clause.

    An empty reason yields an empty clause. Otherwise the reason is filled in
    with ``reason_args`` and prefixed with "because" unless it already starts
    with that word.
    """
    if not reason or not reason.strip():
        return ""

    text = reason.format(*reason_args) if reason_args else reason
    text = text.strip()
    if not text.lower().startswith("because"):
        text = f"because {text}"
    return f" {text}"


def format_message(
    template: str,
    *args: Any,
    reason: str = "",
    reason_args: Sequence[Any] = (),
) -> str:
    """Fill ``{0}``, ``{1}``... with rendered values and ``{reason}`` with the clause."""
    rendered = [format_value(arg) for arg in args]
    return template.format(*rendered, reason=format_reason(reason, *reason_args))


class Reporter(ABC):
    @abstractmethod
    def fail(
        self,
        template: str,
        *args: Any,
        reason: str = "",
        reason_args: Sequence[Any] = (),
    ) -> None:
        """Signal that an assertion did not hold."""
        ...


class RaisingReporter(Reporter):
    """Raise ``AssertionFailedError`` on the first failure."""

    def fail(
        self,
        template: str,
        *args: Any,
        reason: str = "",
        reason_args: Sequence[Any] = (),
    ) -> None:
        raise AssertionFailedError(
            format_message(template, *args, reason=reason, reason_args=reason_args)
        )


class CollectingReporter(Reporter):
    """Record failure messages and keep going.

    Attributes:
        failures: Formatted messages, in the order they were reported.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self.failures: list[str] = []
        self._logger = logger

    def fail(
        self,
        template: str,
        *args: Any,
        reason: str = "",
        reason_args: Sequence[Any] = (),
    ) -> None:
        message = format_message(template, *args, reason=reason, reason_args=reason_args)
        self.failures.append(message)
        if self._logger is not None:
            self._logger.info(f"Assertion failed: {message}")

    @property
    def passed(self) -> bool:
        return not self.failures

    def clear(self) -> None:
        self.failures.clear()
