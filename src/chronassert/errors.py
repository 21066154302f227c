"""Exception types raised by chronassert."""

from __future__ import annotations


class ChronassertError(Exception):
    """Base class for all chronassert errors."""


class InvalidConditionError(ChronassertError, ValueError):
    """Raised when a condition tag is outside the supported set."""

    def __init__(self, condition: object):
        self.condition = condition
        super().__init__(f"Unknown comparison condition: {condition!r}")


class InvalidStateError(ChronassertError, RuntimeError):
    """Raised when an assertion is used without the state it requires."""


class AssertionFailedError(ChronassertError, AssertionError):
    """Raised by the default reporter when an assertion does not hold."""
