"""Base data structures for the assertion system."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class AndConstraint(Generic[T]):
    """Handle returned by a successful assertion to continue the chain.

    Attributes:
        and_: The assertion context further checks are made against.
    """

    and_: T


@dataclass
class AssertionResult:
    """Result of evaluating a single check.

    Attributes:
        name: Identifier for the check (e.g. "deploy-after-build").
        passed: Whether the comparison held.
        message: Failure message, or a short description when it passed.
        score: 1.0 when passed, 0.0 otherwise.
    """

    name: str
    passed: bool
    message: str
    score: float = 0.0
