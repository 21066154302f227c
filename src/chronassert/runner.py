"""Evaluate the checks of a config file."""

from __future__ import annotations

import logging

from chronassert.assertions.base import AssertionResult
from chronassert.assertions.datetimes import DateTimeAssertions
from chronassert.config import CheckConfig, CheckSpec, Direction
from chronassert.execution import CollectingReporter


def run_check(check: CheckSpec, logger: logging.Logger) -> AssertionResult:
    logger.info(
        f"Evaluating {check.name}: {check.subject.isoformat()} {check.condition.value} "
        f"{check.tolerance} {check.direction.value} {check.target.isoformat()}"
    )

    reporter = CollectingReporter(logger=logger)
    comparison = DateTimeAssertions(check.subject, reporter=reporter).have_difference(
        check.condition, check.tolerance
    )
    if check.direction is Direction.BEFORE:
        comparison.before(check.target, check.reason, *check.reason_args)
    else:
        comparison.after(check.target, check.reason, *check.reason_args)

    passed = reporter.passed
    logger.info(f"{check.name} passed={passed}")

    if passed:
        message = f"{check.condition.value} {check.tolerance} {check.direction.value} target"
    else:
        message = reporter.failures[0]

    return AssertionResult(
        name=check.name,
        passed=passed,
        message=message,
        score=1.0 if passed else 0.0,
    )


def run_checks(config: CheckConfig, logger: logging.Logger) -> list[AssertionResult]:
    """Evaluate every check in order and return one result per check."""
    results = [run_check(check, logger) for check in config.checks]
    failed = sum(1 for r in results if not r.passed)
    logger.info(f"Evaluated {len(results)} checks, {failed} failed")
    return results
