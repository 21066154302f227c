from __future__ import annotations

from pathlib import Path

from junitparser import Failure, JUnitXml, TestCase, TestSuite

from chronassert.assertions.base import AssertionResult


def write_junit(
    junit_path: Path,
    results: list[AssertionResult],
    suite_name: str = "chronassert",
) -> Path:
    """Write junit.xml with one test case per check result, return path."""
    xml = JUnitXml()
    suite = TestSuite(suite_name)

    for result in results:
        case = TestCase(result.name)
        case.classname = suite_name
        if not result.passed:
            case.result = [Failure(result.message)]
        suite.add_testcase(case)

    pass_rate = (
        sum(1 for r in results if r.passed) / len(results) if results else 0.0
    )
    suite.update_statistics()
    suite.add_property("pass_rate", f"{pass_rate:.4f}")

    # Use append (not +=) to preserve properties
    xml.append(suite)

    junit_path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(junit_path), pretty=True)
    return junit_path
