"""Tests for checks file loading and validation."""

import textwrap
from datetime import datetime, timedelta
from pathlib import Path

import pytest
from pydantic import ValidationError

from chronassert.conditions import Condition
from chronassert.config import CheckSpec, Direction, load_config


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "checks.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_load_minimal_config(tmp_yaml):
    path = tmp_yaml("""\
        checks:
          - name: quick
            subject: "2024-05-01T12:00:00"
            target: "2024-05-01T12:00:05"
            condition: within
            tolerance: 10
    """)
    cfg = load_config(path)
    assert len(cfg.checks) == 1
    check = cfg.checks[0]
    assert check.name == "quick"
    assert check.subject == datetime(2024, 5, 1, 12, 0, 0)
    assert check.target == datetime(2024, 5, 1, 12, 0, 5)
    assert check.condition is Condition.WITHIN
    assert check.tolerance == timedelta(seconds=10)
    assert check.direction is Direction.BEFORE
    assert check.reason == ""
    assert check.reason_args == []


def test_iso_duration_tolerance_and_after_direction(tmp_yaml):
    path = tmp_yaml("""\
        checks:
          - name: window
            subject: 2024-05-01T03:00:00
            target: 2024-05-01T01:00:00
            condition: at_least
            tolerance: PT1H30M
            direction: after
            reason: "backups need {0}"
            reason_args: ["time"]
    """)
    check = load_config(path).checks[0]
    assert check.tolerance == timedelta(hours=1, minutes=30)
    assert check.direction is Direction.AFTER
    assert check.reason_args == ["time"]


def test_env_vars_are_expanded(tmp_yaml, monkeypatch):
    monkeypatch.setenv("BUILD_FINISHED", "2024-05-01T12:00:00")
    path = tmp_yaml("""\
        checks:
          - name: env
            subject: "${BUILD_FINISHED}"
            target: "2024-05-01T12:00:05"
            condition: exactly
            tolerance: 5
            reason: "build ${BUILD_ID:-local} must be quick"
    """)
    check = load_config(path).checks[0]
    assert check.subject == datetime(2024, 5, 1, 12, 0, 0)
    assert check.reason == "build local must be quick"


def test_missing_env_var_raises(tmp_yaml, monkeypatch):
    monkeypatch.delenv("CHRONASSERT_UNSET_VAR", raising=False)
    path = tmp_yaml("""\
        checks:
          - name: env
            subject: "${CHRONASSERT_UNSET_VAR}"
            target: "2024-05-01T12:00:05"
            condition: exactly
            tolerance: 5
    """)
    with pytest.raises(ValidationError, match="CHRONASSERT_UNSET_VAR"):
        load_config(path)


def test_unknown_condition_rejected(tmp_yaml):
    path = tmp_yaml("""\
        checks:
          - name: bad
            subject: "2024-05-01T12:00:00"
            target: "2024-05-01T12:00:05"
            condition: roughly
            tolerance: 5
    """)
    with pytest.raises(ValidationError):
        load_config(path)


def test_negative_tolerance_rejected():
    with pytest.raises(ValidationError, match="negative"):
        CheckSpec(
            name="neg",
            subject=datetime(2024, 5, 1),
            target=datetime(2024, 5, 1),
            condition="within",
            tolerance=-5,
        )


def test_extra_fields_rejected():
    with pytest.raises(ValidationError):
        CheckSpec(
            name="extra",
            subject=datetime(2024, 5, 1),
            target=datetime(2024, 5, 1),
            condition="within",
            tolerance=5,
            wiggle_room=3,
        )


def test_mixed_timezones_rejected():
    with pytest.raises(ValidationError, match="timezone"):
        CheckSpec(
            name="tz",
            subject="2024-05-01T12:00:00+00:00",
            target="2024-05-01T12:00:00",
            condition="within",
            tolerance=5,
        )


def test_empty_checks_rejected(tmp_yaml):
    path = tmp_yaml("""\
        checks: []
    """)
    with pytest.raises(ValidationError, match="must not be empty"):
        load_config(path)


def test_duplicate_names_rejected(tmp_yaml):
    path = tmp_yaml("""\
        checks:
          - name: same
            subject: "2024-05-01T12:00:00"
            target: "2024-05-01T12:00:05"
            condition: within
            tolerance: 5
          - name: same
            subject: "2024-05-01T12:00:00"
            target: "2024-05-01T12:00:05"
            condition: within
            tolerance: 5
    """)
    with pytest.raises(ValidationError, match="Duplicate"):
        load_config(path)


def test_non_mapping_file_rejected(tmp_yaml):
    path = tmp_yaml("""\
        - just
        - a list
    """)
    with pytest.raises(ValueError, match="mapping"):
        load_config(path)
