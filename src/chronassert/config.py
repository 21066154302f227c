from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from chronassert.conditions import Condition


class Direction(str, Enum):
    BEFORE = "before"
    AFTER = "after"


def _expand(value: Any) -> Any:
    """Expand ``${VAR}`` references in a string, failing on unset variables."""
    if not isinstance(value, str):
        return value
    try:
        return expandvars(value, nounset=True)
    except Exception as exc:
        raise ValueError(f"Missing environment variable in '{value}': {exc}") from exc


class CheckSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    subject: datetime
    target: datetime
    condition: Condition
    tolerance: timedelta
    direction: Direction = Direction.BEFORE
    reason: str = ""
    reason_args: list[Any] = []

    @field_validator("subject", "target", "reason", mode="before")
    @classmethod
    def expand_env(cls, v: Any) -> Any:
        return _expand(v)

    @field_validator("tolerance")
    @classmethod
    def tolerance_must_not_be_negative(cls, v: timedelta) -> timedelta:
        if v < timedelta(0):
            raise ValueError("tolerance must not be negative")
        return v

    @model_validator(mode="after")
    def subject_and_target_must_agree_on_timezone(self) -> CheckSpec:
        if (self.subject.tzinfo is None) != (self.target.tzinfo is None):
            raise ValueError(
                f"Check '{self.name}' mixes timezone-aware and naive timestamps"
            )
        return self


class CheckConfig(BaseModel):
    checks: list[CheckSpec]

    @field_validator("checks")
    @classmethod
    def checks_must_be_valid(cls, v: list[CheckSpec]) -> list[CheckSpec]:
        if not v:
            raise ValueError("checks must not be empty")
        seen: set[str] = set()
        for check in v:
            if check.name in seen:
                raise ValueError(f"Duplicate check name '{check.name}'")
            seen.add(check.name)
        return v


def load_config(path: Path) -> CheckConfig:
    """Load and validate a checks file from YAML."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"{path} does not contain a mapping")

    return CheckConfig(**raw)
