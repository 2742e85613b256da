# SPDX-License-Identifier: MIT
"""Rules configuration — pydantic models, embedded default, and local loading.

Configuration comes from exactly one of: an explicit local path, the
``CODELINT_RULES_CONFIG`` environment variable (also a local path), or the
embedded default. Nothing is fetched over the network and nothing is executed.
"""

from __future__ import annotations

import logging
import math
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)

from codelint.rules.base import Severity

log = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CODELINT_RULES_CONFIG"
DEFAULT_SOURCE = "<default>"
MAX_ERRORS_CEILING = 1000

ParamValue = bool | int | float | str

_VALID_SEVERITIES = frozenset(s.value for s in Severity)


def _coerce_severity(value: Any) -> Severity | None:
    """Map a raw severity to the enum, or None when it is not one of the three."""
    if isinstance(value, Severity):
        return value
    if isinstance(value, str) and value in _VALID_SEVERITIES:
        return Severity(value)
    return None


def _field_default(model: type[BaseModel], info: ValidationInfo) -> Any:
    """Return the declared default of the field being validated."""
    return model.model_fields[str(info.field_name)].get_default(call_default_factory=True)


class RuleConfig(BaseModel):
    """Per-rule settings. ``severity`` is None only until the owning RulesConfig resolves it."""

    enabled: bool = False
    severity: Severity | None = None
    parameters: dict[str, ParamValue] = Field(default_factory=dict)

    @field_validator("enabled", "parameters", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return _field_default(cls, info)
        return value

    @field_validator("parameters", mode="before")
    @classmethod
    def _drop_null_parameters(cls, value: Any) -> Any:
        # Null parameters read as absent.
        if isinstance(value, dict):
            return {k: v for k, v in value.items() if v is not None}
        return value

    @field_validator("severity", mode="before")
    @classmethod
    def _invalid_severity_to_none(cls, value: Any) -> Severity | None:
        return _coerce_severity(value)


class GlobalConfig(BaseModel):
    """Settings shared by every rule."""

    verbose: bool = False
    max_errors: int = 0
    default_severity: Severity = Severity.WARNING

    @field_validator("verbose", "max_errors", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return _field_default(cls, info)
        return value

    @field_validator("max_errors")
    @classmethod
    def _clamp_max_errors(cls, value: int) -> int:
        return min(max(value, 0), MAX_ERRORS_CEILING)

    @field_validator("default_severity", mode="before")
    @classmethod
    def _invalid_default_to_warning(cls, value: Any) -> Severity:
        return _coerce_severity(value) or Severity.WARNING


class RulesConfig(BaseModel):
    """Resolved rules configuration, shared read-only by all rules during a run."""

    model_config = ConfigDict(populate_by_name=True)

    version: str = ""
    global_: GlobalConfig = Field(default_factory=GlobalConfig, alias="global")
    rules: dict[str, RuleConfig] = Field(default_factory=dict)

    @field_validator("version", "global_", "rules", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return _field_default(cls, info)
        return value

    @field_validator("rules", mode="before")
    @classmethod
    def _null_rule_entries_to_empty(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {k: {} if v is None else v for k, v in value.items()}
        return value

    @model_validator(mode="after")
    def _sanitize(self) -> RulesConfig:
        """Give every rule without a valid severity the global default."""
        for rule in self.rules.values():
            if rule.severity is None:
                rule.severity = self.global_.default_severity
        return self

    def get_rule_config(self, name: str) -> tuple[RuleConfig, bool]:
        """Return the config for *name* and whether it was explicitly configured.

        Unknown names get a permissive synthesized entry: enabled, global
        default severity, no parameters.
        """
        rule = self.rules.get(name)
        if rule is None:
            return (
                RuleConfig(enabled=True, severity=self.global_.default_severity, parameters={}),
                False,
            )
        return rule, True

    def is_rule_enabled(self, name: str) -> bool:
        """Return the rule's enabled flag; unknown rules count as enabled."""
        rule = self.rules.get(name)
        if rule is None:
            return True
        return rule.enabled


def default_rules_config() -> RulesConfig:
    """Build a fresh copy of the embedded default configuration."""
    return RulesConfig(
        version="1.0",
        global_=GlobalConfig(verbose=False, max_errors=0, default_severity=Severity.WARNING),
        rules={
            "license-headers": RuleConfig(
                enabled=True,
                severity=Severity.WARNING,
                parameters={"check_lines": 10},
            ),
            "header-guards": RuleConfig(
                enabled=True,
                severity=Severity.ERROR,
                parameters={"allow_pragma_once": True},
            ),
            "naming-conventions": RuleConfig(
                enabled=True,
                severity=Severity.WARNING,
                parameters={"check_functions": True, "check_variables": False},
            ),
            "formatting": RuleConfig(
                enabled=True,
                severity=Severity.INFO,
                parameters={"max_line_length": 100, "check_tabs": True},
            ),
            "trailing-whitespace": RuleConfig(
                enabled=True,
                severity=Severity.WARNING,
                parameters={},
            ),
        },
    )


def int_param(parameters: Mapping[str, ParamValue], key: str, default: int) -> int:
    """Read a numeric parameter, truncating floats. Non-numbers yield *default*."""
    value = parameters.get(key)
    if isinstance(value, bool) or not isinstance(value, int | float):
        return default
    if isinstance(value, float) and not math.isfinite(value):
        return default
    return int(value)


def bool_param(parameters: Mapping[str, ParamValue], key: str, default: bool) -> bool:
    """Read a boolean parameter. Anything but a real bool yields *default*."""
    value = parameters.get(key)
    if isinstance(value, bool):
        return value
    return default


@dataclass(frozen=True)
class ConfigLoadResult:
    """Outcome of resolving the rules configuration."""

    config: RulesConfig
    source: str
    error: str | None = None

    @property
    def used_fallback(self) -> bool:
        return self.error is not None


def _safe_error_summary(e: ValidationError) -> str:
    """Summarize a ValidationError as field paths and error type codes only."""
    parts: list[str] = []
    for err in e.errors():
        loc = ".".join(str(loc) for loc in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['type']}")
    return "; ".join(parts)


def _fallback(source: str, error: str) -> ConfigLoadResult:
    log.warning("codelint: failed to load rules config from %s: %s; using defaults", source, error)
    return ConfigLoadResult(config=default_rules_config(), source=DEFAULT_SOURCE, error=error)


def load_rules_config(path: str | Path | None = None) -> ConfigLoadResult:
    """Resolve the rules configuration with explicit path > env var > default priority.

    Args:
        path: Local JSON file to load (highest priority).

    Returns:
        ConfigLoadResult. Any failure to read, parse, or validate the file
        falls back to the embedded default and is recorded in ``error``.
    """
    raw = path if path is not None else (os.environ.get(CONFIG_ENV_VAR) or None)
    if raw is None:
        return ConfigLoadResult(config=default_rules_config(), source=DEFAULT_SOURCE)

    source = str(raw)
    if "://" in source:
        return _fallback(source, "only local configuration files are supported")

    config_path = Path(raw)
    try:
        data = config_path.read_bytes()
    except OSError as exc:
        return _fallback(source, f"{type(exc).__name__}: {exc.strerror or exc}")

    try:
        config = RulesConfig.model_validate_json(data)
    except ValidationError as exc:
        return _fallback(source, _safe_error_summary(exc))

    log.debug("codelint: loaded rules config version %r from %s", config.version, source)
    return ConfigLoadResult(config=config, source=source)
