# SPDX-License-Identifier: MIT
"""C/C++ lint rule engine — fixed rules, local configuration, ordered diagnostics."""

from collections.abc import Iterable

from codelint.rules.base import Diagnostic, Rule, Severity
from codelint.rules.config import (
    ConfigLoadResult,
    GlobalConfig,
    RuleConfig,
    RulesConfig,
    default_rules_config,
    load_rules_config,
)
from codelint.rules.context import SourceFile
from codelint.rules.engine import RuleEngine, has_errors, sort_diagnostics
from codelint.rules.registry import DEFAULT_CHECKS, KNOWN_CHECKS, RULE_REGISTRY

__all__ = [
    "DEFAULT_CHECKS",
    "KNOWN_CHECKS",
    "RULE_REGISTRY",
    "ConfigLoadResult",
    "Diagnostic",
    "GlobalConfig",
    "Rule",
    "RuleConfig",
    "RuleEngine",
    "RulesConfig",
    "Severity",
    "SourceFile",
    "default_rules_config",
    "has_errors",
    "load_rules_config",
    "sort_diagnostics",
]


def run_rules(
    files: Iterable[SourceFile],
    config: RulesConfig,
    checks: Iterable[str] | None = None,
    *,
    max_errors: int | None = None,
) -> list[Diagnostic]:
    """Convenience: build an engine and run it over *files*."""
    engine = RuleEngine(config, checks, max_errors=max_errors)
    return engine.run(files)
