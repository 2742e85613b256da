"""codelint — C/C++ style and hygiene checker with a deterministic rule engine."""

from codelint.output import format_diagnostic, print_results
from codelint.rules import (
    DEFAULT_CHECKS,
    KNOWN_CHECKS,
    ConfigLoadResult,
    Diagnostic,
    RuleConfig,
    RuleEngine,
    RulesConfig,
    Severity,
    SourceFile,
    default_rules_config,
    has_errors,
    load_rules_config,
    run_rules,
)
from codelint.walker import WalkerConfig, WalkError, walk

__all__ = [
    "DEFAULT_CHECKS",
    "KNOWN_CHECKS",
    "ConfigLoadResult",
    "Diagnostic",
    "RuleConfig",
    "RuleEngine",
    "RulesConfig",
    "Severity",
    "SourceFile",
    "WalkError",
    "WalkerConfig",
    "default_rules_config",
    "format_diagnostic",
    "has_errors",
    "load_rules_config",
    "print_results",
    "run_rules",
    "walk",
]
