# SPDX-License-Identifier: MIT
"""Rule class registry and category activation."""

from __future__ import annotations

from collections.abc import Iterable

from codelint.rules.base import Rule
from codelint.rules.config import RulesConfig
from codelint.rules.formatting import FormattingRule, LineLengthRule, TrailingWhitespaceRule
from codelint.rules.header_guard import HeaderGuardRule
from codelint.rules.license_header import LicenseHeaderRule
from codelint.rules.naming_convention import NamingConventionRule

RULE_REGISTRY: list[type[Rule]] = [
    LicenseHeaderRule,
    HeaderGuardRule,
    NamingConventionRule,
    FormattingRule,
    TrailingWhitespaceRule,
    LineLengthRule,
]

DEFAULT_CHECKS: tuple[str, ...] = (
    "formatting",
    "naming-conventions",
    "header-guards",
    "license-headers",
)

KNOWN_CHECKS: tuple[str, ...] = (
    "license-headers",
    "header-guards",
    "naming-conventions",
    "formatting",
    "trailing-whitespace",
)


def enabled_checks(checks: Iterable[str], config: RulesConfig) -> frozenset[str]:
    """Return the requested check names that the configuration leaves enabled."""
    return frozenset(check for check in checks if config.is_rule_enabled(check))


def is_category_active(category: str, enabled: Iterable[str]) -> bool:
    """True if *category* equals an enabled name or has one as a string prefix.

    Prefix matching lets a coarse name such as ``format`` activate ``formatting``.
    """
    return any(category == name or category.startswith(name) for name in enabled)
