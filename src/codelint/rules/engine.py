# SPDX-License-Identifier: MIT
"""Rule engine — instantiates rule classes and runs active rules over source files."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from codelint.rules.base import Diagnostic, Rule, Severity
from codelint.rules.registry import (
    DEFAULT_CHECKS,
    RULE_REGISTRY,
    enabled_checks,
    is_category_active,
)

if TYPE_CHECKING:
    from codelint.rules.config import RulesConfig
    from codelint.rules.context import SourceFile

log = logging.getLogger(__name__)

MAX_ERRORS_RULE = "max-errors"


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Order by file, line, then column; equal keys keep insertion order."""
    return sorted(diagnostics, key=lambda d: (d.file, d.line, d.column))


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    """Return True if any diagnostic has error severity."""
    return any(d.severity == Severity.ERROR for d in diagnostics)


def _max_errors_sentinel(limit: int) -> Diagnostic:
    return Diagnostic(
        file="",
        line=0,
        column=0,
        severity=Severity.INFO,
        rule=MAX_ERRORS_RULE,
        message=f"Maximum error count ({limit}) reached, stopping",
    )


class RuleEngine:
    """Runs the active rules over each file and enforces the max-error cutoff.

    Args:
        config: Resolved rules configuration, shared read-only by every rule.
        checks: Requested check names; defaults to ``DEFAULT_CHECKS``. A bare
            string is rejected with TypeError.
        max_errors: Error limit override. None uses ``config.global_.max_errors``;
            zero or less means no limit.
        rule_classes: Rule classes to instantiate; defaults to ``RULE_REGISTRY``.
    """

    def __init__(
        self,
        config: RulesConfig,
        checks: Iterable[str] | None = None,
        *,
        max_errors: int | None = None,
        rule_classes: list[type[Rule]] | None = None,
    ) -> None:
        if isinstance(checks, str):
            msg = f"checks must be a collection of check names, not a string: {checks!r}"
            raise TypeError(msg)
        self.config = config
        self.max_errors = config.global_.max_errors if max_errors is None else max_errors
        classes = RULE_REGISTRY if rule_classes is None else rule_classes
        self._rules: list[Rule] = [cls(config) for cls in classes]  # type: ignore[call-arg]
        self._enabled = enabled_checks(DEFAULT_CHECKS if checks is None else checks, config)

    @property
    def enabled(self) -> frozenset[str]:
        """Requested check names the configuration leaves enabled."""
        return self._enabled

    def active_rules(self) -> list[Rule]:
        """Return owned rules whose category is activated, in registry order."""
        return [rule for rule in self._rules if is_category_active(rule.category, self._enabled)]

    def check_file(self, file: SourceFile) -> list[Diagnostic]:
        """Run every active rule on one file, concatenating results in rule order."""
        results: list[Diagnostic] = []
        for rule in self.active_rules():
            results.extend(rule.check(file))
        return results

    def run(self, files: Iterable[SourceFile]) -> list[Diagnostic]:
        """Check *files* in order and return sorted diagnostics.

        Stops as soon as the error count reaches ``max_errors`` (when nonzero),
        appending a single ``max-errors`` sentinel. Errors raised while
        iterating *files* propagate to the caller.
        """
        log.debug(
            "Running %d rules (enabled checks: %s, max_errors=%d)",
            len(self._rules),
            sorted(self._enabled),
            self.max_errors,
        )
        collected: list[Diagnostic] = []
        error_count = 0
        file_count = 0

        for file in files:
            file_count += 1
            results = self.check_file(file)
            for diagnostic in results:
                collected.append(diagnostic)
                if diagnostic.severity != Severity.ERROR:
                    continue
                error_count += 1
                if self.max_errors > 0 and error_count >= self.max_errors:
                    log.info("Maximum error count (%d) reached in %s", self.max_errors, file.path)
                    collected.append(_max_errors_sentinel(self.max_errors))
                    return sort_diagnostics(collected)

            if results:
                log.info("  %s: %d issues", file.path, len(results))

        log.info("Linting complete: %d files, %d issues", file_count, len(collected))
        return sort_diagnostics(collected)
