# SPDX-License-Identifier: MIT
"""Formatting family — tabs, trailing whitespace, and line length.

All three rules activate under the ``formatting`` category. Trailing
whitespace additionally has its own ``trailing-whitespace`` switch; line
length has none and runs whenever the category is active.
"""

from __future__ import annotations

from codelint.rules.base import Diagnostic, Severity
from codelint.rules.config import RulesConfig, bool_param, int_param
from codelint.rules.context import SourceFile

FORMATTING_CATEGORY = "formatting"
DEFAULT_MAX_LINE_LENGTH = 100


class FormattingRule:
    """Report the first tab character in a file, once per file."""

    id = "formatting"
    category = FORMATTING_CATEGORY
    description = "Check code formatting"

    def __init__(self, config: RulesConfig) -> None:
        self._config = config

    def check(self, file: SourceFile) -> list[Diagnostic]:
        rule_config, _ = self._config.get_rule_config(self.id)
        if not rule_config.enabled:
            return []
        if not bool_param(rule_config.parameters, "check_tabs", True):
            return []

        for i, line in enumerate(file.lines):
            col = line.find("\t")
            if col != -1:
                return [
                    Diagnostic(
                        file=file.path,
                        line=i + 1,
                        column=col + 1,
                        severity=Severity.INFO,
                        rule=self.id,
                        message="File contains tabs; consider using spaces",
                    )
                ]
        return []


class TrailingWhitespaceRule:
    """Report every line that ends in a space or tab."""

    id = "trailing-whitespace"
    category = FORMATTING_CATEGORY
    description = "Check for trailing whitespace"

    def __init__(self, config: RulesConfig) -> None:
        self._config = config

    def check(self, file: SourceFile) -> list[Diagnostic]:
        rule_config, _ = self._config.get_rule_config(self.id)
        if not rule_config.enabled:
            return []

        severity = rule_config.severity or self._config.global_.default_severity
        return [
            Diagnostic(
                file=file.path,
                line=i + 1,
                column=len(line),
                severity=severity,
                rule=self.id,
                message="Line has trailing whitespace",
            )
            for i, line in enumerate(file.lines)
            if line.endswith((" ", "\t"))
        ]


class LineLengthRule:
    """Report every line longer than ``formatting.max_line_length``."""

    id = "line-length"
    category = FORMATTING_CATEGORY
    description = "Check line length"

    def __init__(self, config: RulesConfig) -> None:
        # Read once; later config changes do not affect this instance.
        formatting, exists = config.get_rule_config(FORMATTING_CATEGORY)
        self.max_length = DEFAULT_MAX_LINE_LENGTH
        if exists:
            self.max_length = int_param(
                formatting.parameters, "max_line_length", DEFAULT_MAX_LINE_LENGTH
            )

    def check(self, file: SourceFile) -> list[Diagnostic]:
        return [
            Diagnostic(
                file=file.path,
                line=i + 1,
                column=self.max_length + 1,
                severity=Severity.INFO,
                rule=self.id,
                message=f"Line exceeds {self.max_length} characters ({len(line)})",
            )
            for i, line in enumerate(file.lines)
            if len(line) > self.max_length
        ]
