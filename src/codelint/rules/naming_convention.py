# SPDX-License-Identifier: MIT
"""Rule: naming-conventions — camelCase function names in C sources."""

from __future__ import annotations

import re

from codelint.rules.base import Diagnostic
from codelint.rules.config import RulesConfig, bool_param
from codelint.rules.context import SourceFile

# lowercase run, one capital, more letters, then an opening paren
_CAMEL_CASE_CALL_RE = re.compile(r"\b[a-z]+[A-Z][a-zA-Z]*\s*\(", re.ASCII)


def _is_comment_line(line: str) -> bool:
    return line.strip().startswith(("//", "/*"))


class NamingConventionRule:
    """Flag camelCase function declarations and calls in .c files (C uses snake_case)."""

    id = "naming-conventions"
    category = "naming-conventions"
    description = "Check naming standards"

    def __init__(self, config: RulesConfig) -> None:
        self._config = config

    def check(self, file: SourceFile) -> list[Diagnostic]:
        rule_config, _ = self._config.get_rule_config(self.id)
        if not rule_config.enabled:
            return []
        if not file.has_suffix(".c"):
            return []
        if not bool_param(rule_config.parameters, "check_functions", True):
            return []

        severity = rule_config.severity or self._config.global_.default_severity
        results: list[Diagnostic] = []
        for i, line in enumerate(file.lines):
            if _is_comment_line(line):
                continue
            match = _CAMEL_CASE_CALL_RE.search(line)
            if match:
                results.append(
                    Diagnostic(
                        file=file.path,
                        line=i + 1,
                        column=1,
                        severity=severity,
                        rule=self.id,
                        message=f"Function name should use snake_case: {match.group(0)}",
                    )
                )
        return results
