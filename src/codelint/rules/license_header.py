# SPDX-License-Identifier: MIT
"""Rule: license-headers — require a license marker near the top of every file."""

from __future__ import annotations

from codelint.rules.base import Diagnostic
from codelint.rules.config import RulesConfig, int_param
from codelint.rules.context import SourceFile

_LICENSE_MARKERS = (
    "Copyright",
    "SPDX-License-Identifier",
    "Licensed under",
    "All Rights Reserved",
)

_DEFAULT_CHECK_LINES = 10


class LicenseHeaderRule:
    """Report files whose leading lines carry no recognizable license marker."""

    id = "license-headers"
    category = "license-headers"
    description = "Check for license headers"

    def __init__(self, config: RulesConfig) -> None:
        self._config = config

    def check(self, file: SourceFile) -> list[Diagnostic]:
        rule_config, _ = self._config.get_rule_config(self.id)
        if not rule_config.enabled:
            return []

        check_lines = int_param(rule_config.parameters, "check_lines", _DEFAULT_CHECK_LINES)
        head = file.lines[: max(min(check_lines, len(file.lines)), 0)]
        if any(marker in line for line in head for marker in _LICENSE_MARKERS):
            return []

        return [
            Diagnostic(
                file=file.path,
                line=1,
                column=1,
                severity=rule_config.severity or self._config.global_.default_severity,
                rule=self.id,
                message="Missing license header",
            )
        ]
