# SPDX-License-Identifier: MIT
"""Rule: header-guards — #ifndef/#define/#endif (or #pragma once) in header files."""

from __future__ import annotations

from codelint.rules.base import Diagnostic
from codelint.rules.config import RulesConfig, bool_param
from codelint.rules.context import SourceFile

_HEADER_SUFFIXES = (".h", ".hpp")

# Lines at 0-based index above this may end the leading preprocessor block
_LEADING_BLOCK_LINES = 20


def _ends_leading_block(index: int, trimmed: str) -> bool:
    """True for a code line past the leading block — the guard search stops there."""
    return (
        index > _LEADING_BLOCK_LINES
        and trimmed != ""
        and not trimmed.startswith(("//", "/*", "#"))
    )


class HeaderGuardRule:
    """Report .h/.hpp files without a complete include guard."""

    id = "header-guards"
    category = "header-guards"
    description = "Verify header include guards"

    def __init__(self, config: RulesConfig) -> None:
        self._config = config

    def check(self, file: SourceFile) -> list[Diagnostic]:
        rule_config, _ = self._config.get_rule_config(self.id)
        if not rule_config.enabled:
            return []
        if not file.has_suffix(*_HEADER_SUFFIXES):
            return []

        allow_pragma_once = bool_param(rule_config.parameters, "allow_pragma_once", True)
        has_ifndef = has_define = has_endif = False

        for i, line in enumerate(file.lines):
            trimmed = line.strip()
            if trimmed.startswith("#ifndef"):
                has_ifndef = True
            elif trimmed.startswith("#define") and has_ifndef:
                has_define = True
            elif trimmed.startswith("#endif"):
                has_endif = True

            if allow_pragma_once and trimmed.startswith("#pragma once"):
                return []

            if _ends_leading_block(i, trimmed):
                break

        if has_ifndef and has_define and has_endif:
            return []

        return [
            Diagnostic(
                file=file.path,
                line=1,
                column=1,
                severity=rule_config.severity or self._config.global_.default_severity,
                rule=self.id,
                message="Missing or incomplete header guard",
            )
        ]
