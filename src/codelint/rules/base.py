# SPDX-License-Identifier: MIT
"""Severity, diagnostic dataclass, and Rule protocol for the lint rule engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from codelint.rules.context import SourceFile


class Severity(StrEnum):
    """Severity levels accepted in configuration and stamped on diagnostics."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class Diagnostic:
    """A single issue produced by one rule invocation."""

    file: str
    line: int
    column: int
    severity: Severity
    rule: str
    message: str


@runtime_checkable
class Rule(Protocol):
    """Protocol that every lint rule must satisfy.

    ``category`` is the name used for activation and may differ from ``id``,
    which is stamped on the diagnostics the rule produces.
    """

    id: str
    category: str
    description: str

    def check(self, file: SourceFile) -> list[Diagnostic]: ...
