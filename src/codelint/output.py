# SPDX-License-Identifier: MIT
"""Console rendering of diagnostics."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from codelint.rules.base import Diagnostic, Severity

_SEVERITY_PREFIX: dict[Severity, str] = {
    Severity.ERROR: "ERROR",
    Severity.WARNING: "WARNING",
    Severity.INFO: "INFO",
}

SUMMARY_RULE = "-" * 60


def format_diagnostic(d: Diagnostic) -> str:
    """Render ``SEVERITY: file:line:col: message [rule]``.

    File-less diagnostics (the max-errors sentinel) render as ``SEVERITY: message``.
    """
    prefix = _SEVERITY_PREFIX.get(d.severity, "UNKNOWN")
    if not d.file:
        return f"{prefix}: {d.message}"
    return f"{prefix}: {d.file}:{d.line}:{d.column}: {d.message} [{d.rule}]"


def summarize(diagnostics: Iterable[Diagnostic]) -> Counter[Severity]:
    return Counter(d.severity for d in diagnostics)


def format_summary(diagnostics: list[Diagnostic]) -> str:
    counts = summarize(diagnostics)
    return (
        f"Summary: {counts[Severity.ERROR]} errors, "
        f"{counts[Severity.WARNING]} warnings, {counts[Severity.INFO]} info"
    )


def print_results(diagnostics: list[Diagnostic]) -> None:
    """Print every diagnostic followed by a severity summary."""
    if not diagnostics:
        print("No issues found!")
        return

    for d in diagnostics:
        print(format_diagnostic(d))
    print(SUMMARY_RULE)
    print(format_summary(diagnostics))
