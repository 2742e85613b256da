# SPDX-License-Identifier: MIT
"""Source file value passed to each rule."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceFile:
    """A loaded source file — path, raw bytes, and line-split text."""

    path: str  # Relative to the scan root
    content: bytes
    lines: tuple[str, ...]  # 0-indexed; diagnostics report index + 1

    @classmethod
    def from_bytes(cls, path: str, content: bytes) -> SourceFile:
        """Decode *content* as UTF-8 and split it on newlines.

        A trailing newline produces a final empty line and empty content
        produces a single empty line. Carriage returns are left in place.
        """
        text = content.decode("utf-8", errors="replace")
        return cls(path=path, content=content, lines=tuple(text.split("\n")))

    @classmethod
    def from_text(cls, path: str, text: str) -> SourceFile:
        """Build a SourceFile from already-decoded text."""
        return cls.from_bytes(path, text.encode("utf-8"))

    def has_suffix(self, *suffixes: str) -> bool:
        return self.path.endswith(suffixes)
