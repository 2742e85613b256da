# SPDX-License-Identifier: MIT
"""Tests for codelint.rules.context — SourceFile construction."""

from __future__ import annotations

import dataclasses

import pytest

from codelint.rules.context import SourceFile


class TestSourceFile:
    def test_lines_split_on_newline(self) -> None:
        f = SourceFile.from_bytes("a.c", b"one\ntwo\nthree")
        assert f.lines == ("one", "two", "three")
        assert f.content == b"one\ntwo\nthree"
        assert f.path == "a.c"

    def test_trailing_newline_gives_empty_last_line(self) -> None:
        f = SourceFile.from_bytes("a.c", b"int fooBar() {\n  return 1;\n}\n")
        assert f.lines == ("int fooBar() {", "  return 1;", "}", "")

    def test_empty_content_is_one_empty_line(self) -> None:
        assert SourceFile.from_bytes("a.h", b"").lines == ("",)

    def test_carriage_return_kept(self) -> None:
        assert SourceFile.from_bytes("a.c", b"x\r\ny").lines == ("x\r", "y")

    def test_invalid_utf8_replaced(self) -> None:
        f = SourceFile.from_bytes("a.c", b"ok\n\xff\xfe")
        assert f.lines[0] == "ok"
        assert "\ufffd" in f.lines[1]

    def test_from_text(self) -> None:
        f = SourceFile.from_text("a.c", "é\n")
        assert f.content == "é\n".encode()
        assert f.lines == ("é", "")

    def test_immutable(self) -> None:
        f = SourceFile.from_text("a.c", "")
        with pytest.raises(dataclasses.FrozenInstanceError):
            f.path = "b.c"  # type: ignore[misc]

    def test_has_suffix(self) -> None:
        f = SourceFile.from_text("dir/x.hpp", "")
        assert f.has_suffix(".h", ".hpp") is True
        assert f.has_suffix(".c") is False
