# SPDX-License-Identifier: MIT
"""Tests for codelint.walker — discovery, filtering, and fatal errors."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from codelint.walker import (
    WalkerConfig,
    WalkError,
    relative_path,
    should_exclude_dir,
    should_process_file,
    walk,
)


def _tree(root: Path, files: dict[str, str]) -> None:
    for rel, text in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")


class TestFilters:
    def test_exclude_by_base_name(self) -> None:
        assert should_exclude_dir(os.path.join("src", "build"), ["build"]) is True
        assert should_exclude_dir(os.path.join("src", "builder"), ["build"]) is False

    def test_exclude_by_path_segment(self) -> None:
        path = os.sep.join(["x", "vendor", "lib"])
        assert should_exclude_dir(path, ["vendor"]) is True

    def test_extension_filter(self) -> None:
        assert should_process_file("a.c", [".c", ".h"]) is True
        assert should_process_file("a.py", [".c", ".h"]) is False
        assert should_process_file("Makefile", [".c"]) is False

    def test_empty_filter_accepts_all(self) -> None:
        assert should_process_file("anything.txt", []) is True

    def test_relative_path(self) -> None:
        path = os.path.join("root", "src", "a.c")
        assert relative_path(path, "root") == os.path.join("src", "a.c")


class TestWalk:
    def test_finds_matching_files_relative_to_root(self, tmp_path: Path) -> None:
        _tree(
            tmp_path,
            {
                "src/a.c": "int a;\n",
                "src/a.h": "#pragma once\n",
                "src/notes.txt": "hi\n",
                "include/b.hpp": "\n",
            },
        )
        files = walk(WalkerConfig(root_dir=str(tmp_path)))
        paths = [f.path for f in files]
        assert paths == [
            os.path.join("include", "b.hpp"),
            os.path.join("src", "a.c"),
            os.path.join("src", "a.h"),
        ]

    def test_loads_content_and_lines(self, tmp_path: Path) -> None:
        _tree(tmp_path, {"a.c": "x\ny\n"})
        (f,) = walk(WalkerConfig(root_dir=str(tmp_path)))
        assert f.content == b"x\ny\n"
        assert f.lines == ("x", "y", "")

    def test_excluded_dirs_skipped(self, tmp_path: Path) -> None:
        _tree(
            tmp_path,
            {
                "src/a.c": "",
                "build/gen.c": "",
                "third_party/lib/x.c": "",
                "src/vendor/y.c": "",
            },
        )
        files = walk(WalkerConfig(root_dir=str(tmp_path)))
        assert [f.path for f in files] == [os.path.join("src", "a.c")]

    def test_include_dirs(self, tmp_path: Path) -> None:
        _tree(tmp_path, {"src/a.c": "", "tests/t.c": ""})
        files = walk(WalkerConfig(root_dir=str(tmp_path), include_dirs=["src"]))
        assert [f.path for f in files] == [os.path.join("src", "a.c")]

    def test_custom_file_types(self, tmp_path: Path) -> None:
        _tree(tmp_path, {"a.c": "", "b.cc": ""})
        files = walk(WalkerConfig(root_dir=str(tmp_path), file_types=[".cc"]))
        assert [f.path for f in files] == ["b.cc"]

    def test_missing_include_dir_is_fatal(self, tmp_path: Path) -> None:
        with pytest.raises(WalkError, match="failed to walk directory"):
            walk(WalkerConfig(root_dir=str(tmp_path), include_dirs=["nope"]))

    def test_walk_error_attributes(self, tmp_path: Path) -> None:
        with pytest.raises(WalkError) as excinfo:
            walk(WalkerConfig(root_dir=str(tmp_path / "missing")))
        assert "missing" in excinfo.value.path
        assert excinfo.value.reason

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0, reason="root can read anything"
    )
    def test_unreadable_file_skipped(self, tmp_path: Path) -> None:
        _tree(tmp_path, {"a.c": "", "b.c": ""})
        blocked = tmp_path / "b.c"
        blocked.chmod(0)
        try:
            files = walk(WalkerConfig(root_dir=str(tmp_path)))
        finally:
            blocked.chmod(0o644)
        assert [f.path for f in files] == ["a.c"]
