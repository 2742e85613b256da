# SPDX-License-Identifier: MIT
"""Filesystem walker — finds C/C++ sources under a root and loads them."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from codelint.rules.context import SourceFile

log = logging.getLogger(__name__)


class WalkError(Exception):
    """Raised when an include root cannot be enumerated."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"failed to walk directory {path}: {reason}")


@dataclass
class WalkerConfig:
    """Which directories and file types to scan."""

    root_dir: str = "."
    include_dirs: list[str] = field(default_factory=lambda: ["."])
    exclude_dirs: list[str] = field(
        default_factory=lambda: [".git", "build", "third_party", "vendor", "node_modules"]
    )
    file_types: list[str] = field(default_factory=lambda: [".c", ".cc", ".cpp", ".h", ".hpp"])


def should_exclude_dir(path: str, exclude_dirs: list[str]) -> bool:
    """Match the directory's base name, or any ``/<name>/`` segment of its path."""
    base = os.path.basename(path)
    for exclude in exclude_dirs:
        if base == exclude:
            return True
        if f"{os.sep}{exclude}{os.sep}" in path:
            return True
    return False


def should_process_file(path: str, file_types: list[str]) -> bool:
    """Extension filter. An empty filter accepts every file."""
    if not file_types:
        return True
    return os.path.splitext(path)[1] in file_types


def relative_path(path: str, root_dir: str) -> str:
    try:
        return os.path.relpath(path, root_dir)
    except ValueError:
        return path


def _raise_walk_error(exc: OSError) -> None:
    raise WalkError(str(exc.filename or ""), exc.strerror or str(exc))


def walk(config: WalkerConfig) -> list[SourceFile]:
    """Load every matching file under the configured include directories.

    Directories are visited in sorted order so results are deterministic.
    Unreadable files are skipped; an inaccessible include root raises WalkError.
    """
    files: list[SourceFile] = []

    for include_dir in config.include_dirs:
        root_path = os.path.join(config.root_dir, include_dir)
        if not os.path.exists(root_path):
            raise WalkError(root_path, "no such file or directory")

        if should_exclude_dir(root_path, config.exclude_dirs):
            continue

        if os.path.isfile(root_path):
            candidates = [root_path] if should_process_file(root_path, config.file_types) else []
            files.extend(_load(candidates, config.root_dir))
            continue

        for dirpath, dirnames, filenames in os.walk(root_path, onerror=_raise_walk_error):
            dirnames[:] = sorted(
                d
                for d in dirnames
                if not should_exclude_dir(os.path.join(dirpath, d), config.exclude_dirs)
            )
            candidates = [
                os.path.join(dirpath, name)
                for name in sorted(filenames)
                if should_process_file(name, config.file_types)
            ]
            files.extend(_load(candidates, config.root_dir))

    log.debug("Found %d files to lint", len(files))
    return files


def _load(paths: list[str], root_dir: str) -> list[SourceFile]:
    loaded: list[SourceFile] = []
    for path in paths:
        try:
            content = Path(path).read_bytes()
        except OSError as exc:
            log.debug("Skipping unreadable file %s: %s", path, exc)
            continue
        loaded.append(SourceFile.from_bytes(relative_path(path, root_dir), content))
    return loaded
