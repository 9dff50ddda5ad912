"""Shared test fixtures."""

from __future__ import annotations

import stat
import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

from zigprep.config import TOOLCHAIN_VERSION

ARCHIVE_ROOT = f"zig-bootstrap-{TOOLCHAIN_VERSION}"

# Stands in for zig-bootstrap's ./build: writes the same output layout.
BUILD_SCRIPT = """#!/bin/sh
set -e
out="out/zig-$1-$2"
mkdir -p "$out/lib/std"
printf 'zig' > "$out/zig"
printf 'pub fn main() void {}\\n' > "$out/lib/std/std.zig"
echo "building $1 $2"
echo "progress for $1" >&2
"""

ZipFactory = Callable[..., Path]
HostFactory = Callable[..., str]


def _add_dir(archive: zipfile.ZipFile, name: str) -> None:
    info = zipfile.ZipInfo(name)
    info.create_system = 3
    info.external_attr = ((stat.S_IFDIR | 0o755) << 16) | 0x10
    archive.writestr(info, b"")


def _add_file(archive: zipfile.ZipFile, name: str, data: bytes, mode: int = 0o644) -> None:
    info = zipfile.ZipInfo(name)
    info.create_system = 3
    info.external_attr = (stat.S_IFREG | mode) << 16
    archive.writestr(info, data)


@pytest.fixture
def source_zip(tmp_path: Path) -> ZipFactory:
    """Write a zip shaped like a GitHub tag archive of zig-bootstrap."""

    def _make(
        path: Path | None = None,
        *,
        root: str = ARCHIVE_ROOT,
        script: str = BUILD_SCRIPT,
        extra: dict[str, bytes] | None = None,
    ) -> Path:
        target = path if path is not None else tmp_path / "archives" / "source.zip"
        target.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(target, "w") as archive:
            _add_dir(archive, f"{root}/")
            _add_file(archive, f"{root}/build", script.encode("utf-8"), 0o755)
            _add_file(archive, f"{root}/README.md", b"zig-bootstrap\n")
            _add_dir(archive, f"{root}/zig/")
            _add_file(archive, f"{root}/zig/build.zig", b"// zig build\n")
            for name, data in (extra or {}).items():
                _add_file(archive, name, data)
        return target

    return _make


@pytest.fixture
def archive_host(tmp_path: Path, source_zip: ZipFactory) -> HostFactory:
    """Lay out a file:// mirror serving the pinned release archive."""

    def _make(*, script: str = BUILD_SCRIPT, payload: bytes | None = None) -> str:
        mirror = tmp_path / "mirror"
        archive_path = (
            mirror / "ziglang" / "zig-bootstrap" / "archive" / "refs" / "tags"
            / f"{TOOLCHAIN_VERSION}.zip"
        )
        if payload is None:
            source_zip(archive_path, script=script)
        else:
            archive_path.parent.mkdir(parents=True, exist_ok=True)
            archive_path.write_bytes(payload)
        return mirror.as_uri()

    return _make
