"""Idempotent acquisition of the zig-bootstrap source tree."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from zigprep.config import DEFAULT_ARCHIVE_HOST, Version
from zigprep.fetch.archive import extract_archive
from zigprep.fetch.http import download_archive
from zigprep.observability import StructuredLogger


@dataclass(frozen=True, slots=True)
class SourceArchive:
    version: Version
    host: str = DEFAULT_ARCHIVE_HOST
    org: str = "ziglang"
    repo: str = "zig-bootstrap"

    @property
    def url(self) -> str:
        return (
            f"{self.host.rstrip('/')}/{self.org}/{self.repo}"
            f"/archive/refs/tags/{self.version}.zip"
        )


@dataclass(frozen=True, slots=True)
class SourceTree:
    path: Path
    fetched: bool


def ensure_source_tree(
    archive: SourceArchive,
    source_dir: str | Path,
    *,
    logger: StructuredLogger | None = None,
) -> SourceTree:
    """Download and unpack ``archive`` into ``source_dir`` unless it already exists.

    An existing directory is trusted as-is: its contents are not compared
    against ``archive.version``.
    """
    log = logger if logger is not None else StructuredLogger()
    path = Path(source_dir)
    if path.exists():
        log.log(
            operation="fetch_skip",
            stage="acquire",
            message=f"Using existing source tree at {path}.",
            extra={"path": str(path)},
        )
        return SourceTree(path=path, fetched=False)

    log.log(
        operation="fetch_start",
        stage="acquire",
        message=f"Downloading {archive.url}.",
        extra={"url": archive.url, "version": str(archive.version)},
    )
    archive_path = download_archive(archive.url, dest_dir=path.parent, prefix=f"{path.name}-")
    try:
        extract_archive(archive_path, path)
    finally:
        archive_path.unlink(missing_ok=True)
    log.log(
        operation="fetch_complete",
        stage="acquire",
        message=f"Extracted source tree to {path}.",
        extra={"path": str(path)},
    )
    return SourceTree(path=path, fetched=True)
