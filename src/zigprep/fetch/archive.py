"""Zip extraction that unwraps the archive's single root directory."""

from __future__ import annotations

import os
import shutil
import stat
import tempfile
import zipfile
import zlib
from pathlib import Path

from zigprep.errors import ArchiveError, FilesystemError

# Top-level entries that archivers add next to the real root.
IGNORED_ROOT_ENTRIES = frozenset({"__MACOSX", ".DS_Store"})

_UNIX_SYSTEM = 3


def extract_archive(archive_path: str | Path, destination: str | Path) -> Path:
    """Extract ``archive_path`` so that ``destination`` becomes the archive root.

    ``<root>/a/b`` in the archive lands at ``destination/a/b``. Members are
    written to a staging directory beside ``destination`` which is renamed
    into place once every member is on disk. Symlinks may only point inside
    the extracted tree.
    """
    archive_path = Path(archive_path)
    destination = Path(destination)
    if destination.exists():
        raise FilesystemError(
            "Extraction destination already exists.",
            context={"operation": "extract", "path": str(destination)},
        )

    try:
        with zipfile.ZipFile(archive_path) as archive:
            members = [(info, _member_parts(info, archive_path)) for info in archive.infolist()]
            root = _common_root(members, archive_path)
            destination.parent.mkdir(parents=True, exist_ok=True)
            staging = Path(tempfile.mkdtemp(prefix=f".{destination.name}-", dir=destination.parent))
            try:
                staging_root = staging.resolve()
                for info, parts in members:
                    if parts[0] != root or len(parts) == 1:
                        continue
                    _extract_member(archive, info, staging.joinpath(*parts[1:]), staging_root)
                staging.rename(destination)
            finally:
                if staging.exists():
                    shutil.rmtree(staging, ignore_errors=True)
    except (zipfile.BadZipFile, zlib.error, EOFError) as exc:
        raise ArchiveError(
            "Archive is corrupt or unreadable.",
            context={"operation": "extract", "archive": str(archive_path), "reason": str(exc)},
        ) from exc
    except OSError as exc:
        raise FilesystemError(
            "Could not write the extracted source tree.",
            context={
                "operation": "extract",
                "archive": str(archive_path),
                "path": str(destination),
                "reason": str(exc),
            },
        ) from exc
    return destination


def _member_parts(info: zipfile.ZipInfo, archive_path: Path) -> tuple[str, ...]:
    name = info.filename.replace("\\", "/")
    parts = tuple(part for part in name.split("/") if part not in ("", "."))
    if name.startswith("/") or ".." in parts or not parts or ":" in parts[0]:
        raise _escape_error(archive_path, info.filename)
    return parts


def _escape_error(archive_path: Path | str, member: str) -> ArchiveError:
    return ArchiveError(
        "Archive member escapes the extraction directory.",
        context={"operation": "extract", "archive": str(archive_path), "member": member},
    )


def _common_root(
    members: list[tuple[zipfile.ZipInfo, tuple[str, ...]]],
    archive_path: Path,
) -> str:
    roots: set[str] = set()
    loose_files = False
    for info, parts in members:
        if parts[0] in IGNORED_ROOT_ENTRIES:
            continue
        if len(parts) == 1 and not info.is_dir():
            loose_files = True
        roots.add(parts[0])
    if len(roots) != 1 or loose_files:
        raise ArchiveError(
            "Archive must contain exactly one top-level directory.",
            context={
                "operation": "extract",
                "archive": str(archive_path),
                "roots": ", ".join(sorted(roots)),
            },
        )
    return roots.pop()


def _extract_member(
    archive: zipfile.ZipFile,
    info: zipfile.ZipInfo,
    target: Path,
    staging_root: Path,
) -> None:
    # Earlier members may be symlinks; check where the member really lands.
    if not target.resolve().is_relative_to(staging_root):
        raise _escape_error(archive.filename or "", info.filename)
    mode = info.external_attr >> 16 if info.create_system == _UNIX_SYSTEM else 0
    if info.is_dir():
        target.mkdir(parents=True, exist_ok=True)
        return
    target.parent.mkdir(parents=True, exist_ok=True)
    if stat.S_ISLNK(mode) and os.name != "nt":
        link = archive.read(info).decode("utf-8")
        resolved = (target.parent / link).resolve()
        if os.path.isabs(link) or not resolved.is_relative_to(staging_root):
            raise _escape_error(archive.filename or "", info.filename)
        os.symlink(link, target)
        return
    with archive.open(info) as source, target.open("wb") as out:
        shutil.copyfileobj(source, out)
    if stat.S_IMODE(mode):
        target.chmod(stat.S_IMODE(mode))
