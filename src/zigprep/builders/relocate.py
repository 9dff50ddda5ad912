"""Moves built artifacts into the output directory the host build expects."""

from __future__ import annotations

from pathlib import Path

from zigprep.builders.base import BuildArtifact
from zigprep.config import binary_name
from zigprep.errors import FilesystemError
from zigprep.observability import StructuredLogger


def relocate_artifacts(
    artifact: BuildArtifact,
    out_dir: Path,
    *,
    logger: StructuredLogger | None = None,
) -> tuple[Path, Path]:
    """Move the binary and ``lib/`` directory into ``out_dir``, keeping their names."""
    _ensure_dir(out_dir)
    binary_dest = out_dir / artifact.binary_path.name
    lib_dest = out_dir / artifact.lib_dir.name
    _move(artifact.binary_path, binary_dest)
    _move(artifact.lib_dir, lib_dest)
    if logger is not None:
        logger.log(
            operation="relocate",
            stage="relocate",
            message=f"Moved toolchain into {out_dir}.",
            extra={"binary": str(binary_dest), "lib": str(lib_dest)},
        )
    return binary_dest, lib_dest


def write_placeholder_artifacts(out_dir: Path, *, windows: bool) -> tuple[Path, Path]:
    """Create an empty binary and ``lib/`` so the output layout exists without a build."""
    binary = out_dir / binary_name(windows=windows)
    lib_dir = out_dir / "lib"
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        binary.write_bytes(b"")
        lib_dir.mkdir(exist_ok=True)
    except OSError as exc:
        raise FilesystemError(
            "Could not write placeholder artifacts.",
            context={"operation": "placeholder", "path": str(out_dir), "reason": str(exc)},
        ) from exc
    return binary, lib_dir


def _ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(
            "Could not create the output directory.",
            context={"operation": "relocate", "path": str(path), "reason": str(exc)},
        ) from exc


def _move(source: Path, destination: Path) -> None:
    if destination.exists() or destination.is_symlink():
        raise FilesystemError(
            "Artifact destination is already populated.",
            hint="Clean the output directory and rerun the build.",
            context={"operation": "relocate", "source": str(source), "destination": str(destination)},
        )
    try:
        source.rename(destination)
    except OSError as exc:
        raise FilesystemError(
            "Could not move build artifact.",
            hint="The source tree and output directory must be on the same filesystem.",
            context={
                "operation": "relocate",
                "source": str(source),
                "destination": str(destination),
                "reason": str(exc),
            },
        ) from exc
