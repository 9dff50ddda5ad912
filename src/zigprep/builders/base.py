"""Typed interfaces for the external toolchain build."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, TextIO

from zigprep.targets import TargetMapping


@dataclass(frozen=True, slots=True)
class BuildSpec:
    source: Path
    target: TargetMapping
    windows: bool = False
    host_windows: bool = False


@dataclass(frozen=True, slots=True)
class BuildArtifact:
    builder: str
    target: TargetMapping
    output_dir: Path
    binary_path: Path
    lib_dir: Path


class Builder(Protocol):
    def build(self, spec: BuildSpec) -> BuildArtifact:
        """Run the external build and return the produced artifact paths."""


class CommandRunner(Protocol):
    def __call__(
        self,
        command: Sequence[str],
        *,
        cwd: Path,
        stream: TextIO | None = None,
    ) -> None:
        """Run ``command`` to completion, raising on a failed exit status."""
