"""zig-bootstrap builder.

zig-bootstrap ships a ``build`` (``build.bat`` on Windows) script that builds
LLVM, zlib, zstd and friends before building Zig itself::

    ./build <arch>-<os>-<abi> <mcpu>

Output lands in ``out/zig-<target>-<mcpu>/`` relative to the source tree, with
the ``zig`` binary directly inside and ``lib/`` next to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO

from zigprep.builders.base import BuildArtifact, BuildSpec, CommandRunner
from zigprep.builders.runner import run_command
from zigprep.config import binary_name
from zigprep.errors import BuildError
from zigprep.observability import StructuredLogger


@dataclass(slots=True)
class ZigBootstrapBuilder:
    runner: CommandRunner = run_command
    stream: TextIO | None = None
    logger: StructuredLogger = field(default_factory=StructuredLogger)
    name: str = "zig-bootstrap"

    def command(self, spec: BuildSpec) -> tuple[str, ...]:
        script = "build.bat" if spec.host_windows else "build"
        return (
            str((spec.source / script).resolve()),
            spec.target.zig_target,
            spec.target.mcpu,
        )

    def build(self, spec: BuildSpec) -> BuildArtifact:
        command = self.command(spec)
        self.logger.log(
            operation="build_start",
            stage="build",
            message=f"Building {spec.target.zig_target} ({spec.target.mcpu}) in {spec.source}.",
            extra={"command": list(command)},
        )
        self.runner(command, cwd=spec.source, stream=self.stream)

        output_dir = spec.source / "out" / spec.target.out_name
        binary_path = output_dir / binary_name(windows=spec.windows)
        lib_dir = output_dir / "lib"
        missing = [str(path) for path in (binary_path, lib_dir) if not path.exists()]
        if missing:
            raise BuildError(
                "zig-bootstrap finished without producing the expected artifacts.",
                hint="Check that the build script writes to out/zig-<target>-<mcpu>/.",
                context={"builder": self.name, "missing": ", ".join(missing)},
            )
        self.logger.log(
            operation="build_complete",
            stage="build",
            message=f"Built {binary_path}.",
        )
        return BuildArtifact(
            builder=self.name,
            target=spec.target,
            output_dir=output_dir,
            binary_path=binary_path,
            lib_dir=lib_dir,
        )
