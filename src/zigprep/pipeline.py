"""End-to-end toolchain preparation: gate, acquire, map, build, relocate."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, TextIO

from zigprep.builders import (
    Builder,
    BuildSpec,
    CommandRunner,
    ZigBootstrapBuilder,
    relocate_artifacts,
    run_command,
    write_placeholder_artifacts,
)
from zigprep.config import BuildConfig
from zigprep.fetch import SourceArchive, SourceTree, ensure_source_tree
from zigprep.observability import StructuredLogger
from zigprep.targets import TargetMapping, require_target

Outcome = Literal["skipped", "placeholder", "built"]


@dataclass(frozen=True, slots=True)
class PrepareResult:
    outcome: Outcome
    binary_path: Path | None = None
    lib_dir: Path | None = None
    source: SourceTree | None = None
    target: TargetMapping | None = None


@dataclass(slots=True)
class Pipeline:
    config: BuildConfig
    logger: StructuredLogger = field(default_factory=StructuredLogger)
    runner: CommandRunner = run_command
    stream: TextIO | None = None
    builder: Builder | None = None

    def run(self) -> PrepareResult:
        config = self.config
        if not config.enabled:
            self.logger.log(
                operation="gate_closed",
                stage="gate",
                message="Toolchain build not requested; nothing to do.",
                level="debug",
            )
            return PrepareResult(outcome="skipped")

        config.validate()
        out_dir = config.require_out_dir()
        if config.docs_only:
            binary, lib_dir = write_placeholder_artifacts(out_dir, windows=config.windows)
            self.logger.log(
                operation="placeholder",
                stage="gate",
                message=f"Documentation build; wrote placeholder toolchain to {out_dir}.",
            )
            return PrepareResult(outcome="placeholder", binary_path=binary, lib_dir=lib_dir)

        source = ensure_source_tree(
            SourceArchive(version=config.version, host=config.archive_host),
            config.source_dir,
            logger=self.logger,
        )
        mapping = require_target(config.target)
        builder = self.builder
        if builder is None:
            builder = ZigBootstrapBuilder(runner=self.runner, stream=self.stream, logger=self.logger)
        artifact = builder.build(
            BuildSpec(
                source=source.path,
                target=mapping,
                windows=config.windows,
                host_windows=config.host_windows,
            )
        )
        binary, lib_dir = relocate_artifacts(artifact, out_dir, logger=self.logger)
        return PrepareResult(
            outcome="built",
            binary_path=binary,
            lib_dir=lib_dir,
            source=source,
            target=mapping,
        )


def prepare_toolchain(
    config: BuildConfig,
    *,
    logger: StructuredLogger | None = None,
    runner: CommandRunner = run_command,
    stream: TextIO | None = None,
    builder: Builder | None = None,
) -> PrepareResult:
    """Make the zig toolchain available in ``config.out_dir``."""
    pipeline = Pipeline(
        config=config,
        logger=logger if logger is not None else StructuredLogger(),
        runner=runner,
        stream=stream,
        builder=builder,
    )
    return pipeline.run()


__all__ = ["Outcome", "Pipeline", "PrepareResult", "prepare_toolchain"]
