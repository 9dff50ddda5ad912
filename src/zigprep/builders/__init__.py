"""Builder contracts, the zig-bootstrap builder, and artifact relocation."""

from .base import BuildArtifact, Builder, BuildSpec, CommandRunner
from .relocate import relocate_artifacts, write_placeholder_artifacts
from .runner import run_command
from .zig import ZigBootstrapBuilder

__all__ = [
    "BuildArtifact",
    "BuildSpec",
    "Builder",
    "CommandRunner",
    "ZigBootstrapBuilder",
    "relocate_artifacts",
    "run_command",
    "write_placeholder_artifacts",
]
