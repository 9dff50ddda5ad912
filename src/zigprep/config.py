"""Build configuration read once from the invoking build's environment."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from zigprep.errors import ConfigurationError

OPT_IN_VAR = "DO_IT"
DOCS_VAR = "DOCS_RS"
TARGET_VAR = "TARGET"
OUT_DIR_VAR = "OUT_DIR"
WINDOWS_VAR = "CARGO_CFG_WINDOWS"
MANIFEST_DIR_VAR = "CARGO_MANIFEST_DIR"

DEFAULT_ARCHIVE_HOST = "https://github.com"
SOURCE_DIR_NAME = "zig-bootstrap"


@dataclass(frozen=True, slots=True)
class Version:
    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ConfigurationError(
                    "Version fields must be non-negative integers.",
                    context={"field": name, "value": repr(value)},
                )

    @classmethod
    def parse(cls, text: str) -> Version:
        parts = text.strip().split(".")
        if len(parts) != 3 or not all(part.isdigit() for part in parts):
            raise ConfigurationError(
                "Version must look like <major>.<minor>.<patch>.",
                context={"value": text},
            )
        major, minor, patch = (int(part) for part in parts)
        return cls(major, minor, patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


# The package is versioned in lockstep with the zig-bootstrap release it builds.
TOOLCHAIN_VERSION = Version(0, 14, 0)


@dataclass(frozen=True, slots=True)
class BuildConfig:
    out_dir: Path | None = None
    target: str = ""
    enabled: bool = True
    docs_only: bool = False
    windows: bool = False
    host_windows: bool = field(default_factory=lambda: os.name == "nt")
    source_dir: Path = field(default_factory=lambda: Path(SOURCE_DIR_NAME))
    version: Version = TOOLCHAIN_VERSION
    archive_host: str = DEFAULT_ARCHIVE_HOST

    @property
    def binary_name(self) -> str:
        return binary_name(windows=self.windows)

    def require_out_dir(self) -> Path:
        if self.out_dir is None:
            raise ConfigurationError(
                "The output directory is not set.",
                hint=f"Set {OUT_DIR_VAR} to a writable directory.",
                context={"variable": OUT_DIR_VAR},
            )
        return self.out_dir

    def validate(self) -> None:
        """Check the fields the enabled paths depend on."""
        self.require_out_dir()
        if self.docs_only:
            return
        if not self.target:
            raise ConfigurationError(
                "A target triple is required to build the toolchain.",
                hint=f"Set {TARGET_VAR} to the triple being built for.",
                context={"variable": TARGET_VAR},
            )

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        cwd: Path | None = None,
    ) -> BuildConfig:
        env = os.environ if environ is None else environ
        root = Path(env.get(MANIFEST_DIR_VAR) or (cwd or Path.cwd()))
        out_dir = env.get(OUT_DIR_VAR)
        config = cls(
            out_dir=Path(out_dir) if out_dir else None,
            target=env.get(TARGET_VAR, ""),
            enabled=OPT_IN_VAR in env,
            docs_only=DOCS_VAR in env,
            windows=WINDOWS_VAR in env,
            source_dir=root / SOURCE_DIR_NAME,
        )
        if config.enabled:
            config.validate()
        return config


def binary_name(*, windows: bool) -> str:
    return "zig.exe" if windows else "zig"


def emit_rerun_directives(stream: TextIO | None = None) -> None:
    """Tell the invoking build which environment changes should rerun this step."""
    out = stream if stream is not None else sys.stdout
    out.write(f"cargo:rerun-if-env-changed={OPT_IN_VAR}\n")
    out.flush()


__all__ = [
    "BuildConfig",
    "DEFAULT_ARCHIVE_HOST",
    "TOOLCHAIN_VERSION",
    "Version",
    "binary_name",
    "emit_rerun_directives",
]
