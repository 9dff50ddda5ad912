"""Public package entrypoint for zigprep."""

from .config import TOOLCHAIN_VERSION, BuildConfig, Version
from .errors import (
    ArchiveError,
    BuildError,
    ConfigurationError,
    ErrorCode,
    FetchError,
    FilesystemError,
    UnsupportedTargetError,
    ZigprepError,
)
from .observability import StructuredLogger
from .pipeline import PrepareResult, prepare_toolchain
from .targets import TARGETS, TargetMapping, lookup_target, require_target

__version__ = str(TOOLCHAIN_VERSION)

__all__ = [
    "ArchiveError",
    "BuildConfig",
    "BuildError",
    "ConfigurationError",
    "ErrorCode",
    "FetchError",
    "FilesystemError",
    "PrepareResult",
    "StructuredLogger",
    "TARGETS",
    "TOOLCHAIN_VERSION",
    "TargetMapping",
    "UnsupportedTargetError",
    "Version",
    "ZigprepError",
    "lookup_target",
    "prepare_toolchain",
    "require_target",
]
