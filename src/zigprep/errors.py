"""Typed error model with stable, machine-readable error codes."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum


class ErrorCode(StrEnum):
    """Stable error identifiers, one per failure category."""

    CONFIGURATION = "E_CONFIGURATION"
    FETCH = "E_FETCH"
    ARCHIVE = "E_ARCHIVE"
    FILESYSTEM = "E_FILESYSTEM"
    BUILD = "E_BUILD"


class ZigprepError(Exception):
    """Base error class that carries code, optional hint, and context."""

    code: str
    hint: str | None
    context: Mapping[str, str]

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code.value
        self.hint = hint
        self.context = dict(context or {})

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        if self.context:
            for k, v in self.context.items():
                if v:
                    parts.append(f"  {k}: {v}")
        return "\n".join(parts)

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "code": self.code,
            "message": str(self),
            "context": dict(self.context),
        }
        if self.hint is not None:
            payload["hint"] = self.hint
        return payload


class ConfigurationError(ZigprepError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.CONFIGURATION, hint=hint, context=context)


class UnsupportedTargetError(ConfigurationError):
    """Raised when a target triple has no entry in the mapping table."""

    def __init__(self, triple: str, *, supported: tuple[str, ...] = ()) -> None:
        super().__init__(
            f"unmapped target: {triple}",
            hint="Add an entry to zigprep.targets.TARGETS to support this triple.",
            context={"target": triple, "supported": ", ".join(supported)},
        )
        self.triple = triple


class FetchError(ZigprepError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.FETCH, hint=hint, context=context)


class ArchiveError(ZigprepError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.ARCHIVE, hint=hint, context=context)


class FilesystemError(ZigprepError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.FILESYSTEM, hint=hint, context=context)


class BuildError(ZigprepError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.BUILD, hint=hint, context=context)


__all__ = [
    "ArchiveError",
    "BuildError",
    "ConfigurationError",
    "ErrorCode",
    "FetchError",
    "FilesystemError",
    "UnsupportedTargetError",
    "ZigprepError",
]
