"""Mapping from build target triples to zig-bootstrap target and mcpu names.

Zig's names for arch, os, abi and mcpu do not line up with the triples the
invoking build uses. Only the pairs listed in ``TARGETS`` are supported;
extending support means adding entries here.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from zigprep.errors import UnsupportedTargetError


@dataclass(frozen=True, slots=True)
class TargetMapping:
    zig_target: str
    mcpu: str

    @property
    def out_name(self) -> str:
        """Directory name zig-bootstrap uses under ``out/`` for this pair."""
        return f"zig-{self.zig_target}-{self.mcpu}"


TARGETS: Mapping[str, TargetMapping] = MappingProxyType(
    {
        "aarch64-apple-darwin": TargetMapping("aarch64-macos-none", "baseline"),
        "x86_64-unknown-linux-gnu": TargetMapping("x86_64-linux-gnu", "baseline"),
        "x86_64-pc-windows-gnu": TargetMapping("x86_64-windows-gnu", "baseline"),
    }
)


def lookup_target(triple: str) -> TargetMapping | None:
    return TARGETS.get(triple)


def require_target(triple: str) -> TargetMapping:
    mapping = lookup_target(triple)
    if mapping is None:
        raise UnsupportedTargetError(triple, supported=supported_targets())
    return mapping


def supported_targets() -> tuple[str, ...]:
    return tuple(sorted(TARGETS))


__all__ = ["TARGETS", "TargetMapping", "lookup_target", "require_target", "supported_targets"]
