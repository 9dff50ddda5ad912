"""Build-step usage: prepare the toolchain from the invoking build's environment."""

import sys

from zigprep import BuildConfig, ZigprepError, prepare_toolchain
from zigprep.config import emit_rerun_directives


def build() -> int:
    emit_rerun_directives()
    try:
        result = prepare_toolchain(BuildConfig.from_env())
    except ZigprepError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"zig toolchain: {result.outcome}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(build())
