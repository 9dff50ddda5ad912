"""Documentation build: lay out placeholder artifacts without fetching anything."""

import sys
from pathlib import Path

from zigprep import BuildConfig, prepare_toolchain


def docs_build(out_dir: Path) -> Path | None:
    config = BuildConfig(out_dir=out_dir, docs_only=True)
    result = prepare_toolchain(config)
    print(f"placeholder toolchain: {result.binary_path}", file=sys.stderr)
    return result.binary_path


if __name__ == "__main__":
    docs_build(Path("target") / "docs-out")
