"""Fetch the pinned zig-bootstrap release from a mirror and map a target by hand."""

from pathlib import Path

from zigprep import TOOLCHAIN_VERSION, require_target
from zigprep.fetch import SourceArchive, ensure_source_tree


def fetch_from_mirror(mirror: str, source_dir: Path) -> None:
    tree = ensure_source_tree(SourceArchive(version=TOOLCHAIN_VERSION, host=mirror), source_dir)
    mapping = require_target("x86_64-unknown-linux-gnu")
    print(f"{tree.path}: ./build {mapping.zig_target} {mapping.mcpu}")


if __name__ == "__main__":
    fetch_from_mirror("https://github.com", Path("zig-bootstrap"))
