"""
Prepare the zig toolchain for the invoking build.

Usage:
  zigprep [--source-dir DIR] [--archive-host URL] [--log-json PATH] [-v]
  zigprep --print-target <triple>

Reads DO_IT, DOCS_RS, TARGET, OUT_DIR, CARGO_CFG_WINDOWS and
CARGO_MANIFEST_DIR from the environment. Only build-system directives are
written to stdout; everything else goes to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from zigprep.config import DEFAULT_ARCHIVE_HOST, BuildConfig, emit_rerun_directives
from zigprep.errors import ZigprepError
from zigprep.observability import StructuredLogger
from zigprep.pipeline import prepare_toolchain
from zigprep.targets import require_target


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="zigprep", description="Fetch, build and stage the zig toolchain")
    p.add_argument("--source-dir", default=None, help="zig-bootstrap source tree (default: $CARGO_MANIFEST_DIR/zig-bootstrap)")
    p.add_argument("--archive-host", default=None, help=f"Host serving release archives (default: {DEFAULT_ARCHIVE_HOST})")
    p.add_argument("--log-json", default=None, help="Write stage records as JSON lines to this path")
    p.add_argument("--print-target", metavar="TRIPLE", default=None, help="Print the zig target and mcpu for TRIPLE and exit")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug records")
    return p.parse_args(argv[1:])


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="zigprep: %(message)s",
        stream=sys.stderr,
    )
    log = logging.getLogger("zigprep")

    if args.print_target:
        try:
            mapping = require_target(args.print_target)
        except ZigprepError as exc:
            log.error("%s", exc)
            return 1
        print(f"{mapping.zig_target} {mapping.mcpu}")
        return 0

    emit_rerun_directives()
    logger = StructuredLogger()
    config: BuildConfig | None = None
    try:
        config = BuildConfig.from_env()
        if args.source_dir:
            config = replace(config, source_dir=Path(args.source_dir))
        if args.archive_host:
            config = replace(config, archive_host=args.archive_host)
        prepare_toolchain(config, logger=logger)
    except ZigprepError as exc:
        log.error("%s", exc)
        return 1
    finally:
        # A closed gate must not touch the filesystem.
        if args.log_json and config is not None and config.enabled:
            logger.to_json_lines(args.log_json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
