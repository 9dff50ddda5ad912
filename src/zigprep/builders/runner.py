"""Blocking subprocess execution with diagnostics routed away from stdout."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from zigprep.errors import BuildError


def logger() -> logging.Logger:
    """Returns the module level logger."""
    return logging.getLogger(__name__)


def run_command(
    command: Sequence[str],
    *,
    cwd: Path,
    stream: TextIO | None = None,
) -> None:
    """Run ``command`` in ``cwd`` and wait for it to exit.

    Standard input is closed. Standard output and standard error both go to
    ``stream`` (``sys.stderr`` by default), which must be backed by a real
    file descriptor.
    """
    out = stream if stream is not None else sys.stderr
    argv = [os.fspath(part) for part in command]
    cmdline = shlex.join(argv)
    logger().info("run: %s (cwd=%s)", cmdline, cwd)
    out.flush()
    try:
        completed = subprocess.run(
            argv,
            cwd=str(cwd),
            stdin=subprocess.DEVNULL,
            stdout=out,
            stderr=out,
            check=False,
        )
    except OSError as exc:
        raise BuildError(
            f"Build command `{cmdline}` could not be started.",
            hint="Make sure the source tree is complete and its build script is executable.",
            context={"command": cmdline, "cwd": str(cwd), "reason": str(exc)},
        ) from exc
    if completed.returncode != 0:
        raise BuildError(
            f"Build command `{cmdline}` failed with exit status {completed.returncode}.",
            hint="Check the build output above for details.",
            context={
                "command": cmdline,
                "cwd": str(cwd),
                "returncode": str(completed.returncode),
            },
        )
