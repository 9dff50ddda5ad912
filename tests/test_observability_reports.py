import json
import logging
from pathlib import Path

import pytest

from zigprep.observability import StructuredLogger


def test_records_carry_stage_operation_and_extra() -> None:
    logger = StructuredLogger()
    logger.log(operation="fetch_start", stage="acquire", message="Downloading.", extra={"url": "u"})
    logger.log(operation="build_start", stage="build", message="Building.")

    assert logger.records_for_stage("acquire") == [
        {
            "level": "info",
            "operation": "fetch_start",
            "stage": "acquire",
            "message": "Downloading.",
            "extra": {"url": "u"},
        },
    ]
    assert "extra" not in logger.records_for_stage("build")[0]


def test_records_are_mirrored_to_standard_logging(caplog: pytest.LogCaptureFixture) -> None:
    logger = StructuredLogger()
    with caplog.at_level(logging.DEBUG, logger="zigprep"):
        logger.log(operation="gate_closed", stage="gate", message="Nothing to do.", level="debug")
        logger.log(operation="relocate", stage="relocate", message="Moved.", level="warning")

    assert [(r.name, r.levelno, r.getMessage()) for r in caplog.records] == [
        ("zigprep", logging.DEBUG, "[gate] Nothing to do."),
        ("zigprep", logging.WARNING, "[relocate] Moved."),
    ]


def test_to_json_lines_writes_sorted_records(tmp_path: Path) -> None:
    logger = StructuredLogger()
    logger.log(operation="placeholder", stage="gate", message="Wrote placeholder.")

    path = logger.to_json_lines(tmp_path / "reports" / "records.jsonl")

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["operation"] == "placeholder"
    assert lines[0].startswith('{"level"')
