"""Unit tests for deterministic phase logging."""

from __future__ import annotations

import io

from limace.telemetry.logger import RunLogger


def test_run_logger_emits_sorted_context_tokens() -> None:
    """Stage events should render level, stage, event and sorted context."""

    sink = io.StringIO()
    run_logger = RunLogger(sink=sink)

    run_logger.log_stage_start("slugify", count=2)
    run_logger.log_stage_complete("config", source="yaml", extra="a b")

    lines = sink.getvalue().splitlines()
    assert lines == [
        "[phase] level=INFO stage=slugify event=start count=2",
        "[phase] level=INFO stage=config event=complete extra=a_b source=yaml",
    ]


def test_run_logger_failure_reports_error_type_only() -> None:
    """Failure events should carry the exception type without payload details."""

    sink = io.StringIO()
    RunLogger(sink=sink).log_stage_failure("config", "CommandStageError")

    assert sink.getvalue() == (
        "[phase] level=ERROR stage=config event=failure error_type=CommandStageError\n"
    )


def test_disabled_run_logger_writes_nothing() -> None:
    """A disabled logger should drop every event."""

    sink = io.StringIO()
    run_logger = RunLogger(sink=sink, enabled=False)

    run_logger.log_stage_start("slugify")
    run_logger.log_stage_failure("slugify", "RuntimeError")

    assert sink.getvalue() == ""
