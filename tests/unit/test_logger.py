"""Unit tests for deterministic run logging."""

from __future__ import annotations

import io

from seourl.telemetry.logger import RunLogger


def test_run_logger_emits_sorted_sanitized_context() -> None:
    """Events should render in a stable `key=value` format."""

    sink = io.StringIO()
    run_logger = RunLogger(sink=sink)

    run_logger.log_event("url", "complete", length=12, language="zh-cn", note="two words")

    assert sink.getvalue() == (
        "[slug] level=INFO stage=url event=complete "
        "language=zh-cn length=12 note=two_words\n"
    )


def test_run_logger_filters_debug_by_level() -> None:
    """Debug events should only appear when the sink level allows them."""

    info_sink = io.StringIO()
    RunLogger(sink=info_sink).log_debug("detect", "resolved", language="ru")
    assert info_sink.getvalue() == ""

    debug_sink = io.StringIO()
    RunLogger(sink=debug_sink, level="DEBUG").log_debug("detect", "resolved", language="ru")
    assert debug_sink.getvalue() == "[slug] level=DEBUG stage=detect event=resolved language=ru\n"


def test_run_logger_reports_warnings_and_failures() -> None:
    """Warning and failure events should carry their level and blank values as `none`."""

    sink = io.StringIO()
    run_logger = RunLogger(sink=sink)

    run_logger.log_warning("url", "empty", language="")
    run_logger.log_stage_failure("config", "CommandStageError")

    assert sink.getvalue().splitlines() == [
        "[slug] level=WARNING stage=url event=empty language=none",
        "[slug] level=ERROR stage=config event=failure error_type=CommandStageError",
    ]
