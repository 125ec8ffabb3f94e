"""Tests for logging configuration."""

import structlog

from canvas_studio.core.logging_config import LogContext, configure_logging, get_logger


def test_configure_and_log(capsys):
    configure_logging("DEBUG", json_logs=True)
    get_logger("canvas_studio.test").info("export_complete", target="html")
    err = capsys.readouterr().err
    assert "export_complete" in err
    configure_logging("WARNING")


def test_log_context_binds_and_unbinds():
    with LogContext(target="react"):
        assert structlog.contextvars.get_contextvars()["target"] == "react"
    assert "target" not in structlog.contextvars.get_contextvars()
