"""
Tests for reporting sinks and the transcript logger.
"""

import logging

import pytest

from closure_alpha.core.sinks import CollectingSink, console_sink, logger_sink, null_sink, tee_sink
from closure_alpha.logging_utils import TRANSCRIPT_LOGGER, get_transcript_logger


def test_console_sink_prints(capsys):
    console_sink("Inner: 1")
    assert capsys.readouterr().out == "Inner: 1\n"


def test_null_sink_discards(capsys):
    null_sink("anything")
    assert capsys.readouterr().out == ""


def test_logger_sink_forwards(caplog):
    log = logging.getLogger("closure_alpha.test_sink")
    with caplog.at_level(logging.INFO, logger="closure_alpha.test_sink"):
        logger_sink(log)("Withdrew ₹200.")
    assert "Withdrew ₹200." in caplog.messages


def test_tee_sink_fans_out():
    a, b = CollectingSink(), CollectingSink()
    tee_sink(a, b)("line")
    assert a.lines == b.lines == ["line"]
    a.clear()
    assert a.lines == []


@pytest.fixture
def fresh_transcript_logger():
    log = logging.getLogger(TRANSCRIPT_LOGGER)
    saved = list(log.handlers)
    log.handlers.clear()
    yield log
    for h in log.handlers:
        h.close()
    log.handlers[:] = saved


def test_transcript_logger_writes_file(tmp_path, fresh_transcript_logger):
    log = get_transcript_logger(log_dir=tmp_path)
    assert log is fresh_transcript_logger
    assert log.propagate is False

    logger_sink(log)("Current Balance: ₹1300")
    for h in log.handlers:
        h.flush()

    content = (tmp_path / "closure_transcript.log").read_text(encoding="utf-8")
    assert "| Current Balance: ₹1300" in content

    # Second call reuses the configured handler
    assert get_transcript_logger(log_dir=tmp_path) is log
    assert len(log.handlers) == 1
