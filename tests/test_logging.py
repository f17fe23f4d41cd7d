from __future__ import annotations

import logging
from typing import Any

import pytest

from protokit.utils import logging as pk_logging
from protokit.utils.logging import OnceLatch, configure_logging, get_logger, log, trace_log


@pytest.fixture(autouse=True)
def _reset_trace() -> Any:
    yield
    configure_logging("INFO", trace=False)


def test_get_logger_namespace() -> None:
    assert get_logger().name == "protokit"
    assert get_logger("gen").name == "protokit.gen"
    assert get_logger("protokit.system").name == "protokit.system"


def test_get_logger_installs_no_handler(monkeypatch: Any) -> None:
    package_logger = logging.getLogger("protokit")
    monkeypatch.setattr(pk_logging, "_configured", False)
    monkeypatch.setattr(package_logger, "handlers", [])
    get_logger()
    get_logger("system")
    assert package_logger.handlers == []
    log("first use", 1)
    assert len(package_logger.handlers) == 1


def test_handler_installed_once() -> None:
    configure_logging("INFO")
    log("again", 1)
    get_logger("other")
    assert len(logging.getLogger("protokit").handlers) == 1


def test_log_format(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="protokit"):
        log("The value is", "1")
    assert "The value is:[1]" in caplog.messages


def test_trace_log_respects_flag(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="protokit"):
        trace_log("hidden", 1)
        trace_log("forced", 2, enabled=True)
        configure_logging("DEBUG", trace=True)
        trace_log("configured", 3)
    assert caplog.messages == ["forced:[2]", "configured:[3]"]


def test_trace_visible_at_info_level(caplog: pytest.LogCaptureFixture) -> None:
    configure_logging("INFO", trace=True)
    trace_log("visible", 1)
    assert caplog.messages == ["visible:[1]"]
    assert logging.getLogger("protokit.trace").level == logging.DEBUG


def test_trace_switched_off_resets_level(caplog: pytest.LogCaptureFixture) -> None:
    configure_logging("INFO", trace=True)
    configure_logging("INFO", trace=False)
    trace_log("hidden", 1)
    trace_log("forced", 2, enabled=True)
    assert caplog.messages == []
    assert logging.getLogger("protokit.trace").level == logging.NOTSET


def test_once_latch() -> None:
    latch = OnceLatch()
    assert latch.fired is False
    assert latch.claim() is True
    assert latch.claim() is False
    assert latch.fired is True


def test_log_once(monkeypatch: Any, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setattr(pk_logging, "_ONCE", OnceLatch())
    with caplog.at_level(logging.INFO, logger="protokit"):
        assert pk_logging.log_once("first", 1, 2) is True
        assert pk_logging.log_once("second", 3, 4) is False
    assert caplog.messages == ["first:[1] [2]"]
