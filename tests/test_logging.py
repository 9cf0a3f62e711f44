from __future__ import annotations

import logging

import pytest

from mind_forge.__main__ import LOG_LEVEL_ENV, configure_logging
from mind_forge.session import new_session


def test_promotion_is_logged_at_info(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="mind_forge.session")
    s = new_session()
    for _ in range(3):
        s = s.record_result(score=100, success=True)

    messages = [r.getMessage() for r in caplog.records if r.name == "mind_forge.session"]
    assert messages == ["tier beginner -> intermediate after 3 successes"]


def test_no_tier_change_logs_nothing(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="mind_forge.session")
    new_session().record_result(score=10, success=False)
    assert not [r for r in caplog.records if r.name == "mind_forge.session"]


def _capture_basic_config(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, object]]:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    return calls


def test_configure_logging_falls_back_to_warning_on_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _capture_basic_config(monkeypatch)
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")

    configure_logging()

    assert len(calls) == 1
    assert calls[0]["level"] == logging.WARNING


def test_configure_logging_honours_env_level(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _capture_basic_config(monkeypatch)
    monkeypatch.setenv(LOG_LEVEL_ENV, " debug ")

    configure_logging()

    assert calls[0]["level"] == logging.DEBUG
