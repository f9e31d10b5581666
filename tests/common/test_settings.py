from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from common.env import env_bool, env_int, env_str


@pytest.fixture()
def restore_settings() -> Iterator[None]:
    yield
    settings.reload_from_env()


def test_env_helpers_parse_and_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GV_TEST_INT", "12")
    monkeypatch.setenv("GV_TEST_BAD_INT", "x")
    monkeypatch.setenv("GV_TEST_BOOL", "off")
    assert env_int("GV_TEST_INT", 1) == 12
    assert env_int("GV_TEST_INT", 1, min_value=20) == 20
    assert env_int("GV_TEST_BAD_INT", 3) == 3
    assert env_bool("GV_TEST_BOOL", True) is False
    assert env_bool("GV_TEST_MISSING", True) is True
    assert env_str("GV_TEST_MISSING", "INFO") == "INFO"


def test_reload_from_env(monkeypatch: pytest.MonkeyPatch, restore_settings: None) -> None:
    monkeypatch.setenv("GV_EARLY_TERMINATION", "0")
    monkeypatch.setenv("GV_RANDOM_COLOR_BUCKETS", "-5")
    monkeypatch.setenv("GV_LOG_LEVEL", "debug")
    settings.reload_from_env()
    s = settings.get()
    assert s.EARLY_TERMINATION is False
    assert s.RANDOM_COLOR_BUCKETS == 1
    assert s.LOG_LEVEL == "debug"
