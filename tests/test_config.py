from __future__ import annotations

import pytest

from stackcontrol.config import Settings, load_settings, resolve_seed


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("STACKCONTROL_SEED", "STACKCONTROL_LOG_LEVEL", "STACKCONTROL_LOAD_DOTENV"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    assert load_settings() == Settings(seed=None, log_level="WARNING")


def test_reads_seed_and_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STACKCONTROL_SEED", "42")
    monkeypatch.setenv("STACKCONTROL_LOG_LEVEL", "debug")
    assert load_settings() == Settings(seed=42, log_level="DEBUG")


@pytest.mark.parametrize("raw", ["abc", "-3"])
def test_bad_seed_raises(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("STACKCONTROL_SEED", raw)
    with pytest.raises(ValueError) as e:
        load_settings()
    assert "STACKCONTROL_SEED" in str(e.value)


def test_bad_log_level_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STACKCONTROL_LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError):
        load_settings()


def test_resolve_seed() -> None:
    assert resolve_seed(5) == 5
    drawn = resolve_seed(None)
    assert 1 <= drawn <= 2**31 - 1
