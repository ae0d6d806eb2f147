"""Tests for settings parsing."""

import pytest
from pydantic import ValidationError

from powgate.config import Settings


def test_cors_origins_from_comma_separated_string():
    s = Settings(cors_origins="https://a.example, https://b.example,")
    assert s.cors_origins == ["https://a.example", "https://b.example"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("POW_SIGNATURE_KEY", "from-env")
    monkeypatch.setenv("POW_DEFAULT_DIFFICULTY", "5")
    s = Settings()
    assert s.pow_signature_key == "from-env"
    assert s.pow_default_difficulty == 5


@pytest.mark.parametrize("difficulty", [0, 65])
def test_difficulty_bounds(difficulty):
    with pytest.raises(ValidationError):
        Settings(pow_default_difficulty=difficulty)
