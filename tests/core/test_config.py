"""Unit tests for /src/core/config.py"""

from typing import Iterator

import pytest
from pydantic import ValidationError

from src.core.config import STANDARD_LAYOUT, Settings, get_settings


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """No VARIANT_CHESS_* variables from the surrounding environment, no cached settings"""
    for name in ("STARTING_LAYOUT", "LEADER_KIND", "PROMOTION_KIND"):
        monkeypatch.delenv(f"VARIANT_CHESS_{name}", raising=False)
    get_settings.cache_clear()
    try:
        yield monkeypatch
    finally:
        get_settings.cache_clear()


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    """Everything has a default, no configuration needed"""
    settings = Settings(_env_file=None)
    assert settings.starting_layout == STANDARD_LAYOUT
    assert settings.leader_kind == "H"
    assert settings.promotion_kind == "Q"


def test_environment_overrides(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("VARIANT_CHESS_PROMOTION_KIND", "W")
    clean_env.setenv("VARIANT_CHESS_STARTING_LAYOUT", "4h3/8/8/8/8/8/8/4H3")
    settings = Settings(_env_file=None)
    assert settings.promotion_kind == "W"
    assert settings.starting_layout == "4h3/8/8/8/8/8/8/4H3"
    assert settings.leader_kind == "H"


def test_empty_kind_is_rejected(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("VARIANT_CHESS_LEADER_KIND", "  ")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached(clean_env: pytest.MonkeyPatch) -> None:
    assert get_settings() is get_settings()


@pytest.mark.parametrize(
    "layout",
    ["8/8/8", "rlbqhblr/pppppppp/8/8/8/8/PPPPPPPP/RWBQHBW"],
)
def test_malformed_starting_layout_is_rejected(
    clean_env: pytest.MonkeyPatch, layout: str
) -> None:
    """A broken layout fails when the settings load, not at the first new board"""
    clean_env.setenv("VARIANT_CHESS_STARTING_LAYOUT", layout)
    with pytest.raises(ValidationError, match="starting_layout"):
        Settings(_env_file=None)
