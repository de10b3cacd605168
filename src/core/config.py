"""Engine configuration.

Settings are read from environment variables prefixed with VARIANT_CHESS_ (or from a .env.variant_chess file).
Every field has a default, so the engine works without any configuration.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.shared_types import PieceKind
from src.engine.board import STANDARD_LAYOUT, Board


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="VARIANT_CHESS_",
        env_file=".env.variant_chess",
        env_file_encoding="utf-8",
    )

    # Board the service hands out for a new game (see Board.from_layout for the format)
    starting_layout: str = STANDARD_LAYOUT

    # Kind whose safety the check detector monitors
    leader_kind: str = PieceKind.HERO.value

    # Kind a pawn turns into on the far rank
    promotion_kind: str = PieceKind.QUEEN.value

    @field_validator("starting_layout")
    @classmethod
    def validate_starting_layout(cls, value: str) -> str:
        # InvalidLayoutError is a ValueError: pydantic reports it as a ValidationError
        Board.from_layout(value)
        return value

    @field_validator("leader_kind", "promotion_kind")
    @classmethod
    def validate_kind(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("piece kind must not be empty")
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
