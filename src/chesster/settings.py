"""Runtime configuration: defaults overlaid with ``CHESSTER_*`` variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from chesster.core.enums import Color

_ENV_PREFIX = "CHESSTER_"
_OPPONENT_VALUES: dict[str, Color | None] = {
    "white": Color.WHITE,
    "black": Color.BLACK,
    "none": None,
    "": None,
}


@dataclass
class GameSettings:
    """All user-configurable settings."""

    # Side played by the random-move opponent; None for two humans
    opponent_color: Color | None = None

    # Seed for the opponent's random source; None draws from the OS
    seed: int | None = None

    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GameSettings:
        """Build settings from ``CHESSTER_OPPONENT``, ``CHESSTER_SEED`` and
        ``CHESSTER_LOG_LEVEL``; unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        settings = cls()

        opponent = env.get(f"{_ENV_PREFIX}OPPONENT")
        if opponent is not None:
            key = opponent.strip().lower()
            if key not in _OPPONENT_VALUES:
                raise ValueError(f"Invalid {_ENV_PREFIX}OPPONENT: {opponent!r}")
            settings.opponent_color = _OPPONENT_VALUES[key]

        seed = env.get(f"{_ENV_PREFIX}SEED")
        if seed is not None and seed.strip():
            try:
                settings.seed = int(seed)
            except ValueError:
                raise ValueError(f"Invalid {_ENV_PREFIX}SEED: {seed!r}") from None

        level = env.get(f"{_ENV_PREFIX}LOG_LEVEL")
        if level is not None and level.strip():
            level = level.strip().upper()
            if not isinstance(logging.getLevelName(level), int):
                raise ValueError(f"Invalid {_ENV_PREFIX}LOG_LEVEL: {level!r}")
            settings.log_level = level

        return settings


def configure_logging(settings: GameSettings) -> None:
    """Install a basic root handler at the configured level."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
