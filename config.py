"""
config.py
=========
Central configuration module for Detective Quest: The Mansion Case.

All tunable constants for the data-structure engine and the logging setup
live here so they can be adjusted without touching game logic.

Usage:
    from config import GAME_CONFIG, LOG_CONFIG
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Game parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GameConfig:
    """
    Engine sizing and verdict rules.

    Attributes:
        hash_buckets: Number of buckets in the Suspect Index. Kept small on
                      purpose: the dataset is tiny and collisions are
                      resolved by chaining.
        min_clues:    Minimum number of corroborating clues required for an
                      accusation to succeed.
    """
    hash_buckets: int = 10
    min_clues:    int = 2


# ---------------------------------------------------------------------------
# Logging parameters
# ---------------------------------------------------------------------------

LOG_LEVEL_ENV_VAR = "DETECTIVE_QUEST_LOG_LEVEL"


@dataclass(frozen=True)
class LogConfig:
    """
    Settings passed to logging.basicConfig() by the entry points.

    Attributes:
        level:   Default level name; overridden by DETECTIVE_QUEST_LOG_LEVEL.
        format:  Record format shared by the CLI and the Streamlit app.
        datefmt: Timestamp format.
    """
    level:   str = "WARNING"
    format:  str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    def resolved_level(self) -> int:
        """
        Return the numeric log level, honouring the environment override.

        Unknown level names fall back to the configured default rather than
        failing at start-up.
        """
        name  = os.environ.get(LOG_LEVEL_ENV_VAR, self.level).upper()
        level = logging.getLevelName(name)
        if isinstance(level, int):
            return level
        return logging.getLevelName(self.level.upper())


# ---------------------------------------------------------------------------
# Singleton instances (import-ready)
# ---------------------------------------------------------------------------

GAME_CONFIG = GameConfig()
LOG_CONFIG  = LogConfig()


def configure_logging() -> None:
    """Configure the root logger once, from an entry point only."""
    logging.basicConfig(
        level=LOG_CONFIG.resolved_level(),
        format=LOG_CONFIG.format,
        datefmt=LOG_CONFIG.datefmt,
    )
