"""
Single place to:
- Load a local .env if present
- Read the game settings from env vars (NUMGUESS_*)

CLI flags override whatever comes from here.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# dev convenience; a real shell can just export the vars
load_dotenv()

TRUTHY = ("1", "true", "yes", "on")


def env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY


@dataclass
class Settings:
    scores_file: Path = Path("scores.json")
    no_save: bool = False
    top_n: int = 5
    exit_command: str = "quit"
    log_level: str = "WARNING"


def env_positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise RuntimeError(f"{name} must be a whole number, got {raw!r}.") from None
    if value < 1:
        raise RuntimeError(f"{name} must be at least 1, got {value}.")
    return value


def env_log_level(name: str, default: str) -> str:
    level = os.getenv(name, default).strip().upper()
    # getLevelName maps known names to their number, anything else to a string
    if not isinstance(logging.getLevelName(level), int):
        raise RuntimeError(f"{name} must be a logging level name such as DEBUG or WARNING, got {level!r}.")
    return level


def load_settings() -> Settings:
    """Raises RuntimeError when an env var holds a value the game cannot use."""
    return Settings(
        scores_file=Path(os.getenv("NUMGUESS_SCORES_FILE", "scores.json")),
        no_save=env_flag("NUMGUESS_NO_SAVE"),
        top_n=env_positive_int("NUMGUESS_TOP_N", 5),
        exit_command=os.getenv("NUMGUESS_EXIT_COMMAND", "quit").strip().lower(),
        log_level=env_log_level("NUMGUESS_LOG_LEVEL", "WARNING"),
    )
