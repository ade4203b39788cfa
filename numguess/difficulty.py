"""
Difficulty selection.

Presets:
  1) easy   -> 1..50,  12 attempts
  2) normal -> 1..100, 10 attempts
  3) hard   -> 1..500,  8 attempts
  4) custom -> player types min, max and attempts
"""

from typing import Dict, Optional

from .console import GameIO
from .schemas import RoundConfig
from .types import Tier

PRESETS: Dict[str, RoundConfig] = {
    "easy": RoundConfig(min_value=1, max_value=50, max_attempts=12, label="Easy"),
    "normal": RoundConfig(min_value=1, max_value=100, max_attempts=10, label="Normal"),
    "hard": RoundConfig(min_value=1, max_value=500, max_attempts=8, label="Hard"),
}

MENU_CHOICES: Dict[str, Tier] = {"1": "easy", "2": "normal", "3": "hard", "4": "custom"}

MENU = (
    "\nChoose a difficulty:\n"
    "  1) Easy    (1-50, 12 attempts)\n"
    "  2) Normal  (1-100, 10 attempts)\n"
    "  3) Hard    (1-500, 8 attempts)\n"
    "  4) Custom  (you pick the range and attempts)"
)


def parse_int(text: str) -> Optional[int]:
    """Plain decimal integer with an optional sign; None for anything else."""
    text = text.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    # int() alone would also take "1_000" and non-ASCII digits
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(text)


def preset(tier: Tier) -> RoundConfig:
    if tier not in PRESETS:
        raise ValueError(f"No preset for tier {tier!r}.")
    return PRESETS[tier]


def custom_label(min_value: int, max_value: int, max_attempts: int) -> str:
    return f"Custom ({min_value}-{max_value}, {max_attempts} attempts)"


def ask_custom(io: GameIO) -> RoundConfig:
    # Keep asking for the full triple until it is usable; no retry limit
    while True:
        min_value = parse_int(io.ask("Minimum value (integer): "))
        max_value = parse_int(io.ask("Maximum value (integer, > minimum): "))
        max_attempts = parse_int(io.ask("Maximum attempts (integer): "))

        if (
            min_value is not None
            and max_value is not None
            and max_attempts is not None
            and max_value > min_value
            and max_attempts > 0
        ):
            return RoundConfig(
                min_value=min_value,
                max_value=max_value,
                max_attempts=max_attempts,
                label=custom_label(min_value, max_value, max_attempts),
            )
        io.say("Invalid values. Try again.")


def select_difficulty(io: GameIO) -> RoundConfig:
    io.say(MENU)
    while True:
        choice = io.ask("Option [1-4]: ")
        tier = MENU_CHOICES.get(choice.strip())
        if tier is not None:
            break
        io.say("Invalid option. Enter 1, 2, 3 or 4.")

    if tier == "custom":
        return ask_custom(io)
    return preset(tier)
