"""
Session controller: the read-prompt-respond loop.

One round goes
  SelectingDifficulty -> AwaitingGuess -> won | exhausted | exit
and hands a RoundResult to the score store. The store is passed in; nothing
here is module-level state.
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Optional

from .console import GameIO
from .difficulty import parse_int, select_difficulty
from .engine import draw_secret, format_time, hints_for, is_win
from .leaderboard import render
from .schemas import RoundConfig, RoundResult
from .store import ScoreStore
from .types import SaveStatus

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Anonymous"


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class RoundState:
    secret: int
    attempts_used: int = 0
    start_time: float = field(default_factory=time.perf_counter)


class GameSession:
    def __init__(
        self,
        io: GameIO,
        store: ScoreStore,
        player_name: str = DEFAULT_NAME,
        top_n: int = 5,
        exit_command: str = "quit",
        secret_source: Optional[Callable[[int, int], int]] = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.io = io
        self.store = store
        self.player_name = player_name
        self.top_n = top_n
        self.exit_command = exit_command.lower()
        # None -> engine.draw_secret, looked up per round so tests can patch it
        self.secret_source = secret_source
        self.clock = clock

    # --- One round ---

    def _new_state(self, config: RoundConfig) -> RoundState:
        source = self.secret_source or draw_secret
        secret = source(config.min_value, config.max_value)
        return RoundState(secret=secret, start_time=self.clock())

    def _result(self, config: RoundConfig, state: RoundState, outcome, elapsed_ms: int = 0) -> RoundResult:
        return RoundResult(
            outcome=outcome,
            attempts=state.attempts_used,
            elapsed_ms=elapsed_ms,
            name=self.player_name,
            difficulty=config.label,
            secret=state.secret,
        )

    def play_round(self, config: Optional[RoundConfig] = None) -> RoundResult:
        if config is None:
            config = select_difficulty(self.io)

        state = self._new_state(config)
        logger.debug("Round started: %s", config.label)

        self.io.say(
            f"\nI picked a number between {config.min_value} and {config.max_value}. "
            f"You have {config.max_attempts} attempts."
        )
        self.io.say(f'(Type "{self.exit_command}" at any time to leave the round.)')

        while state.attempts_used < config.max_attempts:
            remaining = config.max_attempts - state.attempts_used
            answer = self.io.ask(f"Guess ({remaining} left): ")

            if answer.strip().lower() == self.exit_command:
                self.io.say("Leaving the round...")
                return self._result(config, state, "exit")

            guess = parse_int(answer)
            if guess is None:
                self.io.say("Enter a valid number.")
                continue
            if guess < config.min_value or guess > config.max_value:
                self.io.say(f"Your guess must be between {config.min_value} and {config.max_value}.")
                continue

            state.attempts_used += 1

            if is_win(state.secret, guess):
                elapsed_ms = round((self.clock() - state.start_time) * 1000)
                self.io.say(f"\nCorrect! The number was {state.secret}.")
                self.io.say(f"Attempts: {state.attempts_used} | Time: {format_time(elapsed_ms)}\n")
                return self._result(config, state, "won", elapsed_ms)

            for hint in hints_for(
                state.secret,
                guess,
                state.attempts_used,
                config.max_attempts,
                config.min_value,
                config.max_value,
            ):
                self.io.say(hint)

        self.io.say(f"\nYou are out of attempts. The number was {state.secret}.")
        return self._result(config, state, "exhausted")

    # --- Persistence policy ---

    def record_result(self, result: RoundResult) -> Optional[SaveStatus]:
        """
        Won rounds are saved, confirmed and followed by the leaderboard.
        Lost or abandoned rounds are saved quietly, but only if at least one
        guess was made. Returns None when nothing was handed to the store.
        """
        if not result.finished and result.attempts == 0:
            return None

        status = self.store.append(result.to_record(now_iso()))

        if status == "failed":
            self.io.warn(f"Warning: could not save the result to {self.store.path}.")

        if result.finished:
            if status == "saved":
                self.io.say(f"Result saved to {self.store.path.name}.")
            elif status == "disabled":
                self.io.say("Result NOT saved (saving disabled).")
            self.io.say(render(self.store.records, self.top_n))

        return status

    # --- Whole session ---

    def run(self) -> None:
        self.io.say("Number Guessing Game")
        name = self.io.ask(f'Player name (press Enter for "{DEFAULT_NAME}"): ')
        self.player_name = name or DEFAULT_NAME

        while True:
            result = self.play_round()
            self.record_result(result)

            again = self.io.ask("\nPlay again? (y/n): ")
            if not again.lower().startswith("y"):
                self.io.say("\nThanks for playing. See you next time.")
                return
