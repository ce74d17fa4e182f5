"""Bounded guess histories, per player and per game."""

from __future__ import annotations

from typing import TypeVar

from ledger.store import Store

from .digiwin_state import GuessAttempt
from .errors import TooManyGuessesError

T = TypeVar("T")


def append_bounded(items: tuple[T, ...], item: T, capacity: int) -> tuple[T, ...]:
    """Return ``items`` with ``item`` appended, refusing to grow past capacity."""
    if len(items) >= capacity:
        raise TooManyGuessesError(f"History already holds {capacity} entries")
    return items + (item,)


class GuessLedger:
    """Owns the per-(game, player) value history and the per-game attempt log.

    Full histories reject new entries; nothing is ever evicted.
    """

    def __init__(self, store: Store, player_limit: int, game_limit: int):
        self._player_guesses = store.define_map("player-guesses")
        self._game_guesses = store.define_map("game-guesses")
        self.player_limit = player_limit
        self.game_limit = game_limit

    def record(self, game_id: int, attempt: GuessAttempt) -> None:
        """Append an attempt to both histories, or neither."""
        player_key = (game_id, attempt.player)
        player_history = append_bounded(self.player_guesses(game_id, attempt.player), attempt.guess, self.player_limit)
        game_log = append_bounded(self.game_guesses(game_id), attempt, self.game_limit)
        self._player_guesses.set(player_key, player_history)
        self._game_guesses.set(game_id, game_log)

    def player_guesses(self, game_id: int, player: str) -> tuple[int, ...]:
        return self._player_guesses.get((game_id, player)) or ()

    def game_guesses(self, game_id: int) -> tuple[GuessAttempt, ...]:
        return self._game_guesses.get(game_id) or ()
