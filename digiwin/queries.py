"""Read-only projections over games and guess histories."""

from __future__ import annotations

from .digiwin_state import Game, GameStatus, GuessAttempt, winner_account
from .guess_ledger import GuessLedger
from .registry import GameRegistry


class QueryService:
    """Side-effect free lookups.

    Unknown game ids read as None (or an empty tuple) everywhere except
    ``is_game_active``, which raises GameNotFoundError.
    """

    def __init__(self, registry: GameRegistry, guesses: GuessLedger):
        self.registry = registry
        self.guesses = guesses

    def get_game_info(self, game_id: int) -> Game | None:
        return self.registry.get(game_id)

    def get_game_winner(self, game_id: int) -> str | None:
        game = self.registry.get(game_id)
        return None if game is None else winner_account(game.winner)

    def get_guess_count(self, game_id: int) -> int | None:
        game = self.registry.get(game_id)
        return None if game is None else game.guess_count

    def get_prize_pool(self, game_id: int) -> int | None:
        game = self.registry.get(game_id)
        return None if game is None else game.prize_pool

    def get_total_games(self) -> int:
        return self.registry.total()

    def is_game_active(self, game_id: int) -> bool:
        return self.registry.require(game_id).status is GameStatus.ACTIVE

    def get_player_guesses(self, game_id: int, player: str) -> tuple[int, ...]:
        return self.guesses.player_guesses(game_id, player)

    def get_game_guesses(self, game_id: int) -> tuple[GuessAttempt, ...]:
        return self.guesses.game_guesses(game_id)
