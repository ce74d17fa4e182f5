"""Game id allocation and the game record store."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from ledger.runtime import TxContext
from ledger.store import Store

from .digiwin_state import Game
from .errors import GameNotFoundError, InvalidParamsError
from .randomness import RandomnessDeriver

logger = logging.getLogger(__name__)


class GameRegistry:
    """Owns the monotonic game counter and every Game record."""

    def __init__(self, store: Store, deriver: RandomnessDeriver):
        self._games = store.define_map("games")
        self._next_id = store.define_var("game-counter", 0)
        self.deriver = deriver

    def create(self, ctx: TxContext, min_number: int, max_number: int, entry_fee: int) -> int:
        """Create an Active game and return its id. Ids start at 0."""
        if min_number > max_number:
            raise InvalidParamsError(f"min_number {min_number} is greater than max_number {max_number}")

        game_id = self._next_id.get()
        game = Game(
            game_id=game_id,
            creator=ctx.sender,
            secret_number=self.deriver.derive(ctx, min_number, max_number),
            min_number=min_number,
            max_number=max_number,
            entry_fee=entry_fee,
            created_at=ctx.block_height,
        )
        if not self._games.insert(game_id, game):
            raise RuntimeError(f"Game id {game_id} already allocated.")
        self._next_id.set(game_id + 1)
        logger.info("Created game %d [%d, %d] fee=%d by %s", game_id, min_number, max_number, entry_fee, ctx.sender)
        return game_id

    def get(self, game_id: int) -> Game | None:
        return self._games.get(game_id)

    def require(self, game_id: int) -> Game:
        """Return the game or raise GameNotFoundError."""
        game = self._games.get(game_id)
        if game is None:
            raise GameNotFoundError(f"Game {game_id} not found")
        return game

    def update(self, game: Game, **changes: Any) -> Game:
        """Store a modified copy of an existing game. Only the guess processor calls this."""
        if not self._games.contains(game.game_id):
            raise GameNotFoundError(f"Game {game.game_id} not found")
        updated = replace(game, **changes)
        self._games.set(game.game_id, updated)
        return updated

    def total(self) -> int:
        return self._next_id.get()
