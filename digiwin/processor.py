"""Guess handling: validation, fee custody, history, win settlement."""

from __future__ import annotations

import logging
from enum import Enum

from ledger.runtime import TxContext

from .digiwin_state import Decided, GameStatus, GuessAttempt
from .errors import GameAlreadyWonError, InvalidGuessError
from .guess_ledger import GuessLedger
from .payout import PayoutEngine
from .registry import GameRegistry

logger = logging.getLogger(__name__)


class GuessOutcome(str, Enum):
    WON = "won"
    CONTINUE = "continue"


class GuessProcessor:
    """Applies one guess to a game.

    The steps below run inside a single ledger transaction. Any error raised
    part-way (range check, fee transfer, full history, payout) rolls back the
    fee, the history entries and the game record together.
    """

    def __init__(self, registry: GameRegistry, guesses: GuessLedger, payout: PayoutEngine):
        self.registry = registry
        self.guesses = guesses
        self.payout = payout

    def guess(self, ctx: TxContext, game_id: int, number: int) -> GuessOutcome:
        game = self.registry.require(game_id)
        if game.status is not GameStatus.ACTIVE:
            raise GameAlreadyWonError(f"Game {game_id} is already won")
        if not game.contains(number):
            raise InvalidGuessError(f"Guess {number} is outside [{game.min_number}, {game.max_number}]")

        player = ctx.sender
        self.payout.collect(ctx, game.entry_fee, player)
        self.guesses.record(game_id, GuessAttempt(player=player, guess=number, timestamp=ctx.block_height))
        ctx.emit({"event": "guess-made", "game-id": game_id, "player": player, "guess": number})

        if number != game.secret_number:
            self.registry.update(
                game,
                prize_pool=game.prize_pool + game.entry_fee,
                guess_count=game.guess_count + 1,
            )
            return GuessOutcome.CONTINUE

        final_pool = game.prize_pool + game.entry_fee
        self.payout.settle(ctx, final_pool, player)
        self.registry.update(
            game,
            prize_pool=0,
            guess_count=game.guess_count + 1,
            winner=Decided(player),
            status=GameStatus.WON,
        )
        ctx.emit({"event": "game-won", "game-id": game_id, "winner": player, "prize": final_pool})
        logger.info("Game %d won by %s, prize %d", game_id, player, final_pool)
        return GuessOutcome.WON
