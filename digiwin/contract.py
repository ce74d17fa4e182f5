"""DigiWin contract: public and read-only entry points."""

from __future__ import annotations

from ledger.runtime import Contract, TxContext
from ledger.store import Store

from .config import DigiWinConfig
from .digiwin_state import Game, GuessAttempt
from .guess_ledger import GuessLedger
from .payout import PayoutEngine
from .processor import GuessOutcome, GuessProcessor
from .queries import QueryService
from .randomness import RandomnessDeriver, RandomnessSource
from .registry import GameRegistry
from .schemas import CreateGameArgs, GameIdArgs, GuessArgs, PlayerGuessesArgs


class DigiWinContract(Contract):
    """Number-guessing game where the first correct guess takes the pool."""

    public_functions = frozenset({"create_game", "guess"})
    read_only_functions = frozenset(
        {
            "get_game_info",
            "get_game_winner",
            "get_guess_count",
            "get_prize_pool",
            "get_total_games",
            "is_game_active",
            "get_player_guesses",
            "get_game_guesses",
        }
    )

    def __init__(
        self,
        principal: str,
        store: Store,
        config: DigiWinConfig | None = None,
        randomness: RandomnessSource | None = None,
    ):
        super().__init__(principal, store)
        self.config = config or DigiWinConfig()
        self.registry = GameRegistry(store, RandomnessDeriver(randomness))
        self.guess_ledger = GuessLedger(store, self.config.player_guess_limit, self.config.game_guess_limit)
        self.payout = PayoutEngine(custody=principal)
        self.processor = GuessProcessor(self.registry, self.guess_ledger, self.payout)
        self.queries = QueryService(self.registry, self.guess_ledger)

    def create_game(self, ctx: TxContext, min_number: int, max_number: int, entry_fee: int) -> int:
        args = CreateGameArgs(min_number=min_number, max_number=max_number, entry_fee=entry_fee)
        game_id = self.registry.create(ctx, args.min_number, args.max_number, args.entry_fee)
        ctx.emit(
            {
                "event": "game-created",
                "game-id": game_id,
                "creator": ctx.sender,
                "min": args.min_number,
                "max": args.max_number,
                "entry-fee": args.entry_fee,
            }
        )
        return game_id

    def guess(self, ctx: TxContext, game_id: int, number: int) -> bool:
        """Return True when this guess won the game."""
        args = GuessArgs(game_id=game_id, number=number)
        return self.processor.guess(ctx, args.game_id, args.number) is GuessOutcome.WON

    def get_game_info(self, game_id: int) -> Game | None:
        return self.queries.get_game_info(GameIdArgs(game_id=game_id).game_id)

    def get_game_winner(self, game_id: int) -> str | None:
        return self.queries.get_game_winner(GameIdArgs(game_id=game_id).game_id)

    def get_guess_count(self, game_id: int) -> int | None:
        return self.queries.get_guess_count(GameIdArgs(game_id=game_id).game_id)

    def get_prize_pool(self, game_id: int) -> int | None:
        return self.queries.get_prize_pool(GameIdArgs(game_id=game_id).game_id)

    def get_total_games(self) -> int:
        return self.queries.get_total_games()

    def is_game_active(self, game_id: int) -> bool:
        """Raises GameNotFoundError for unknown ids, unlike the other lookups."""
        return self.queries.is_game_active(GameIdArgs(game_id=game_id).game_id)

    def get_player_guesses(self, game_id: int, player: str) -> tuple[int, ...]:
        args = PlayerGuessesArgs(game_id=game_id, player=player)
        return self.queries.get_player_guesses(args.game_id, args.player)

    def get_game_guesses(self, game_id: int) -> tuple[GuessAttempt, ...]:
        return self.queries.get_game_guesses(GameIdArgs(game_id=game_id).game_id)
