"""DigiWin package exports."""

from .config import DigiWinConfig
from .contract import DigiWinContract
from .digiwin_state import UNDECIDED, Decided, Game, GameStatus, GuessAttempt, Undecided, Winner, winner_account
from .errors import (
    AlreadyGuessedError,
    DigiWinError,
    ErrorCode,
    GameAlreadyWonError,
    GameExpiredError,
    GameNotFoundError,
    InvalidGuessError,
    InvalidParamsError,
    TooManyGuessesError,
    TransferFailedError,
    UnauthorizedError,
)
from .guess_ledger import GuessLedger, append_bounded
from .payout import PayoutEngine
from .processor import GuessOutcome, GuessProcessor
from .queries import QueryService
from .randomness import BlockHashRandomness, FixedSeedRandomness, RandomnessDeriver, RandomnessSource
from .registry import GameRegistry

__all__ = [
    "AlreadyGuessedError",
    "BlockHashRandomness",
    "Decided",
    "DigiWinConfig",
    "DigiWinContract",
    "DigiWinError",
    "ErrorCode",
    "FixedSeedRandomness",
    "Game",
    "GameAlreadyWonError",
    "GameExpiredError",
    "GameNotFoundError",
    "GameRegistry",
    "GameStatus",
    "GuessAttempt",
    "GuessLedger",
    "GuessOutcome",
    "GuessProcessor",
    "InvalidGuessError",
    "InvalidParamsError",
    "PayoutEngine",
    "QueryService",
    "RandomnessDeriver",
    "RandomnessSource",
    "TooManyGuessesError",
    "TransferFailedError",
    "UNDECIDED",
    "UnauthorizedError",
    "Undecided",
    "Winner",
    "append_bounded",
    "winner_account",
]
