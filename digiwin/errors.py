"""DigiWin error codes and the exceptions that carry them."""

from __future__ import annotations

from enum import IntEnum

from ledger.errors import ContractError


class ErrorCode(IntEnum):
    """Stable numeric codes surfaced to callers."""

    UNAUTHORIZED = 100
    GAME_NOT_FOUND = 101
    GAME_ALREADY_WON = 102
    INVALID_GUESS = 103
    TRANSFER_FAILED = 104
    INVALID_PARAMS = 105
    GAME_EXPIRED = 106
    ALREADY_GUESSED = 107
    TOO_MANY_GUESSES = 108


class DigiWinError(ContractError):
    """Base class for DigiWin contract errors."""


class UnauthorizedError(DigiWinError):
    """Reserved; no current operation checks authorization."""

    code = ErrorCode.UNAUTHORIZED
    default_message = "Caller is not authorized"


class GameNotFoundError(DigiWinError):
    code = ErrorCode.GAME_NOT_FOUND
    default_message = "Game not found"


class GameAlreadyWonError(DigiWinError):
    code = ErrorCode.GAME_ALREADY_WON
    default_message = "Game has already been won"


class InvalidGuessError(DigiWinError):
    code = ErrorCode.INVALID_GUESS
    default_message = "Guess is outside the game range"


class TransferFailedError(DigiWinError):
    code = ErrorCode.TRANSFER_FAILED
    default_message = "Value transfer failed"


class InvalidParamsError(DigiWinError):
    code = ErrorCode.INVALID_PARAMS
    default_message = "Invalid game parameters"


class GameExpiredError(DigiWinError):
    """Reserved; games do not expire."""

    code = ErrorCode.GAME_EXPIRED
    default_message = "Game has expired"


class AlreadyGuessedError(DigiWinError):
    """Reserved; repeated guesses of the same value are allowed."""

    code = ErrorCode.ALREADY_GUESSED
    default_message = "Value already guessed"


class TooManyGuessesError(DigiWinError):
    code = ErrorCode.TOO_MANY_GUESSES
    default_message = "Guess history is full"

