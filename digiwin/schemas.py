"""Pydantic argument schemas for DigiWin entry points."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

UINT_MAX = 2**128 - 1

UInt = Annotated[int, Field(ge=0, le=UINT_MAX)]


class _CallArgs(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)


class CreateGameArgs(_CallArgs):
    """Arguments for create-game."""

    min_number: UInt
    max_number: UInt
    entry_fee: UInt


class GuessArgs(_CallArgs):
    """Arguments for guess."""

    game_id: UInt
    number: UInt


class GameIdArgs(_CallArgs):
    game_id: UInt


class PlayerGuessesArgs(_CallArgs):
    game_id: UInt
    player: Annotated[str, Field(min_length=1)]
