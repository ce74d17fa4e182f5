"""Configuration for the DigiWin contract."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from ledger.env_utils import getenv_any, getenv_int

DEFAULT_CONTRACT_NAME = "digiwin"
PLAYER_GUESS_LIMIT = 10
GAME_GUESS_LIMIT = 1000


@dataclass(frozen=True)
class DigiWinConfig:
    """Deployment-time settings for a DigiWin contract."""

    contract_name: str = DEFAULT_CONTRACT_NAME
    player_guess_limit: int = PLAYER_GUESS_LIMIT
    game_guess_limit: int = GAME_GUESS_LIMIT

    def __post_init__(self) -> None:
        if not self.contract_name.strip():
            raise ValueError("contract_name must be non-empty.")
        if self.player_guess_limit < 1:
            raise ValueError("player_guess_limit must be >= 1.")
        if self.game_guess_limit < 1:
            raise ValueError("game_guess_limit must be >= 1.")

    @classmethod
    def from_env(cls) -> Self:
        """Build config from DIGIWIN_* environment variables (and .env)."""
        return cls(
            contract_name=getenv_any("DIGIWIN_CONTRACT_NAME", default=DEFAULT_CONTRACT_NAME) or DEFAULT_CONTRACT_NAME,
            player_guess_limit=getenv_int("DIGIWIN_PLAYER_GUESS_LIMIT", default=PLAYER_GUESS_LIMIT),
            game_guess_limit=getenv_int("DIGIWIN_GAME_GUESS_LIMIT", default=GAME_GUESS_LIMIT),
        )
