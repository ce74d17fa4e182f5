"""Runtime configuration for the in-process ledger."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Self

from .env_utils import getenv_any, getenv_bool

DEFAULT_GENESIS_SEED = "digiwin-simnet"


@dataclass(frozen=True)
class LedgerConfig:
    """Runtime configuration for transaction execution."""

    genesis_seed: str = DEFAULT_GENESIS_SEED
    auto_mine: bool = True
    event_log_path: str | Path | None = None

    @classmethod
    def from_env(cls) -> Self:
        """Build config from DIGIWIN_* environment variables (and .env)."""
        return cls(
            genesis_seed=getenv_any("DIGIWIN_GENESIS_SEED", default=DEFAULT_GENESIS_SEED) or DEFAULT_GENESIS_SEED,
            auto_mine=getenv_bool("DIGIWIN_AUTO_MINE", default=True),
            event_log_path=getenv_any("DIGIWIN_EVENT_LOG"),
        )
