"""Helpers for standing up a local ledger with a deployed DigiWin contract."""

from __future__ import annotations

from collections.abc import Mapping

from ledger.config import LedgerConfig
from ledger.runtime import Ledger

from .config import DigiWinConfig
from .contract import DigiWinContract
from .randomness import RandomnessSource

DEPLOYER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
WALLET_1 = "ST1SJ3DTE5DN7X54YDH5D64R3BCB6A2AG2ZQ8YPD5"
WALLET_2 = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"
DEFAULT_BALANCE = 100_000_000_000_000


def deploy(
    *,
    ledger_config: LedgerConfig | None = None,
    contract_config: DigiWinConfig | None = None,
    randomness: RandomnessSource | None = None,
    balances: Mapping[str, int] | None = None,
    deployer: str = DEPLOYER,
) -> tuple[Ledger, DigiWinContract]:
    """Return a fresh ledger with funded accounts and a deployed contract."""
    funded = dict(balances) if balances is not None else {
        DEPLOYER: DEFAULT_BALANCE,
        WALLET_1: DEFAULT_BALANCE,
        WALLET_2: DEFAULT_BALANCE,
    }
    config = contract_config or DigiWinConfig()
    ledger = Ledger(ledger_config, balances=funded)
    contract = ledger.deploy(
        deployer,
        config.contract_name,
        lambda principal, store: DigiWinContract(principal, store, config=config, randomness=randomness),
    )
    return ledger, contract
