"""Custody movements: entry fees in, prize pools out."""

from __future__ import annotations

import logging

from ledger.errors import TransferError
from ledger.runtime import TxContext

from .errors import TransferFailedError

logger = logging.getLogger(__name__)


class PayoutEngine:
    """Moves value between players and the contract's custody account."""

    def __init__(self, custody: str):
        self.custody = custody

    def collect(self, ctx: TxContext, amount: int, payer: str) -> None:
        """Take ``amount`` from payer into custody. Zero amounts move nothing."""
        if amount == 0:
            return
        try:
            ctx.transfer(amount, payer, self.custody)
        except TransferError as exc:
            raise TransferFailedError(f"Could not collect {amount} from {payer}: {exc}") from exc

    def settle(self, ctx: TxContext, amount: int, recipient: str) -> None:
        """Pay ``amount`` out of custody to the winner.

        Runs inside the guess transaction; if the transfer fails the whole
        guess is rolled back, so the game never shows as won without payment.
        """
        if amount == 0:
            return
        try:
            ctx.transfer(amount, self.custody, recipient)
        except TransferError as exc:
            raise TransferFailedError(f"Could not pay {amount} to {recipient}: {exc}") from exc
        logger.debug("Paid %d from %s to %s", amount, self.custody, recipient)
