"""Account balances and value transfer."""

from __future__ import annotations

from collections.abc import Mapping

from .errors import TransferError


class Bank:
    """Holds balances for string principals and moves value between them."""

    def __init__(self, balances: Mapping[str, int] | None = None):
        self._balances: dict[str, int] = {}
        for account, amount in (balances or {}).items():
            self.mint(account, amount)

    def balance(self, account: str) -> int:
        return self._balances.get(account, 0)

    def mint(self, account: str, amount: int) -> None:
        """Credit newly created value to an account."""
        if amount < 0:
            raise ValueError("mint amount must be >= 0.")
        self._balances[account] = self.balance(account) + amount

    def transfer(self, amount: int, sender: str, recipient: str) -> None:
        """Move ``amount`` from sender to recipient or raise TransferError."""
        if amount <= 0:
            raise TransferError(TransferError.NON_POSITIVE_AMOUNT, sender, recipient, amount)
        if sender == recipient:
            raise TransferError(TransferError.SAME_PRINCIPAL, sender, recipient, amount)
        if self.balance(sender) < amount:
            raise TransferError(TransferError.INSUFFICIENT_BALANCE, sender, recipient, amount)
        self._balances[sender] = self.balance(sender) - amount
        self._balances[recipient] = self.balance(recipient) + amount

    def snapshot(self) -> dict[str, int]:
        return dict(self._balances)

    def restore(self, snapshot: Mapping[str, int]) -> None:
        self._balances = dict(snapshot)
