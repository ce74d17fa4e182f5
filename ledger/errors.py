"""Structured exceptions raised by the ledger runtime and hosted contracts."""

from __future__ import annotations

from typing import Any, ClassVar


class LedgerError(Exception):
    """Base class for ledger-level exceptions."""

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {"type": self.__class__.__name__, "message": str(self)}


class ContractError(LedgerError):
    """Raised by contract code to abort the enclosing transaction with a code."""

    code: ClassVar[int] = 0
    default_message: ClassVar[str] = "Contract call aborted"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["code"] = self.code
        return payload


class TransferError(LedgerError):
    """Raised when a value transfer between accounts cannot complete."""

    INSUFFICIENT_BALANCE = 1
    SAME_PRINCIPAL = 2
    NON_POSITIVE_AMOUNT = 3

    def __init__(self, code: int, sender: str, recipient: str, amount: int):
        self.code = code
        self.sender = sender
        self.recipient = recipient
        self.amount = amount
        reasons = {
            self.INSUFFICIENT_BALANCE: "insufficient balance",
            self.SAME_PRINCIPAL: "sender and recipient are the same principal",
            self.NON_POSITIVE_AMOUNT: "amount must be positive",
        }
        super().__init__(f"Transfer of {amount} from {sender} to {recipient} failed: {reasons.get(code, 'unknown')}")

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload.update(
            {
                "code": self.code,
                "sender": self.sender,
                "recipient": self.recipient,
                "amount": self.amount,
            }
        )
        return payload
