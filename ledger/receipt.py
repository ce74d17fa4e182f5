"""Transaction receipts returned by the ledger runtime."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Self

from .events import LedgerEvent
from .serialize import to_serializable


@dataclass(frozen=True)
class TxReceipt:
    """Structured outcome of one public contract call."""

    tx_id: str
    sender: str
    function: str
    ok: bool
    block_height: int
    value: Any = None
    error_code: int | None = None
    error: dict[str, Any] | None = None
    events: tuple[LedgerEvent, ...] = field(default_factory=tuple)

    @classmethod
    def success(
        cls,
        *,
        tx_id: str,
        sender: str,
        function: str,
        block_height: int,
        value: Any,
        events: tuple[LedgerEvent, ...] = (),
    ) -> Self:
        """Build a receipt for a committed call."""
        return cls(
            tx_id=tx_id,
            sender=sender,
            function=function,
            ok=True,
            block_height=block_height,
            value=value,
            events=events,
        )

    @classmethod
    def failure(
        cls,
        *,
        tx_id: str,
        sender: str,
        function: str,
        block_height: int,
        error_code: int,
        error: dict[str, Any],
    ) -> Self:
        """Build a receipt for an aborted call. Aborted calls never carry events."""
        return cls(
            tx_id=tx_id,
            sender=sender,
            function=function,
            ok=False,
            block_height=block_height,
            error_code=error_code,
            error=error,
        )

    def unwrap(self) -> Any:
        """Return the committed value or raise when the call was aborted."""
        if not self.ok:
            raise ValueError(f"{self.function} aborted with code {self.error_code}: {self.error}")
        return self.value

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable receipt."""
        return {
            "tx_id": self.tx_id,
            "sender": self.sender,
            "function": self.function,
            "ok": self.ok,
            "block_height": self.block_height,
            "value": to_serializable(self.value),
            "error_code": self.error_code,
            "error": to_serializable(self.error),
            "events": [event.to_dict() for event in self.events],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Build a receipt from serialized data."""
        return cls(
            tx_id=str(data["tx_id"]),
            sender=str(data["sender"]),
            function=str(data["function"]),
            ok=bool(data["ok"]),
            block_height=int(data["block_height"]),
            value=data.get("value"),
            error_code=data.get("error_code"),
            error=data.get("error"),
            events=tuple(LedgerEvent.from_dict(event) for event in data.get("events", [])),
        )
