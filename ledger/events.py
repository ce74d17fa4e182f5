"""Event schema and JSONL logging utilities."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from time import time
from typing import Any, Iterable, Mapping

from .serialize import json_dumps, to_serializable


class EventType(str, Enum):
    """Standard event types emitted while executing transactions."""

    CONTRACT_EVENT = "contract_event"
    STX_TRANSFER = "stx_transfer"


@dataclass(frozen=True)
class LedgerEvent:
    """Single event emitted by a committed transaction."""

    event_type: EventType
    tx_id: str
    block_height: int
    timestamp_ms: int
    payload: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        """Return JSON-serializable event data."""
        return {
            "event_type": self.event_type.value,
            "tx_id": self.tx_id,
            "block_height": self.block_height,
            "timestamp_ms": self.timestamp_ms,
            "payload": to_serializable(self.payload),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LedgerEvent":
        """Build an event from a dictionary payload."""
        return cls(
            event_type=EventType(str(data["event_type"])),
            tx_id=str(data["tx_id"]),
            block_height=int(data["block_height"]),
            timestamp_ms=int(data["timestamp_ms"]),
            payload=dict(data.get("payload", {})),
        )

    @classmethod
    def create(cls, event_type: EventType, tx_id: str, block_height: int, payload: dict[str, Any]) -> "LedgerEvent":
        """Construct an event with the current wall-clock timestamp."""
        return cls(
            event_type=event_type,
            tx_id=tx_id,
            block_height=block_height,
            timestamp_ms=int(time() * 1000),
            payload=payload,
        )


def append_jsonl(path: str | Path, events: Iterable[LedgerEvent]) -> None:
    """Append events as JSONL lines to an existing (or new) log file."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("a", encoding="utf-8") as handle:
        for event in events:
            handle.write(json_dumps(event.to_dict()))
            handle.write("\n")


def read_jsonl(path: str | Path) -> list[LedgerEvent]:
    """Load events previously written with write_jsonl/append_jsonl."""
    events: list[LedgerEvent] = []
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        if line.strip():
            events.append(LedgerEvent.from_dict(json.loads(line)))
    return events
