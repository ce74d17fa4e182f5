"""Record conventions for immutable, serializable stored values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Self

from .serialize import digest, to_serializable


@dataclass(frozen=True)
class Record:
    """Base immutable record kept in ledger storage."""

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {key: to_serializable(value) for key, value in vars(self).items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Build a record instance from serialized data."""
        return cls(**data)  # type: ignore[misc]

    def record_digest(self) -> str:
        """Return a deterministic digest for logging/replay."""
        return digest(self.to_dict())
