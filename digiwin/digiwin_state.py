"""Stored records and enums for DigiWin games."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Self

from ledger.state import Record


class GameStatus(str, Enum):
    """Lifecycle of a game. ACTIVE -> WON happens at most once."""

    ACTIVE = "active"
    WON = "won"


@dataclass(frozen=True)
class Undecided:
    """No winner yet."""


@dataclass(frozen=True)
class Decided:
    """Winner recorded at the moment the game was won."""

    account: str


Winner = Undecided | Decided

UNDECIDED = Undecided()


def winner_account(winner: Winner) -> str | None:
    """Return the winning account, or None while undecided."""
    if isinstance(winner, Decided):
        return winner.account
    if isinstance(winner, Undecided):
        return None
    raise TypeError(f"Unexpected winner value: {winner!r}")


@dataclass(frozen=True)
class Game(Record):
    """Immutable game record; updates produce a new record via ``replace``."""

    game_id: int
    creator: str
    secret_number: int
    min_number: int
    max_number: int
    entry_fee: int
    prize_pool: int = 0
    guess_count: int = 0
    winner: Winner = UNDECIDED
    status: GameStatus = GameStatus.ACTIVE
    created_at: int = 0

    def __post_init__(self) -> None:
        if not self.min_number <= self.secret_number <= self.max_number:
            raise ValueError("Game.secret_number must lie within [min_number, max_number].")
        if self.status is GameStatus.ACTIVE and not isinstance(self.winner, Undecided):
            raise ValueError("An active game cannot have a decided winner.")
        if self.status is GameStatus.WON:
            if not isinstance(self.winner, Decided):
                raise ValueError("A won game must record its winner.")
            if self.prize_pool != 0:
                raise ValueError("A won game must have an empty prize pool.")

    @property
    def is_active(self) -> bool:
        return self.status is GameStatus.ACTIVE

    def contains(self, number: int) -> bool:
        """Return whether ``number`` lies inside this game's range."""
        return self.min_number <= number <= self.max_number

    def to_dict(self) -> dict[str, Any]:
        return {
            "game_id": self.game_id,
            "creator": self.creator,
            "secret_number": self.secret_number,
            "min_number": self.min_number,
            "max_number": self.max_number,
            "entry_fee": self.entry_fee,
            "prize_pool": self.prize_pool,
            "guess_count": self.guess_count,
            "winner": winner_account(self.winner),
            "status": self.status.value,
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        account = data.get("winner")
        return cls(
            game_id=int(data["game_id"]),
            creator=str(data["creator"]),
            secret_number=int(data["secret_number"]),
            min_number=int(data["min_number"]),
            max_number=int(data["max_number"]),
            entry_fee=int(data["entry_fee"]),
            prize_pool=int(data.get("prize_pool", 0)),
            guess_count=int(data.get("guess_count", 0)),
            winner=UNDECIDED if account is None else Decided(str(account)),
            status=GameStatus(str(data.get("status", GameStatus.ACTIVE.value))),
            created_at=int(data.get("created_at", 0)),
        )


@dataclass(frozen=True)
class GuessAttempt(Record):
    """One accepted guess as recorded in a game's log."""

    player: str
    guess: int
    timestamp: int
