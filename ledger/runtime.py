"""Serial transaction executor hosting contracts over shared ledger state."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, TypeVar

from .bank import Bank
from .chain import Chain
from .config import LedgerConfig
from .errors import ContractError, LedgerError
from .events import EventType, LedgerEvent, append_jsonl
from .receipt import TxReceipt
from .serialize import digest
from .store import Store

logger = logging.getLogger(__name__)

ContractT = TypeVar("ContractT", bound="Contract")


@dataclass
class TxContext:
    """Per-call view of the host environment handed to contract code."""

    tx_id: str
    sender: str
    contract: str
    block_height: int
    previous_block_hash: bytes
    bank: Bank
    pending_events: list[LedgerEvent] = field(default_factory=list)

    def emit(self, payload: dict[str, Any]) -> None:
        """Record a contract notification; it is published only if the call commits."""
        self.pending_events.append(
            LedgerEvent.create(
                event_type=EventType.CONTRACT_EVENT,
                tx_id=self.tx_id,
                block_height=self.block_height,
                payload={"contract": self.contract, **payload},
            )
        )

    def transfer(self, amount: int, sender: str, recipient: str) -> None:
        """Move value between accounts; raises TransferError on failure."""
        self.bank.transfer(amount, sender, recipient)
        self.pending_events.append(
            LedgerEvent.create(
                event_type=EventType.STX_TRANSFER,
                tx_id=self.tx_id,
                block_height=self.block_height,
                payload={"sender": sender, "recipient": recipient, "amount": amount},
            )
        )


class Contract:
    """Base class for contracts hosted by a Ledger.

    Public functions take a TxContext as their first argument and may mutate
    storage; read-only functions take only their own arguments.
    """

    public_functions: ClassVar[frozenset[str]] = frozenset()
    read_only_functions: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, principal: str, store: Store):
        self.principal = principal
        self.store = store


class Ledger:
    """Executes contract calls one at a time, each as an all-or-nothing unit."""

    def __init__(self, config: LedgerConfig | None = None, balances: Mapping[str, int] | None = None):
        self.config = config or LedgerConfig()
        self.chain = Chain(self.config.genesis_seed)
        self.bank = Bank(balances)
        self._stores: dict[str, Store] = {}
        self._events: list[LedgerEvent] = []
        self._nonce = 0
        self._lock = threading.RLock()

    @property
    def block_height(self) -> int:
        return self.chain.block_height

    @property
    def events(self) -> list[LedgerEvent]:
        """Committed events in commit order."""
        with self._lock:
            return list(self._events)

    def mine_block(self) -> int:
        with self._lock:
            return self.chain.mine_block()

    def deploy(self, deployer: str, name: str, factory: Callable[[str, Store], ContractT]) -> ContractT:
        """Instantiate a contract under the principal ``<deployer>.<name>``."""
        principal = f"{deployer}.{name}"
        with self._lock:
            if principal in self._stores:
                raise LedgerError(f"Contract already deployed: {principal}")
            store = Store()
            contract = factory(principal, store)
            self._stores[principal] = store
            logger.info("Deployed contract %s at height %d", principal, self.block_height)
            if self.config.auto_mine:
                self.chain.mine_block()
            return contract

    def call_public(self, sender: str, contract: Contract, function: str, *args: Any) -> TxReceipt:
        """Run a public function as one transaction and return its receipt."""
        if function not in contract.public_functions:
            raise ValueError(f"{contract.principal} has no public function {function!r}.")

        with self._lock:
            self._nonce += 1
            tx_id = "0x" + digest(
                {"sender": sender, "contract": contract.principal, "function": function, "args": list(args), "nonce": self._nonce}
            )
            ctx = TxContext(
                tx_id=tx_id,
                sender=sender,
                contract=contract.principal,
                block_height=self.chain.block_height,
                previous_block_hash=self.chain.previous_block_hash(),
                bank=self.bank,
            )
            bank_snapshot = self.bank.snapshot()
            store_snapshots = {name: store.snapshot() for name, store in self._stores.items()}

            try:
                value = getattr(contract, function)(ctx, *args)
            except ContractError as exc:
                self._rollback(bank_snapshot, store_snapshots)
                logger.info("Aborted %s.%s from %s: code %d (%s)", contract.principal, function, sender, exc.code, exc)
                receipt = TxReceipt.failure(
                    tx_id=tx_id,
                    sender=sender,
                    function=function,
                    block_height=ctx.block_height,
                    error_code=exc.code,
                    error=exc.to_dict(),
                )
            except Exception:
                self._rollback(bank_snapshot, store_snapshots)
                raise
            else:
                events = tuple(ctx.pending_events)
                self._commit(events)
                logger.debug("Committed %s.%s from %s (%d events)", contract.principal, function, sender, len(events))
                receipt = TxReceipt.success(
                    tx_id=tx_id,
                    sender=sender,
                    function=function,
                    block_height=ctx.block_height,
                    value=value,
                    events=events,
                )

            if self.config.auto_mine:
                self.chain.mine_block()
            return receipt

    def read(self, contract: Contract, function: str, *args: Any) -> Any:
        """Run a read-only function and return its value; errors propagate."""
        if function not in contract.read_only_functions:
            raise ValueError(f"{contract.principal} has no read-only function {function!r}.")
        with self._lock:
            return getattr(contract, function)(*args)

    def read_result(self, contract: Contract, function: str, *args: Any) -> TxReceipt:
        """Run a read-only function, reporting contract errors as a failure receipt."""
        with self._lock:
            tx_id = "0x" + digest({"contract": contract.principal, "function": function, "args": list(args), "read_only": True})
            try:
                value = self.read(contract, function, *args)
            except ContractError as exc:
                return TxReceipt.failure(
                    tx_id=tx_id,
                    sender=contract.principal,
                    function=function,
                    block_height=self.chain.block_height,
                    error_code=exc.code,
                    error=exc.to_dict(),
                )
            return TxReceipt.success(
                tx_id=tx_id,
                sender=contract.principal,
                function=function,
                block_height=self.chain.block_height,
                value=value,
            )

    def _rollback(self, bank_snapshot: dict[str, int], store_snapshots: dict[str, dict[str, dict[str, Any]]]) -> None:
        self.bank.restore(bank_snapshot)
        for name, snapshot in store_snapshots.items():
            self._stores[name].restore(snapshot)

    def _commit(self, events: tuple[LedgerEvent, ...]) -> None:
        self._events.extend(events)
        if self.config.event_log_path is not None and events:
            append_jsonl(self.config.event_log_path, events)
