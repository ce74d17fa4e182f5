"""In-process ledger runtime: chain, bank, storage and serial transaction execution."""

from .bank import Bank
from .chain import Chain
from .config import LedgerConfig
from .errors import ContractError, LedgerError, TransferError
from .events import EventType, LedgerEvent
from .receipt import TxReceipt
from .runtime import Contract, Ledger, TxContext
from .state import Record
from .store import DataMap, DataVar, Store

__all__ = [
    "Bank",
    "Chain",
    "Contract",
    "ContractError",
    "DataMap",
    "DataVar",
    "EventType",
    "Ledger",
    "LedgerConfig",
    "LedgerError",
    "LedgerEvent",
    "Record",
    "Store",
    "TransferError",
    "TxContext",
    "TxReceipt",
]
