"""Mini README: Client-side transaction handling.

This package holds the pure store, the asynchronous sync layer that talks to
the transactions API, the derived views and the edit-mode coordinator.
``LedgerSession`` wires them together for a single user session.
"""

from .editing import DraftBuffer, EditCoordinator, EditMode
from .errors import (
    NetworkError,
    ServerError,
    TransactionError,
    TransactionServiceError,
    ValidationError,
)
from .models import Category, Transaction
from .session import LedgerSession
from .store import (
    Add,
    Remove,
    Replace,
    SetAll,
    SetEditing,
    SetError,
    StoreState,
    TransactionStore,
    apply,
)
from .sync import TransactionSync

__all__ = [
    "Add",
    "Category",
    "DraftBuffer",
    "EditCoordinator",
    "EditMode",
    "LedgerSession",
    "NetworkError",
    "Remove",
    "Replace",
    "ServerError",
    "SetAll",
    "SetEditing",
    "SetError",
    "StoreState",
    "Transaction",
    "TransactionError",
    "TransactionServiceError",
    "TransactionStore",
    "TransactionSync",
    "ValidationError",
    "apply",
]
