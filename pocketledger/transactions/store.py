"""Mini README: Pure state container for the transaction list.

Structure:
    * StoreState - immutable snapshot of transactions, edit slot, error, loading.
    * SetAll / Add / Remove / Replace / SetEditing / SetError - transitions.
    * apply - pure ``(state, transition) -> state`` function.
    * TransactionStore - holder that applies transitions while it is live.

``apply`` never mutates its input and never fails: unknown transitions return
the state unchanged. The holder performs no I/O; it is created once per
session and handed to every consumer explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from ..logging_utils import get_logger
from .models import Transaction

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class StoreState:
    """Snapshot of the client-side transaction state."""

    transactions: Tuple[Transaction, ...] = ()
    editing: Optional[Transaction] = None
    error: Optional[str] = None
    loading: bool = True

    def find(self, transaction_id: str) -> Optional[Transaction]:
        for transaction in self.transactions:
            if transaction.id == transaction_id:
                return transaction
        return None


@dataclass(frozen=True, slots=True)
class SetAll:
    transactions: Tuple[Transaction, ...]


@dataclass(frozen=True, slots=True)
class Add:
    transaction: Transaction


@dataclass(frozen=True, slots=True)
class Remove:
    transaction_id: str


@dataclass(frozen=True, slots=True)
class Replace:
    transaction: Transaction


@dataclass(frozen=True, slots=True)
class SetEditing:
    transaction: Optional[Transaction]


@dataclass(frozen=True, slots=True)
class SetError:
    message: str


Transition = Union[SetAll, Add, Remove, Replace, SetEditing, SetError]


def apply(state: StoreState, transition: object) -> StoreState:
    """Return the state produced by applying ``transition`` to ``state``."""

    if isinstance(transition, SetAll):
        return replace(state, transactions=tuple(transition.transactions), loading=False)
    if isinstance(transition, Add):
        added = transition.transaction
        if state.find(added.id) is not None:
            # ids stay unique: a re-delivered record overwrites in place
            return replace(
                state,
                transactions=tuple(
                    added if transaction.id == added.id else transaction
                    for transaction in state.transactions
                ),
            )
        return replace(state, transactions=state.transactions + (added,))
    if isinstance(transition, Remove):
        return replace(
            state,
            transactions=tuple(
                transaction
                for transaction in state.transactions
                if transaction.id != transition.transaction_id
            ),
        )
    if isinstance(transition, Replace):
        updated = transition.transaction
        return replace(
            state,
            transactions=tuple(
                updated if transaction.id == updated.id else transaction
                for transaction in state.transactions
            ),
            editing=None,
        )
    if isinstance(transition, SetEditing):
        return replace(state, editing=transition.transaction)
    if isinstance(transition, SetError):
        return replace(state, error=transition.message)
    return state


class TransactionStore:
    """Hold the current ``StoreState`` and apply transitions to it."""

    def __init__(self, state: Optional[StoreState] = None) -> None:
        self._state = state or StoreState()
        self._live = True

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def is_live(self) -> bool:
        return self._live

    def dispatch(self, transition: Transition) -> StoreState:
        """Apply a transition; silently dropped once the store is closed."""

        if not self._live:
            LOGGER.debug("Dropping %s for closed store", type(transition).__name__)
            return self._state
        self._state = apply(self._state, transition)
        LOGGER.debug(
            "Applied %s -> %s transactions", type(transition).__name__, len(self._state.transactions)
        )
        return self._state

    def close(self) -> None:
        """Mark the store as torn down so late responses are ignored."""

        self._live = False
