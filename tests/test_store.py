"""Mini README: Tests for the pure transaction store.

These tests cover each transition, the no-op behaviour for missing ids and
unknown transitions, and the closed-store guard on ``TransactionStore``.
"""

from __future__ import annotations

import copy

from pocketledger.transactions import (
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


def test_set_all_replaces_list_and_clears_loading(sample_transactions) -> None:
    """The initial fetch fills the list and ends the loading phase."""

    state = apply(StoreState(), SetAll(sample_transactions))

    assert state.transactions == sample_transactions
    assert state.loading is False


def test_add_appends_to_end(sample_transactions, make_transaction) -> None:
    state = StoreState(transactions=sample_transactions, loading=False)
    added = make_transaction("d", -5.0)

    result = apply(state, Add(added))

    assert [t.id for t in result.transactions] == ["a", "b", "c", "d"]


def test_add_with_existing_id_keeps_ids_unique(sample_transactions, make_transaction) -> None:
    state = StoreState(transactions=sample_transactions)

    result = apply(state, Add(make_transaction("b", -99.0)))

    assert [t.id for t in result.transactions] == ["a", "b", "c"]
    assert result.find("b").amount == -99.0


def test_remove_filters_matching_id(sample_transactions) -> None:
    state = StoreState(transactions=sample_transactions)

    result = apply(state, Remove("b"))

    assert [t.id for t in result.transactions] == ["a", "c"]


def test_remove_missing_id_keeps_contents(sample_transactions) -> None:
    """Removing an unknown id is a no-op rather than an error."""

    state = StoreState(transactions=sample_transactions)

    result = apply(state, Remove("missing"))

    assert result.transactions == state.transactions


def test_replace_swaps_entry_and_clears_editing(sample_transactions, make_transaction) -> None:
    state = StoreState(transactions=sample_transactions, editing=sample_transactions[1])
    updated = make_transaction("b", -12.5, "Entertainment", "Cinema")

    result = apply(state, Replace(updated))

    assert result.transactions[1] == updated
    assert result.transactions[0] is sample_transactions[0]
    assert result.editing is None


def test_replace_missing_id_still_clears_editing(sample_transactions, make_transaction) -> None:
    """An update for an id no longer in the list only clears the edit slot."""

    state = StoreState(transactions=sample_transactions, editing=sample_transactions[0])

    result = apply(state, Replace(make_transaction("zzz", 1.0)))

    assert result.transactions == sample_transactions
    assert result.editing is None


def test_set_editing_and_error_leave_list_alone(sample_transactions) -> None:
    state = StoreState(transactions=sample_transactions)

    editing = apply(state, SetEditing(sample_transactions[2]))
    errored = apply(editing, SetError("Server Error"))

    assert editing.editing == sample_transactions[2]
    assert errored.error == "Server Error"
    assert errored.editing == sample_transactions[2]
    assert errored.transactions == sample_transactions


def test_error_slot_keeps_only_latest_message() -> None:
    state = apply(apply(StoreState(), SetError("first")), SetError("second"))

    assert state.error == "second"


def test_unknown_transition_returns_same_state(sample_transactions) -> None:
    state = StoreState(transactions=sample_transactions)

    assert apply(state, object()) is state


def test_apply_is_pure(sample_transactions, make_transaction) -> None:
    """Applying a transition never mutates the input and is repeatable."""

    state = StoreState(transactions=sample_transactions, editing=sample_transactions[0])
    snapshot = copy.deepcopy(state)
    transition = Replace(make_transaction("a", -1.0))

    first = apply(state, transition)
    second = apply(state, transition)

    assert state == snapshot
    assert first == second


def test_closed_store_drops_transitions(sample_transactions) -> None:
    store = TransactionStore()
    store.dispatch(SetAll(sample_transactions))
    store.close()

    store.dispatch(Remove("a"))
    store.dispatch(SetError("late"))

    assert store.is_live is False
    assert [t.id for t in store.state.transactions] == ["a", "b", "c"]
    assert store.state.error is None
