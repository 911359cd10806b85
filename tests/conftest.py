"""Mini README: Shared fixtures for pocketledger tests.

Structure:
    * make_transaction - factory for ``Transaction`` records with defaults.
    * sample_transactions - two expenses and one income entry.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

import pytest

from pocketledger.transactions import Transaction


@pytest.fixture
def make_transaction() -> Callable[..., Transaction]:
    def factory(
        identifier: str,
        amount: float,
        category: Optional[str] = "Other",
        text: Optional[str] = None,
    ) -> Transaction:
        return Transaction(
            id=identifier, text=text or f"Entry {identifier}", amount=amount, category=category
        )

    return factory


@pytest.fixture
def sample_transactions(make_transaction) -> Tuple[Transaction, ...]:
    return (
        make_transaction("a", -20.0, "Food", "Groceries"),
        make_transaction("b", -10.0, "Food", "Lunch"),
        make_transaction("c", 50.0, "Salary", "Paycheck"),
    )
