"""Mini README: Tests for derived views and display helpers.

Structure:
    * headline figures for the documented scenarios and random lists.
    * category breakdown grouping, ordering and ``Other`` fallback.
    * history filtering and formatting helpers.
"""

from __future__ import annotations

import random
from datetime import datetime

import pytest

from pocketledger.transactions import Transaction
from pocketledger.transactions.views import (
    balance,
    breakdown_as_dict,
    category_breakdown,
    display_date,
    expense_total,
    filter_transactions,
    format_amount,
    format_balance,
    income_total,
    summarise,
)


def test_mixed_list_figures(sample_transactions) -> None:
    assert expense_total(sample_transactions) == pytest.approx(30.0)
    assert income_total(sample_transactions) == pytest.approx(50.0)
    assert balance(sample_transactions) == pytest.approx(20.0)

    breakdown = category_breakdown(sample_transactions)
    assert breakdown_as_dict(breakdown) == {"Food": pytest.approx(30.0)}
    assert breakdown[0].percentage == pytest.approx(100.0)


def test_empty_list_figures() -> None:
    assert balance([]) == 0
    assert income_total([]) == 0
    assert expense_total([]) == 0
    assert category_breakdown([]) == []


def test_breakdown_groups_unknown_and_missing_as_other(make_transaction) -> None:
    transactions = [
        make_transaction("a", -10.0, "Rent"),
        make_transaction("b", -5.0, None),
        make_transaction("c", -5.0, "Crypto"),
        make_transaction("d", 100.0, "Salary"),
    ]

    breakdown = category_breakdown(transactions)

    assert [item.name for item in breakdown] == ["Rent", "Other"]
    assert breakdown_as_dict(breakdown) == {"Rent": 10.0, "Other": 10.0}
    assert [item.percentage for item in breakdown] == [50.0, 50.0]
    assert breakdown[0].label == "$10.00 (50.0%)"
    # stored categories are left untouched
    assert transactions[2].category == "Crypto"


def test_income_only_list_has_empty_breakdown(make_transaction) -> None:
    assert category_breakdown([make_transaction("a", 10.0, "Salary")]) == []


def test_totals_stay_consistent_for_random_lists() -> None:
    """Balance matches income minus expense and the breakdown sums to expenses."""

    generator = random.Random(1234)
    categories = ["Food", "Rent", "Utilities", "Health", None, "Unknown"]
    for size in range(0, 40):
        transactions = [
            Transaction(
                id=str(index),
                text="entry",
                amount=round(generator.uniform(-500, 500), 2),
                category=generator.choice(categories),
            )
            for index in range(size)
        ]
        expenses = expense_total(transactions)

        assert balance(transactions) == pytest.approx(
            income_total(transactions) - expenses, abs=0.01
        )
        assert sum(item.value for item in category_breakdown(transactions)) == pytest.approx(
            expenses
        )


def test_summarise_rounds_totals(sample_transactions) -> None:
    figures = summarise(sample_transactions)

    assert figures["balance"] == 20.0
    assert figures["income"] == 50.0
    assert figures["expense"] == 30.0
    assert figures["count"] == 3


def test_filter_by_kind_and_search(sample_transactions) -> None:
    assert [t.id for t in filter_transactions(sample_transactions, "income")] == ["c"]
    assert [t.id for t in filter_transactions(sample_transactions, "expense")] == ["a", "b"]
    assert [t.id for t in filter_transactions(sample_transactions, "all", "LUN")] == ["b"]
    assert filter_transactions(sample_transactions, "income", "lunch") == []


def test_filter_rejects_unknown_kind(sample_transactions) -> None:
    with pytest.raises(ValueError):
        filter_transactions(sample_transactions, "transfers")


def test_formatting_helpers() -> None:
    assert format_amount(50) == "+$50.00"
    assert format_amount(-20.5) == "-$20.50"
    assert format_balance(-12.5) == "-$12.50"
    assert format_balance(7) == "$7.00"
    assert display_date(None) == "Today"
    assert display_date(datetime(2024, 5, 1, 9, 30)) == "May 1"
