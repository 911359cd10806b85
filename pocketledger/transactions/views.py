"""Mini README: Derived views computed from the transaction list.

Structure:
    * balance / income_total / expense_total - headline figures.
    * category_breakdown - expense totals per category with percentages.
    * summarise - bundle of the above for dashboards and the CLI.
    * filter_transactions - history filtering by kind and search text.
    * format_amount / format_balance / display_date - display helpers.

Every function is pure and cheap enough to recompute on each read, so
callers pass ``store.state.transactions`` whenever they need a figure.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence

from .models import Transaction

FILTER_KINDS = ("all", "income", "expense")


@dataclass(frozen=True, slots=True)
class CategorySlice:
    """Share of total spending attributed to one category."""

    name: str
    value: float
    percentage: float

    @property
    def label(self) -> str:
        return f"${self.value:.2f} ({self.percentage:.1f}%)"


def balance(transactions: Iterable[Transaction]) -> float:
    """Sum of all amounts, rounded to cents."""

    return round(sum(transaction.amount for transaction in transactions), 2)


def income_total(transactions: Iterable[Transaction]) -> float:
    return sum(transaction.amount for transaction in transactions if transaction.amount > 0)


def expense_total(transactions: Iterable[Transaction]) -> float:
    return abs(sum(transaction.amount for transaction in transactions if transaction.amount < 0))


def category_breakdown(transactions: Iterable[Transaction]) -> List[CategorySlice]:
    """Group expenses by category in order of first appearance.

    Missing or unknown categories are counted under ``Other``. Income is
    ignored, and a list without expenses yields an empty breakdown.
    """

    totals: Dict[str, float] = {}
    for transaction in transactions:
        if transaction.amount >= 0:
            continue
        name = transaction.display_category.value
        totals[name] = totals.get(name, 0.0) + abs(transaction.amount)

    grand_total = sum(totals.values())
    if not grand_total:
        return []
    return [
        CategorySlice(name=name, value=value, percentage=value / grand_total * 100)
        for name, value in totals.items()
    ]


def breakdown_as_dict(breakdown: Sequence[CategorySlice]) -> Dict[str, float]:
    return {item.name: item.value for item in breakdown}


def summarise(transactions: Sequence[Transaction]) -> Dict[str, object]:
    """Collect the headline figures used by dashboards."""

    return {
        "balance": balance(transactions),
        "income": round(income_total(transactions), 2),
        "expense": round(expense_total(transactions), 2),
        "breakdown": category_breakdown(transactions),
        "count": len(transactions),
    }


def filter_transactions(
    transactions: Iterable[Transaction], kind: str = "all", search: str = ""
) -> List[Transaction]:
    """Return transactions matching the kind filter and search text, in order."""

    if kind not in FILTER_KINDS:
        raise ValueError(f"Unsupported filter '{kind}'; expected one of {', '.join(FILTER_KINDS)}.")
    needle = search.strip().lower()
    matches: List[Transaction] = []
    for transaction in transactions:
        if kind == "income" and not transaction.amount > 0:
            continue
        if kind == "expense" and not transaction.amount < 0:
            continue
        if needle and needle not in transaction.text.lower():
            continue
        matches.append(transaction)
    return matches


def format_amount(amount: float) -> str:
    """Render a signed list amount, e.g. ``+$50.00`` or ``-$20.00``."""

    sign = "-" if amount < 0 else "+"
    return f"{sign}${abs(amount):.2f}"


def format_balance(amount: float) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):.2f}"


def display_date(created_at: Optional[datetime]) -> str:
    """Render ``May 1`` style dates; a missing timestamp reads ``Today``."""

    if created_at is None:
        return "Today"
    return f"{created_at:%b} {created_at.day}"


def category_label(transaction: Transaction) -> str:
    return transaction.display_category.label

