"""Mini README: Transaction records and the category vocabulary.

Structure:
    * Category - enumerated spending categories with display labels.
    * Transaction - immutable record mirroring the API payload.

Records are built from server payloads via ``Transaction.from_payload``. The
category string is stored exactly as the server sent it; ``Category.resolve``
maps missing or unknown values to ``OTHER`` only when displaying or
aggregating.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class Category(str, Enum):
    """Spending categories understood by the client."""

    FOOD = "Food"
    RENT = "Rent"
    UTILITIES = "Utilities"
    ENTERTAINMENT = "Entertainment"
    HEALTH = "Health"
    SALARY = "Salary"
    OTHER = "Other"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @classmethod
    def resolve(cls, value: Optional[str]) -> "Category":
        """Return the matching category, falling back to ``OTHER``."""

        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


_CATEGORY_LABELS = {
    Category.FOOD: "Food & Dining",
    Category.RENT: "Rent & Housing",
    Category.UTILITIES: "Utilities",
    Category.ENTERTAINMENT: "Entertainment",
    Category.HEALTH: "Health & Fitness",
    Category.SALARY: "Salary & Income",
    Category.OTHER: "Other Expenses",
}


@dataclass(frozen=True, slots=True)
class Transaction:
    """One income (positive amount) or expense (negative amount) entry."""

    id: str
    text: str
    amount: float
    category: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def is_income(self) -> bool:
        return self.amount > 0

    @property
    def is_expense(self) -> bool:
        return self.amount < 0

    @property
    def display_category(self) -> Category:
        return Category.resolve(self.category)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Transaction":
        """Build a transaction from an API payload.

        Accepts either ``id`` or the document-store style ``_id``. Raises
        ``ValueError`` when the identifier, text or amount is unusable.
        """

        if not isinstance(payload, Mapping):
            raise ValueError("Transaction payload must be an object.")
        identifier = payload.get("id", payload.get("_id"))
        if identifier in (None, ""):
            raise ValueError("Transaction payload is missing an id.")
        text = payload.get("text")
        if not isinstance(text, str):
            raise ValueError(f"Transaction {identifier} has no text.")
        amount = payload.get("amount")
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise ValueError(f"Transaction {identifier} has a non-numeric amount.")
        category = payload.get("category")
        return cls(
            id=str(identifier),
            text=text,
            amount=float(amount),
            category=str(category) if category is not None else None,
            created_at=_parse_timestamp(payload.get("createdAt")),
        )

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction using the API field names."""

        payload: Dict[str, object] = {
            "id": self.id,
            "text": self.text,
            "amount": self.amount,
        }
        if self.category is not None:
            payload["category"] = self.category
        if self.created_at is not None:
            payload["createdAt"] = self.created_at.isoformat()
        return payload


def _parse_timestamp(value: object) -> Optional[datetime]:
    """Parse ISO timestamps, including the trailing ``Z`` form."""

    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError as error:
            raise ValueError(f"Invalid createdAt timestamp: {value}") from error
    raise ValueError("createdAt must be an ISO formatted string.")
