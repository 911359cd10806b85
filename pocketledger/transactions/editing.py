"""Mini README: Edit-mode coordination and the caller-owned draft buffer.

Structure:
    * DraftBuffer - editable text/amount/category fields prior to submission.
    * EditMode - ``IDLE`` or ``EDITING``.
    * EditCoordinator - drives the store's single edit slot and routes
      submissions to create or update.

The store only remembers *which* transaction is being edited. The draft is
owned by the caller and is synchronised through two explicit commands:
``load_draft`` copies the edit target into the draft and ``clear_draft``
restores the empty defaults.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union

from ..logging_utils import get_logger
from .errors import ValidationError
from .models import Category, Transaction
from .store import SetEditing, TransactionStore
from .sync import TransactionSync

LOGGER = get_logger(__name__)


@dataclass
class DraftBuffer:
    """Raw form values; ``amount`` may still be the string the user typed."""

    text: str = ""
    amount: Union[str, float] = ""
    category: str = Category.OTHER.value
    # stored category of the edit target, sent back verbatim even if unknown
    loaded_category: Optional[str] = field(default=None, repr=False)

    def load(self, transaction: Transaction) -> None:
        self.text = transaction.text
        self.amount = transaction.amount
        self.category = transaction.category or Category.OTHER.value
        self.loaded_category = transaction.category

    def reset(self) -> None:
        self.text = ""
        self.amount = ""
        self.category = Category.OTHER.value
        self.loaded_category = None

    def to_payload(self) -> Dict[str, object]:
        """Validate the fields and return the request body.

        Raises:
            ValidationError: empty description, non-numeric amount or an
                unknown category that was not loaded from the edit target.
        """

        text = self.text.strip()
        if not text:
            raise ValidationError("Please add some text")
        try:
            amount = float(self.amount)
        except (TypeError, ValueError) as error:
            raise ValidationError("Please add a positive or negative number") from error
        if not math.isfinite(amount):
            raise ValidationError("Please add a positive or negative number")
        if self.category != self.loaded_category:
            try:
                Category(self.category)
            except ValueError as error:
                raise ValidationError(f"Unsupported category: {self.category}") from error
        return {"text": text, "amount": amount, "category": self.category}


class EditMode(str, Enum):
    IDLE = "idle"
    EDITING = "editing"


class EditCoordinator:
    """Single global edit slot plus create/update routing."""

    def __init__(
        self,
        store: TransactionStore,
        sync: TransactionSync,
        draft: Optional[DraftBuffer] = None,
    ) -> None:
        self.store = store
        self.sync = sync
        self.draft = draft if draft is not None else DraftBuffer()

    @property
    def editing(self) -> Optional[Transaction]:
        return self.store.state.editing

    @property
    def editing_id(self) -> Optional[str]:
        editing = self.editing
        return editing.id if editing is not None else None

    @property
    def mode(self) -> EditMode:
        return EditMode.EDITING if self.editing is not None else EditMode.IDLE

    def start_edit(self, transaction: Transaction) -> None:
        """Point the edit slot at ``transaction``, replacing any previous target."""

        LOGGER.debug("Editing transaction %s", transaction.id)
        self.store.dispatch(SetEditing(transaction))
        self.load_draft()

    def cancel_edit(self) -> None:
        LOGGER.debug("Cancelled edit of %s", self.editing_id)
        self.store.dispatch(SetEditing(None))
        self.clear_draft()

    def load_draft(self) -> None:
        """Copy the current edit target into the draft buffer."""

        if self.editing is None:
            self.draft.reset()
        else:
            self.draft.load(self.editing)

    def clear_draft(self) -> None:
        self.draft.reset()

    async def submit(self) -> bool:
        """Send the draft as a create (idle) or update (editing).

        Validation happens first, so invalid drafts never reach the network
        and never touch the store's error slot. The draft is cleared only when
        the server accepts the request.
        """

        payload = self.draft.to_payload()
        target = self.editing_id
        if target is None:
            succeeded = await self.sync.create_transaction(payload)
        else:
            succeeded = await self.sync.update_transaction(target, payload)
        if succeeded:
            self.clear_draft()
        return succeeded
