"""Mini README: Session wiring for the transaction client.

Structure:
    * LedgerSession - owns one store, one sync layer and one edit
      coordinator, and passes the same store to each of them.

``open`` performs the initial fetch exactly once per session. ``close``
marks the store as torn down before releasing the HTTP client, so responses
still in flight are dropped instead of being applied.
"""

from __future__ import annotations

from typing import Optional

import httpx

from ..logging_utils import get_logger
from .editing import DraftBuffer, EditCoordinator
from .store import StoreState, TransactionStore
from .sync import TransactionSync

LOGGER = get_logger(__name__)


class LedgerSession:
    """Explicitly wired store, sync layer and edit coordinator."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        base_url: Optional[str] = None,
        draft: Optional[DraftBuffer] = None,
    ) -> None:
        self.store = TransactionStore()
        self.sync = TransactionSync(self.store, client, base_url=base_url)
        self.editor = EditCoordinator(self.store, self.sync, draft)
        self._opened = False

    @property
    def state(self) -> StoreState:
        return self.store.state

    async def open(self) -> bool:
        """Run the initial fetch; later calls do nothing and return ``True``."""

        if self._opened:
            return True
        self._opened = True
        LOGGER.debug("Opening ledger session")
        return await self.sync.list_transactions()

    async def close(self) -> None:
        self.store.close()
        await self.sync.aclose()

    async def __aenter__(self) -> "LedgerSession":
        await self.open()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
