"""Mini README: Asynchronous bridge between the store and the remote API.

Structure:
    * TransactionSync - four operations, one request each, one transition each.
    * extract_error_message - pulls the ``error`` field out of failed responses.

Every operation waits for the server before touching the store; nothing is
applied optimistically. Network and server failures become ``SetError``
transitions and the operation returns ``False``. Nothing here retries,
de-duplicates or cancels, so when two calls race the response applied last
wins.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

import httpx

from ..configuration import get_settings
from ..logging_utils import get_logger
from .errors import (
    GENERIC_ERROR_MESSAGE,
    NetworkError,
    ServerError,
    TransactionServiceError,
)
from .models import Transaction
from .store import Add, Remove, Replace, SetAll, SetError, TransactionStore

LOGGER = get_logger(__name__)

TRANSACTIONS_PATH = "/transactions"


def extract_error_message(response: httpx.Response) -> str:
    """Return the structured ``error`` field, or the generic message."""

    try:
        body = response.json()
    except (ValueError, httpx.DecodingError):
        return GENERIC_ERROR_MESSAGE
    if isinstance(body, dict):
        message = body.get("error")
        if isinstance(message, str) and message.strip():
            return message
    return GENERIC_ERROR_MESSAGE


class TransactionSync:
    """Run remote CRUD operations and feed their outcomes into a store."""

    def __init__(
        self,
        store: TransactionStore,
        client: Optional[httpx.AsyncClient] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.store = store
        self._owns_client = client is None
        if client is None:
            settings = get_settings()
            client = httpx.AsyncClient(
                base_url=base_url or settings.api_base_url,
                timeout=timeout or settings.request_timeout_seconds,
            )
        self._client = client

    async def __aenter__(self) -> "TransactionSync":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""

        if self._owns_client:
            await self._client.aclose()

    async def list_transactions(self) -> bool:
        """Fetch every transaction and replace the list wholesale."""

        if self._torn_down("list"):
            return False
        try:
            body = await self._request("GET", TRANSACTIONS_PATH)
            transactions = _parse_many(body)
        except TransactionServiceError as error:
            return self._fail("list", error)
        LOGGER.info("Fetched %s transactions", len(transactions))
        self.store.dispatch(SetAll(tuple(transactions)))
        return True

    async def create_transaction(self, draft: Mapping[str, Any]) -> bool:
        """Submit a new transaction and append the server's copy."""

        if self._torn_down("create"):
            return False
        payload = {key: draft[key] for key in ("text", "amount", "category") if key in draft}
        try:
            body = await self._request("POST", TRANSACTIONS_PATH, json=payload)
            created = _parse_one(body)
        except TransactionServiceError as error:
            return self._fail("create", error)
        LOGGER.info("Created transaction %s", created.id)
        self.store.dispatch(Add(created))
        return True

    async def remove_transaction(self, transaction_id: str) -> bool:
        """Delete a transaction by id."""

        if self._torn_down("remove"):
            return False
        try:
            await self._request("DELETE", f"{TRANSACTIONS_PATH}/{transaction_id}", expect_body=False)
        except TransactionServiceError as error:
            return self._fail("remove", error)
        LOGGER.info("Removed transaction %s", transaction_id)
        self.store.dispatch(Remove(transaction_id))
        return True

    async def update_transaction(self, transaction_id: str, draft: Mapping[str, Any]) -> bool:
        """Replace a transaction with the server's updated copy."""

        if self._torn_down("update"):
            return False
        try:
            body = await self._request(
                "PUT", f"{TRANSACTIONS_PATH}/{transaction_id}", json=dict(draft)
            )
            updated = _parse_one(body)
        except TransactionServiceError as error:
            return self._fail("update", error)
        LOGGER.info("Updated transaction %s", updated.id)
        self.store.dispatch(Replace(updated))
        return True

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        expect_body: bool = True,
    ) -> Any:
        """Issue one request, raising ``NetworkError`` or ``ServerError``."""

        try:
            response = await self._client.request(method, path, json=json)
        except httpx.TransportError as error:
            raise NetworkError() from error
        except httpx.RequestError as error:
            # undecodable body, redirect loop and similar protocol failures
            raise ServerError(None) from error

        if not response.is_success:
            raise ServerError(response.status_code, extract_error_message(response))
        if not expect_body:
            return None
        try:
            return response.json()
        except (ValueError, httpx.DecodingError) as error:
            raise ServerError(response.status_code) from error

    def _torn_down(self, operation: str) -> bool:
        """Skip operations once the store has been closed."""

        if self.store.is_live:
            return False
        LOGGER.debug("Skipping %s: store is closed", operation)
        return True

    def _fail(self, operation: str, error: TransactionServiceError) -> bool:
        LOGGER.warning("Transaction %s failed: %s", operation, error.message)
        self.store.dispatch(SetError(error.message))
        return False


def _data(body: Any) -> Any:
    if not isinstance(body, dict) or "data" not in body:
        raise ServerError(200, GENERIC_ERROR_MESSAGE)
    return body["data"]


def _parse_one(body: Any) -> Transaction:
    try:
        return Transaction.from_payload(_data(body))
    except ValueError as error:
        raise ServerError(200) from error


def _parse_many(body: Any) -> List[Transaction]:
    items = _data(body)
    if not isinstance(items, list):
        raise ServerError(200)
    try:
        return [Transaction.from_payload(item) for item in items]
    except ValueError as error:
        raise ServerError(200) from error
