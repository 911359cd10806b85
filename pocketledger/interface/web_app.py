"""Mini README: Reference transactions API built with FastAPI.

Structure:
    * TransactionRepository - insertion-ordered, in-memory persistence.
    * create_application - application factory wiring the CRUD routes.

The routes implement the contract the sync layer consumes: successes are
wrapped as ``{"success": true, "data": ...}`` and failures as
``{"success": false, "error": "..."}``. The service is meant for local runs
and integration tests, so nothing survives a restart.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..logging_utils import get_logger
from ..transactions.models import Transaction

LOGGER = get_logger(__name__)

API_PREFIX = "/api/v1/transactions"
TEXT_REQUIRED = "Please add some text"
AMOUNT_REQUIRED = "Please add a positive or negative number"
NOT_FOUND = "No transaction found"
SERVER_ERROR = "Server Error"
INVALID_BODY = "Invalid request body"


class TransactionPayload(BaseModel):
    """Request body for create and update; every field optional on update."""

    text: Optional[str] = None
    amount: Optional[float] = None
    category: Optional[str] = None


class TransactionRepository:
    """Keep transactions in insertion order, keyed by a generated id."""

    def __init__(self) -> None:
        self._transactions: Dict[str, Transaction] = {}

    def list_transactions(self) -> List[Transaction]:
        return list(self._transactions.values())

    def create(self, text: str, amount: float, category: Optional[str]) -> Transaction:
        transaction = Transaction(
            id=uuid4().hex[:24],
            text=text,
            amount=amount,
            category=category,
            created_at=datetime.now(timezone.utc),
        )
        self._transactions[transaction.id] = transaction
        return transaction

    def update(self, transaction_id: str, changes: Dict[str, object]) -> Transaction:
        if transaction_id not in self._transactions:
            raise KeyError(transaction_id)
        updated = replace(self._transactions[transaction_id], **changes)
        self._transactions[transaction_id] = updated
        return updated

    def delete(self, transaction_id: str) -> None:
        if transaction_id not in self._transactions:
            raise KeyError(transaction_id)
        del self._transactions[transaction_id]


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"success": False, "error": message}, status_code=status_code)


def create_application(repository: Optional[TransactionRepository] = None) -> FastAPI:
    """Create the FastAPI application exposing the transactions API."""

    app = FastAPI(title="pocketledger transactions API", version="0.1.0")
    repository = repository or TransactionRepository()

    @app.exception_handler(RequestValidationError)
    async def validation_failed(request: Request, error: RequestValidationError) -> JSONResponse:
        """Report malformed bodies with the same envelope as other failures."""

        fields = {str(item["loc"][-1]) for item in error.errors() if item.get("loc")}
        LOGGER.debug("Rejected %s %s: %s", request.method, request.url.path, fields)
        if "amount" in fields:
            return _error(400, AMOUNT_REQUIRED)
        if "text" in fields:
            return _error(400, TEXT_REQUIRED)
        return _error(400, INVALID_BODY)

    @app.exception_handler(Exception)
    async def unexpected_failure(request: Request, error: Exception) -> JSONResponse:
        LOGGER.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(500, SERVER_ERROR)

    @app.get(API_PREFIX)
    async def list_transactions() -> JSONResponse:
        transactions = repository.list_transactions()
        return JSONResponse(
            {
                "success": True,
                "count": len(transactions),
                "data": [transaction.as_dict() for transaction in transactions],
            }
        )

    @app.post(API_PREFIX)
    async def add_transaction(payload: TransactionPayload) -> JSONResponse:
        """Create a transaction; text and amount are required."""

        if not payload.text or not payload.text.strip():
            return _error(400, TEXT_REQUIRED)
        if payload.amount is None:
            return _error(400, AMOUNT_REQUIRED)
        transaction = repository.create(payload.text.strip(), payload.amount, payload.category)
        LOGGER.info("Created transaction %s", transaction.id)
        return JSONResponse({"success": True, "data": transaction.as_dict()}, status_code=201)

    @app.put(f"{API_PREFIX}/{{transaction_id}}")
    async def update_transaction(transaction_id: str, payload: TransactionPayload) -> JSONResponse:
        """Apply the supplied fields to an existing transaction."""

        changes = payload.model_dump(exclude_unset=True)
        if "text" in changes:
            if not changes["text"] or not changes["text"].strip():
                return _error(400, TEXT_REQUIRED)
            changes["text"] = changes["text"].strip()
        if "amount" in changes and changes["amount"] is None:
            return _error(400, AMOUNT_REQUIRED)
        try:
            transaction = repository.update(transaction_id, changes)
        except KeyError:
            return _error(404, NOT_FOUND)
        LOGGER.info("Updated transaction %s", transaction_id)
        return JSONResponse({"success": True, "data": transaction.as_dict()})

    @app.delete(f"{API_PREFIX}/{{transaction_id}}")
    async def delete_transaction(transaction_id: str) -> JSONResponse:
        try:
            repository.delete(transaction_id)
        except KeyError:
            return _error(404, NOT_FOUND)
        LOGGER.info("Deleted transaction %s", transaction_id)
        return JSONResponse({"success": True, "data": {}})

    return app
