"""Mini README: Error taxonomy for transaction handling.

Structure:
    * TransactionError - base class for everything raised by this package.
    * ValidationError - malformed user input caught before any request.
    * TransactionServiceError - failures talking to the remote API.
    * NetworkError - the request never reached the server.
    * ServerError - the server answered with a non-2xx status.

Service errors never leave the sync layer: they are converted into a
``SetError`` transition. Validation errors propagate to the caller.
"""

from __future__ import annotations

from typing import Optional

GENERIC_ERROR_MESSAGE = "Server Error"


class TransactionError(Exception):
    """Base exception for pocketledger transaction errors."""


class ValidationError(TransactionError, ValueError):
    """Raised when draft input cannot be turned into a request payload."""


class TransactionServiceError(TransactionError):
    """Base exception for remote API failures."""

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or GENERIC_ERROR_MESSAGE
        super().__init__(self.message)


class NetworkError(TransactionServiceError):
    """Timeout or connectivity failure before a response arrived."""


class ServerError(TransactionServiceError):
    """Non-2xx response, or a response whose body is unusable.

    ``status_code`` is ``None`` when the response could not be read at all.
    """

    def __init__(self, status_code: Optional[int], message: Optional[str] = None) -> None:
        self.status_code = status_code
        super().__init__(message)
