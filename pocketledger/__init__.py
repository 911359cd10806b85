"""Mini README: Core package initializer for pocketledger.

pocketledger tracks personal income and expenses held by a remote CRUD API.
The ``transactions`` subpackage holds the client-side store, the sync layer
bridging it to the API, derived views and the edit-mode coordinator. The
``interface`` subpackage ships a reference implementation of the API.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
