"""Mini README: Service interfaces for pocketledger.

Exports the FastAPI application factory for the reference transactions API.
The command-line client lives in ``ledger_console.py`` at the repository root.
"""

from .web_app import TransactionRepository, create_application

__all__ = ["TransactionRepository", "create_application"]
