"""Mini README: Command line client and launcher for pocketledger.

Commands:
    * serve - run the reference transactions API with uvicorn.
    * summary - balance, income/expense totals and spending by category.
    * history - list transactions, optionally filtered by kind or text.
    * add / edit / remove - create, update and delete transactions.

Every client command opens one ``LedgerSession`` (which performs the initial
fetch), runs a single operation and reports the store's error slot if the
server rejected it.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, NoReturn, Optional

import typer
import uvicorn

from pocketledger.configuration import get_settings
from pocketledger.interface.web_app import API_PREFIX
from pocketledger.logging_utils import configure_root_logger
from pocketledger.transactions import LedgerSession, ValidationError
from pocketledger.transactions.models import Category, Transaction
from pocketledger.transactions.views import (
    category_label,
    display_date,
    filter_transactions,
    format_amount,
    format_balance,
    summarise,
)

cli = typer.Typer(help="Track income and expenses stored by the transactions API.")

BASE_URL_OPTION = typer.Option(None, "--api", help="Transactions API root, e.g. http://127.0.0.1:5000/api/v1.")


def _run(base_url: Optional[str], action: Callable[[LedgerSession], Awaitable[bool]]) -> None:
    """Open a session, run ``action`` and exit non-zero on failure."""

    configure_root_logger()

    async def scenario() -> None:
        async with LedgerSession(base_url=base_url) as session:
            if session.state.error:
                _fail(session.state.error)
            try:
                succeeded = await action(session)
            except ValidationError as error:
                _fail(str(error))
            if not succeeded:
                _fail(session.state.error or "Request failed")

    asyncio.run(scenario())


def _fail(message: str) -> NoReturn:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _describe(transaction: Transaction) -> str:
    return (
        f"{transaction.id}  {display_date(transaction.created_at):<6}  "
        f"{transaction.text:<24}  {category_label(transaction):<16}  "
        f"{format_amount(transaction.amount):>10}"
    )


def _client_url(host: str, port: int) -> str:
    """Return the API root clients should use for a bound host and port."""

    reachable = "127.0.0.1" if host in {"0.0.0.0", "::"} else host
    return f"http://{reachable}:{port}{API_PREFIX.rsplit('/', 1)[0]}"


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Disable auto-reload when serving."
    ),
) -> None:
    """Start the in-memory reference transactions API using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger()

    client_url = _client_url(effective_host, effective_port)
    typer.echo(f"Serving transactions API on {effective_host}:{effective_port}")
    typer.echo(f"  GET/POST    {API_PREFIX}")
    typer.echo(f"  PUT/DELETE  {API_PREFIX}/{{id}}")
    typer.echo("Data is kept in memory and lost on restart.")
    if client_url != settings.api_base_url:
        typer.echo(f"Run client commands with --api {client_url} or set POCKETLEDGER_API_BASE_URL.")
    uvicorn.run(
        "pocketledger.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )



@cli.command()
def summary(api: Optional[str] = BASE_URL_OPTION) -> None:
    """Print the balance, totals and spending by category."""

    async def action(session: LedgerSession) -> bool:
        figures = summarise(session.state.transactions)
        typer.echo(f"Balance:  {format_balance(figures['balance'])}")
        typer.echo(f"Income:   +${figures['income']:.2f}")
        typer.echo(f"Expense:  -${figures['expense']:.2f}")
        if figures["breakdown"]:
            typer.echo("Spending by category:")
            for item in figures["breakdown"]:
                typer.echo(f"  {Category(item.name).label:<16} {item.label}")
        return True

    _run(api, action)


@cli.command()
def history(
    kind: str = typer.Option("all", help="all, income or expense."),
    search: str = typer.Option("", help="Case-insensitive text to match."),
    api: Optional[str] = BASE_URL_OPTION,
) -> None:
    """List transactions in server order."""

    async def action(session: LedgerSession) -> bool:
        try:
            matches = filter_transactions(session.state.transactions, kind, search)
        except ValueError as error:
            raise ValidationError(str(error)) from error
        if not matches:
            typer.echo("No transactions match your search.")
        for transaction in matches:
            typer.echo(_describe(transaction))
        return True

    _run(api, action)


@cli.command()
def add(
    text: str = typer.Argument(..., help="Description, e.g. Salary or Rent."),
    amount: str = typer.Option(..., help="Signed amount: negative for expenses."),
    category: str = typer.Option(Category.OTHER.value, help="Spending category."),
    api: Optional[str] = BASE_URL_OPTION,
) -> None:
    """Create a transaction."""

    async def action(session: LedgerSession) -> bool:
        draft = session.editor.draft
        draft.text, draft.amount, draft.category = text, amount, category
        succeeded = await session.editor.submit()
        if succeeded:
            typer.echo(_describe(session.state.transactions[-1]))
        return succeeded

    _run(api, action)


@cli.command()
def edit(
    transaction_id: str = typer.Argument(..., help="Identifier shown by 'history'."),
    text: Optional[str] = typer.Option(None, help="New description."),
    amount: Optional[str] = typer.Option(None, help="New signed amount."),
    category: Optional[str] = typer.Option(None, help="New category."),
    api: Optional[str] = BASE_URL_OPTION,
) -> None:
    """Update a transaction, keeping fields that are not given."""

    async def action(session: LedgerSession) -> bool:
        target = session.state.find(transaction_id)
        if target is None:
            raise ValidationError(f"No transaction with id {transaction_id}")
        session.editor.start_edit(target)
        draft = session.editor.draft
        if text is not None:
            draft.text = text
        if amount is not None:
            draft.amount = amount
        if category is not None:
            draft.category = category
        succeeded = await session.editor.submit()
        if succeeded:
            typer.echo(_describe(session.state.find(transaction_id) or target))
        return succeeded

    _run(api, action)


@cli.command()
def remove(
    transaction_id: str = typer.Argument(..., help="Identifier shown by 'history'."),
    api: Optional[str] = BASE_URL_OPTION,
) -> None:
    """Delete a transaction."""

    async def action(session: LedgerSession) -> bool:
        succeeded = await session.sync.remove_transaction(transaction_id)
        if succeeded:
            typer.echo(f"Removed {transaction_id}")
        return succeeded

    _run(api, action)


if __name__ == "__main__":
    cli()
