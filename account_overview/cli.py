"""CLI for the ``account_overview`` package.

Exposes a Typer app with a single, argument-free command that prints the
grouped account report to stdout. Environment variables are loaded from a
local ``.env`` using ``python-dotenv`` (without overriding values already set)
before anything reads them:

- ``LUNCH_MONEY_TOKEN``: API access token, passed to the client as-is.
- ``LUNCH_MONEY_API_URL``: API base URL override.
- ``LUNCH_MONEY_TIMEOUT``: request timeout in seconds.
- ``ACCOUNT_OVERVIEW_LOG_LEVEL``: log level for stderr diagnostics.

Fetch failures are deliberately not caught: the traceback reaches stderr and
the process exits non-zero without a partial report.
"""

from __future__ import annotations

import asyncio
import locale
import os
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from .api import generate_report
from .client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, LunchMoneyClient
from .logging_setup import configure_logging, get_logger

_logger = get_logger("account_overview.cli")

TOKEN_ENV_VAR = "LUNCH_MONEY_TOKEN"


def _resolve_timeout() -> float:
    """Read ``LUNCH_MONEY_TIMEOUT``, falling back to the default when unset or invalid."""

    raw = os.getenv("LUNCH_MONEY_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        _logger.warning("ignoring non-numeric LUNCH_MONEY_TIMEOUT=%r", raw)
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT


def _adopt_user_collation() -> None:
    # Names sort with the user's locale rules rather than code-point order.
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        _logger.warning("falling back to default collation: %s", e)


async def _run(token: str | None, *, base_url: str, timeout: float, console: Console) -> int:
    async with LunchMoneyClient(token, base_url=base_url, timeout=timeout) as client:
        return await generate_report(client, console)


def show_accounts() -> None:
    """Fetch all Lunch Money accounts and print them grouped by category."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging()
    _adopt_user_collation()

    token = os.getenv(TOKEN_ENV_VAR)
    if not token:
        _logger.warning("%s is not set; requests will be sent without credentials", TOKEN_ENV_VAR)

    asyncio.run(
        _run(
            token,
            base_url=os.getenv("LUNCH_MONEY_API_URL") or DEFAULT_BASE_URL,
            timeout=_resolve_timeout(),
            console=Console(),
        )
    )


app = typer.Typer(
    add_completion=False,
    help="Print Lunch Money assets and linked accounts grouped by category.",
)
app.command()(show_accounts)


if __name__ == "__main__":  # pragma: no cover
    app()
