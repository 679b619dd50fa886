"""Public pipeline for the ``account_overview`` package.

The report is a pure function of the two fetched collections
(:func:`build_report`). :func:`generate_report` adds the I/O edges: it fetches
both collections concurrently from an :class:`AccountSource` and writes each
rendered line to a :class:`~account_overview.report.LineSink`.

Fetch errors are not caught here; they propagate to the caller and abort the
run before anything is printed.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import Protocol

from .logging_setup import get_logger
from .models import LinkedAccount, ManualAsset
from .ordering import sort_accounts
from .report import LineSink, ReportLine, print_report, render_report
from .unify import unify_accounts

_logger = get_logger("account_overview.api")


class AccountSource(Protocol):
    """Fetch collaborator; :class:`~account_overview.client.LunchMoneyClient` satisfies it."""

    async def get_assets(self) -> list[ManualAsset]: ...

    async def get_plaid_accounts(self) -> list[LinkedAccount]: ...


def build_report(
    assets: Iterable[ManualAsset], linked: Iterable[LinkedAccount]
) -> list[ReportLine]:
    """Unify, sort and render both collections into report lines."""

    accounts = sort_accounts(unify_accounts(assets, linked))
    return render_report(accounts)


async def collect_records(
    source: AccountSource,
) -> tuple[list[ManualAsset], list[LinkedAccount]]:
    """Fetch manual assets and linked accounts concurrently."""

    assets, linked = await asyncio.gather(source.get_assets(), source.get_plaid_accounts())
    return assets, linked


async def generate_report(source: AccountSource, sink: LineSink) -> int:
    """Run one fetch-unify-sort-report cycle; return the number of lines written."""

    assets, linked = await collect_records(source)
    lines = build_report(assets, linked)
    _logger.info(
        "rendering %d assets and %d linked accounts as %d lines",
        len(assets),
        len(linked),
        len(lines),
    )
    return print_report(lines, sink)


__all__ = ["AccountSource", "build_report", "collect_records", "generate_report"]
