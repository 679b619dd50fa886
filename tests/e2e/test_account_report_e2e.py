"""End-to-end report scenarios: raw API payloads in, plain report lines out."""

from __future__ import annotations

import asyncio
import io

import httpx
import pytest
from rich.console import Console

from account_overview.api import build_report, collect_records, generate_report
from account_overview.client import LunchMoneyClient
from account_overview.models import LinkedAccount, ManualAsset
from tests.helpers.lunch_money_stub import LunchMoneyStub, asset, plaid_account


def _report(assets, plaid_accounts):
    lines = build_report(
        [ManualAsset.model_validate(a) for a in assets],
        [LinkedAccount.model_validate(p) for p in plaid_accounts],
    )
    return [line.plain for line in lines]


def test_manual_and_linked_cash_share_one_group():
    lines = _report(
        [asset(1, "cash", "Checking", "1500.40", currency="usd")],
        [plaid_account(1, "depository", "Savings", "2999.99", currency="usd")],
    )
    assert lines == ["--- CASH ---", "  Checking: 1500 USD", "  Savings: 3000 USD"]


def test_brokerage_and_investment_collide_into_one_group():
    lines = _report(
        [asset(2, "investment", "Index Fund", "10000")],
        [plaid_account(9, "brokerage", "Robinhood", "250.5")],
    )
    assert lines == ["--- INVESTMENT ---", "  Index Fund: 10000 USD", "  Robinhood: 251 USD"]


def test_unrecognized_linked_type_lands_in_other_asset():
    lines = _report([], [plaid_account(3, "annuity", "Pension Pot", "42")])
    assert lines == ["--- OTHER_ASSET ---", "  Pension Pot: 42 USD"]


def test_credit_precedes_loan_regardless_of_input_order():
    lines = _report(
        [],
        [
            plaid_account(1, "loan", "Student Loan", "-20000"),
            plaid_account(2, "credit", "Visa", "-300.75"),
        ],
    )
    assert lines == [
        "--- CREDIT ---",
        "  Visa: -301 USD",
        "",
        "--- LOAN ---",
        "  Student Loan: -20000 USD",
    ]


def test_no_accounts_means_no_output():
    assert _report([], []) == []


def test_generate_report_fetches_sorts_and_prints():
    stub = LunchMoneyStub(
        assets=[
            asset(1, "vehicle", "Civic", "8000"),
            asset(2, "cash", "Wallet", "40.5"),
        ],
        plaid_accounts=[plaid_account(1, "credit", "Amex", "-99.5", currency="cad")],
    )
    buf = io.StringIO()
    console = Console(file=buf, force_terminal=False, width=120)

    async def run():
        async with LunchMoneyClient(
            "t", base_url="https://lunchmoney.test/v1", transport=stub.transport()
        ) as client:
            return await generate_report(client, console)

    written = asyncio.run(run())

    assert buf.getvalue().splitlines() == [
        "--- CASH ---",
        "  Wallet: 41 USD",
        "",
        "--- CREDIT ---",
        "  Amex: -100 CAD",
        "",
        "--- VEHICLE ---",
        "  Civic: 8000 USD",
    ]
    assert written == 8


class _SlowAssetsSource:
    """Records when each fetch starts and finishes to show they overlap."""

    def __init__(self) -> None:
        self.events: list[str] = []

    async def get_assets(self):
        self.events.append("assets:start")
        await asyncio.sleep(0.01)
        self.events.append("assets:end")
        return [ManualAsset.model_validate(asset(1, "cash", "Wallet", "1"))]

    async def get_plaid_accounts(self):
        self.events.append("linked:start")
        self.events.append("linked:end")
        return []


def test_collect_records_runs_both_fetches_concurrently():
    source = _SlowAssetsSource()

    assets, linked = asyncio.run(collect_records(source))

    assert [a.name for a in assets] == ["Wallet"]
    assert linked == []
    assert source.events.index("linked:start") < source.events.index("assets:end")


def test_fetch_failure_aborts_before_any_output():
    stub = LunchMoneyStub(
        assets=[asset(1, "cash", "Wallet", "1")],
        fail={"/v1/plaid_accounts": 503},
    )
    buf = io.StringIO()
    console = Console(file=buf, force_terminal=False)

    async def run():
        async with LunchMoneyClient(
            "t", base_url="https://lunchmoney.test/v1", transport=stub.transport()
        ) as client:
            await generate_report(client, console)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(run())
    assert buf.getvalue() == ""
