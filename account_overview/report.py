"""Grouped, color-coded account report.

The reporter expects accounts already sorted by
:func:`account_overview.ordering.sort_accounts`; it never reorders. Each run
of same-category accounts is printed under a ``--- CATEGORY ---`` header,
followed by one ``  <name>: <balance> <CURRENCY>`` line per account, with a
blank line between groups.

Lines are built as :class:`rich.text.Text` so styling never depends on markup
escaping of account names.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Protocol, TypeAlias

from rich.text import Text

from .logging_setup import get_logger
from .models import CanonicalAccount, CanonicalCategory

_logger = get_logger("account_overview.report")

# Liabilities share red, investment-like holdings share blue.
CATEGORY_STYLES: Mapping[CanonicalCategory, str] = {
    CanonicalCategory.CASH: "green",
    CanonicalCategory.CREDIT: "red",
    CanonicalCategory.INVESTMENT: "blue",
    CanonicalCategory.REAL_ESTATE: "magenta",
    CanonicalCategory.LOAN: "red",
    CanonicalCategory.VEHICLE: "magenta",
    CanonicalCategory.CRYPTOCURRENCY: "yellow",
    CanonicalCategory.EMPLOYEE_COMPENSATION: "blue",
    CanonicalCategory.OTHER_ASSET: "blue",
    CanonicalCategory.OTHER_LIABILITY: "red",
}

NAME_STYLE = "bold"
AMOUNT_STYLE = "bright_black"
DETAIL_INDENT = "  "

_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")
_FLOAT_MAX = Decimal("1.7976931348623157e308")

ReportLine: TypeAlias = Text


class LineSink(Protocol):
    """Anything that can print one rendered line, e.g. ``rich.console.Console``."""

    def print(self, *objects: object, soft_wrap: bool | None = None) -> None: ...


def format_balance(balance: str) -> str:
    """Render a decimal balance string rounded to whole units.

    Halves round away from zero. Like a JavaScript ``parseFloat``, only the
    leading number is read (``"1500.40 USD"`` shows as ``1500``); text with
    no leading number renders as ``NaN``, and magnitudes beyond the float
    range render as ``Infinity``/``-Infinity``, rather than failing the whole
    report.
    """

    match = _LEADING_NUMBER.match(balance) if isinstance(balance, str) else None
    if match is None:
        _logger.warning("unparseable balance %r; displaying NaN", balance)
        return "NaN"
    number = match.group(1)
    if match.end() != len(balance.rstrip()):
        _logger.warning("balance %r has trailing text; using %s", balance, number)
    value = Decimal(number.replace("Infinity", "Inf"))
    if value.is_infinite() or abs(value) > _FLOAT_MAX:
        return "-Infinity" if value.is_signed() else "Infinity"
    # Widen precision so large balances keep every integer digit.
    context = Context(prec=max(28, value.adjusted() + 2))
    rounded = value.quantize(Decimal(1), rounding=ROUND_HALF_UP, context=context)
    if rounded.is_zero():
        return "0"
    return f"{rounded:f}"


def category_label(category: CanonicalCategory | str) -> str:
    return str(category).upper()


def header_line(category: CanonicalCategory) -> ReportLine:
    return Text(f"--- {category_label(category)} ---", style=CATEGORY_STYLES.get(category, ""))


def detail_line(account: CanonicalAccount) -> ReportLine:
    return Text.assemble(
        DETAIL_INDENT,
        (account.name, NAME_STYLE),
        ": ",
        (format_balance(account.balance), AMOUNT_STYLE),
        " ",
        (account.currency.upper(), AMOUNT_STYLE),
    )


def render_report(accounts: Iterable[CanonicalAccount]) -> list[ReportLine]:
    """Render sorted accounts into report lines.

    A new group starts whenever an account's category differs from the one
    before it. Empty input yields an empty list.
    """

    lines: list[ReportLine] = []
    current: CanonicalCategory | None = None
    for index, account in enumerate(accounts):
        if index == 0 or account.category != current:
            if index > 0:
                lines.append(Text())
            lines.append(header_line(account.category))
            current = account.category
        lines.append(detail_line(account))
    return lines


def print_report(lines: Iterable[ReportLine], sink: LineSink) -> int:
    """Write each line to ``sink`` with one ``print`` call; return the count.

    ``soft_wrap`` keeps a line longer than the console width on one line.
    """

    count = 0
    for line in lines:
        sink.print(line, soft_wrap=True)
        count += 1
    return count


__all__ = [
    "AMOUNT_STYLE",
    "CATEGORY_STYLES",
    "NAME_STYLE",
    "LineSink",
    "ReportLine",
    "category_label",
    "detail_line",
    "format_balance",
    "header_line",
    "print_report",
    "render_report",
]
