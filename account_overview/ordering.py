"""Display ordering for canonical accounts.

Accounts sort by category rank (position in :data:`CATEGORY_ORDER`), then by
name using the active ``LC_COLLATE`` locale. The CLI adopts the user's locale
at startup; library callers that want the same collation should call
``locale.setlocale(locale.LC_COLLATE, "")`` themselves.
"""

from __future__ import annotations

import locale
from collections.abc import Iterable, Mapping

from .models import CanonicalAccount, CanonicalCategory

CATEGORY_ORDER: tuple[CanonicalCategory, ...] = (
    CanonicalCategory.CASH,
    CanonicalCategory.CREDIT,
    CanonicalCategory.INVESTMENT,
    CanonicalCategory.REAL_ESTATE,
    CanonicalCategory.LOAN,
    CanonicalCategory.VEHICLE,
    CanonicalCategory.CRYPTOCURRENCY,
    CanonicalCategory.EMPLOYEE_COMPENSATION,
    CanonicalCategory.OTHER_ASSET,
    CanonicalCategory.OTHER_LIABILITY,
)

_CATEGORY_RANK: Mapping[str, int] = {cat: pos for pos, cat in enumerate(CATEGORY_ORDER)}


def category_rank(category: CanonicalCategory | str) -> int:
    """Zero-based position of ``category``; unlisted values rank last."""

    return _CATEGORY_RANK.get(category, len(CATEGORY_ORDER))


def account_sort_key(account: CanonicalAccount) -> tuple[int, str]:
    return category_rank(account.category), locale.strxfrm(account.name)


def compare_accounts(a: CanonicalAccount, b: CanonicalAccount) -> int:
    """cmp-style comparator equivalent to :func:`account_sort_key`."""

    rank_a, rank_b = category_rank(a.category), category_rank(b.category)
    if rank_a != rank_b:
        return rank_a - rank_b
    return locale.strcoll(a.name, b.name)


def sort_accounts(accounts: Iterable[CanonicalAccount]) -> list[CanonicalAccount]:
    """Return a new list in display order; the input is left untouched."""

    return sorted(accounts, key=account_sort_key)


__all__ = [
    "CATEGORY_ORDER",
    "account_sort_key",
    "category_rank",
    "compare_accounts",
    "sort_accounts",
]
