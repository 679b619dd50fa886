"""Public interface for the ``account_overview`` package.

Re-exports the pipeline functions and public models; there is no runtime logic
here.
"""

from .api import AccountSource, build_report, collect_records, generate_report
from .classify import classify_linked_type
from .client import LunchMoneyClient
from .models import (
    CanonicalAccount,
    CanonicalCategory,
    LinkedAccount,
    LinkedAccountType,
    ManualAsset,
)
from .ordering import CATEGORY_ORDER, category_rank, compare_accounts, sort_accounts
from .report import CATEGORY_STYLES, format_balance, print_report, render_report
from .unify import asset_to_canonical, linked_to_canonical, unify_accounts

__all__ = [
    # Pipeline
    "AccountSource",
    "build_report",
    "collect_records",
    "generate_report",
    "LunchMoneyClient",
    # Core
    "classify_linked_type",
    "asset_to_canonical",
    "linked_to_canonical",
    "unify_accounts",
    "CATEGORY_ORDER",
    "category_rank",
    "compare_accounts",
    "sort_accounts",
    "CATEGORY_STYLES",
    "format_balance",
    "print_report",
    "render_report",
    # Models / types
    "CanonicalAccount",
    "CanonicalCategory",
    "LinkedAccount",
    "LinkedAccountType",
    "ManualAsset",
]
