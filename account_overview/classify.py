"""Map provider account types onto :class:`CanonicalCategory`."""

from __future__ import annotations

from collections.abc import Mapping

from .models import CanonicalCategory, LinkedAccountType

LINKED_TYPE_CATEGORIES: Mapping[str, CanonicalCategory] = {
    LinkedAccountType.DEPOSITORY: CanonicalCategory.CASH,
    LinkedAccountType.CREDIT: CanonicalCategory.CREDIT,
    LinkedAccountType.LOAN: CanonicalCategory.LOAN,
    LinkedAccountType.INVESTMENT: CanonicalCategory.INVESTMENT,
    LinkedAccountType.BROKERAGE: CanonicalCategory.INVESTMENT,
}

FALLBACK_CATEGORY = CanonicalCategory.OTHER_ASSET


def classify_linked_type(value: str | LinkedAccountType | None) -> CanonicalCategory:
    """Return the canonical category for a Plaid account ``type``.

    Total over its input: unknown, empty or ``None`` values (including types
    the provider adds later) map to ``other_asset``.
    """

    if value is None:
        return FALLBACK_CATEGORY
    key = str(value).strip().lower()
    return LINKED_TYPE_CATEGORIES.get(key, FALLBACK_CATEGORY)


__all__ = ["FALLBACK_CATEGORY", "LINKED_TYPE_CATEGORIES", "classify_linked_type"]
