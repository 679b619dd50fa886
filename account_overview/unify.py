"""Project both Lunch Money record shapes onto :class:`CanonicalAccount`.

Each projection is pure: fields are copied verbatim and only the category is
resolved. Balance and currency text is accepted as-is.
"""

from __future__ import annotations

from collections.abc import Iterable

from .classify import classify_linked_type
from .models import CanonicalAccount, LinkedAccount, ManualAsset


def asset_to_canonical(asset: ManualAsset) -> CanonicalAccount:
    """Convert a manual asset; its ``type_name`` is already canonical."""

    return CanonicalAccount(
        id=asset.id,
        category=asset.type_name,
        name=asset.name,
        display_name=asset.display_name,
        balance=asset.balance,
        currency=asset.currency,
        institution_name=asset.institution_name,
    )


def linked_to_canonical(account: LinkedAccount) -> CanonicalAccount:
    """Convert a Plaid-linked account, classifying its provider ``type``."""

    return CanonicalAccount(
        id=account.id,
        category=classify_linked_type(account.type),
        name=account.name,
        display_name=account.display_name,
        balance=account.balance,
        currency=account.currency,
        institution_name=account.institution_name,
    )


def unify_accounts(
    assets: Iterable[ManualAsset], linked: Iterable[LinkedAccount]
) -> list[CanonicalAccount]:
    """Return manual assets followed by linked accounts, all in canonical form."""

    unified = [asset_to_canonical(a) for a in assets]
    unified.extend(linked_to_canonical(p) for p in linked)
    return unified


__all__ = ["asset_to_canonical", "linked_to_canonical", "unify_accounts"]
