"""Data models for ``account_overview``.

Two inbound shapes come from the Lunch Money API and are validated with
Pydantic:

- :class:`ManualAsset`: a manually-tracked asset whose ``type_name`` is
  already a :class:`CanonicalCategory`.
- :class:`LinkedAccount`: a Plaid-linked account whose ``type`` is a coarse,
  provider-defined string (see :class:`LinkedAccountType`).

Both are projected onto :class:`CanonicalAccount`, a frozen value object used
for ordering and display.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

# ---------------------------------------------------------------------------
# Category enumerations
# ---------------------------------------------------------------------------


class CanonicalCategory(StrEnum):
    """The fixed ten-member account classification.

    Member order matches the display order defined in
    :data:`account_overview.ordering.CATEGORY_ORDER`.
    """

    CASH = "cash"
    CREDIT = "credit"
    INVESTMENT = "investment"
    REAL_ESTATE = "real_estate"
    LOAN = "loan"
    VEHICLE = "vehicle"
    CRYPTOCURRENCY = "cryptocurrency"
    EMPLOYEE_COMPENSATION = "employee_compensation"
    OTHER_ASSET = "other_asset"
    OTHER_LIABILITY = "other_liability"


class LinkedAccountType(StrEnum):
    """Known Plaid account types. The provider may send values outside this set."""

    DEPOSITORY = "depository"
    CREDIT = "credit"
    LOAN = "loan"
    INVESTMENT = "investment"
    BROKERAGE = "brokerage"
    OTHER = "other"


def _coerce_balance(v: Any) -> Any:
    # The API documents balances as strings; tolerate bare numbers.
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


# ---------------------------------------------------------------------------
# Inbound records
# ---------------------------------------------------------------------------


class ManualAsset(BaseModel):
    """A manually-managed asset as returned by ``GET /assets``."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int
    type_name: CanonicalCategory
    name: str
    display_name: str | None = None
    balance: str
    currency: str
    institution_name: str | None = None

    @field_validator("type_name", mode="before")
    @classmethod
    def _fold_type_name(cls, v: Any) -> Any:
        # "real estate" / "other asset" / "employee compensation" on the wire.
        if isinstance(v, str):
            return v.strip().lower().replace(" ", "_").replace("-", "_")
        return v

    @field_validator("balance", mode="before")
    @classmethod
    def _balance_as_text(cls, v: Any) -> Any:
        return _coerce_balance(v)


class LinkedAccount(BaseModel):
    """A Plaid-linked account as returned by ``GET /plaid_accounts``.

    ``type`` is kept as the raw provider string so unknown or future values
    survive parsing; classification happens later in
    :func:`account_overview.classify.classify_linked_type`.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int
    type: str = ""
    name: str
    display_name: str | None = None
    balance: str
    currency: str
    institution_name: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _type_or_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("balance", mode="before")
    @classmethod
    def _balance_as_text(cls, v: Any) -> Any:
        return _coerce_balance(v)


# ---------------------------------------------------------------------------
# Canonical record
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class CanonicalAccount:
    """A unified, display-ready account record.

    ``balance`` stays the source's decimal string; rounding happens only at
    display time. Provenance (manual vs. linked) is not retained, so ``id``
    values from the two sources may coincide.
    """

    id: int
    category: CanonicalCategory
    name: str
    display_name: str | None
    balance: str
    currency: str
    institution_name: str | None


__all__ = [
    "CanonicalAccount",
    "CanonicalCategory",
    "LinkedAccount",
    "LinkedAccountType",
    "ManualAsset",
]
