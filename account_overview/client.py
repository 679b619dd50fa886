"""Thin async client for the Lunch Money REST API.

Only the two read endpoints the report needs are wrapped:

- ``GET {base}/assets`` -> ``{"assets": [...]}``
- ``GET {base}/plaid_accounts`` -> ``{"plaid_accounts": [...]}``

Authentication is a bearer token passed through unchanged. Non-2xx responses
raise ``httpx.HTTPStatusError``; malformed payloads raise
``pydantic.ValidationError``. Nothing is retried.
"""

from __future__ import annotations

from collections.abc import Sequence
from types import TracebackType
from typing import Any, Self

import httpx
from pydantic import TypeAdapter

from .logging_setup import get_logger
from .models import LinkedAccount, ManualAsset

DEFAULT_BASE_URL = "https://dev.lunchmoney.app/v1"
DEFAULT_TIMEOUT = 30.0

_logger = get_logger("account_overview.client")

_ASSETS = TypeAdapter(list[ManualAsset])
_PLAID_ACCOUNTS = TypeAdapter(list[LinkedAccount])


class LunchMoneyClient:
    """Read-only Lunch Money client backed by ``httpx.AsyncClient``.

    Use as an async context manager so the connection pool is closed::

        async with LunchMoneyClient(token) as client:
            assets = await client.get_assets()

    ``transport`` is forwarded to ``httpx.AsyncClient`` (tests pass an
    ``httpx.MockTransport``).
    """

    def __init__(
        self,
        token: str | None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _get_list(self, path: str, key: str) -> Sequence[Any]:
        _logger.debug("GET %s%s", self._http.base_url, path)
        resp = await self._http.get(path)
        resp.raise_for_status()
        body = resp.json()
        if not isinstance(body, dict) or not isinstance(body.get(key), list):
            raise ValueError(f"Lunch Money response for {path} is missing a {key!r} list")
        return body[key]

    async def get_assets(self) -> list[ManualAsset]:
        """Fetch manually-managed assets."""

        assets = _ASSETS.validate_python(await self._get_list("/assets", "assets"))
        _logger.info("fetched %d manual assets", len(assets))
        return assets

    async def get_plaid_accounts(self) -> list[LinkedAccount]:
        """Fetch Plaid-linked accounts."""

        accounts = _PLAID_ACCOUNTS.validate_python(
            await self._get_list("/plaid_accounts", "plaid_accounts")
        )
        _logger.info("fetched %d linked accounts", len(accounts))
        return accounts


__all__ = ["DEFAULT_BASE_URL", "DEFAULT_TIMEOUT", "LunchMoneyClient"]
