"""
Accounts resource.
"""

from typing import Any, Dict, Optional
from urllib.parse import quote

from ..models import Account, AccountList
from .base import BaseResource


def _list_params(limit: Optional[int], offset: Optional[int]) -> Dict[str, Any]:
    params = {}
    if limit is not None:
        params["limit"] = limit
    if offset is not None:
        params["offset"] = offset
    return params


class AccountsResource(BaseResource):
    """Read access to CacheFly accounts."""

    def get_current(self) -> Account:
        """Get the account the API token belongs to."""
        return self._request_model(Account, "GET", "/accounts/me")

    async def aget_current(self) -> Account:
        """Get the account the API token belongs to (async)."""
        return await self._arequest_model(Account, "GET", "/accounts/me")

    def get(self, account_id: Optional[str] = None) -> Account:
        """
        Get an account by ID.

        An empty ``account_id`` returns the account the token belongs to,
        same as :meth:`get_current`.
        """
        if not account_id:
            return self.get_current()
        return self._request_model(Account, "GET", f"/accounts/{quote(account_id, safe='')}")

    async def aget(self, account_id: Optional[str] = None) -> Account:
        """Get an account by ID, or the current account if empty (async)."""
        if not account_id:
            return await self.aget_current()
        return await self._arequest_model(Account, "GET", f"/accounts/{quote(account_id, safe='')}")

    def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> AccountList:
        """List accounts visible to the token."""
        return self._request_model(AccountList, "GET", "/accounts", params=_list_params(limit, offset))

    async def alist(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> AccountList:
        """List accounts visible to the token (async)."""
        return await self._arequest_model(AccountList, "GET", "/accounts", params=_list_params(limit, offset))
