"""IAM account switch key lookup."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .client import IAMClient, query
from .exceptions import Operation

SELF_CLIENT = "self"


@dataclass
class AccountSwitchKey:
    account_name: str = ""
    account_switch_key: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AccountSwitchKey":
        return cls(
            account_name=data.get("accountName", ""),
            account_switch_key=data.get("accountSwitchKey", ""),
        )


@dataclass
class ListAccountSwitchKeysRequest:
    """Lookup parameters.

    ``client_id`` defaults to the API client making the call; ``search``
    filters by account name or ID.
    """
    client_id: Optional[str] = None
    search: Optional[str] = None


class AccountSwitchKeyService:
    """Service listing accounts an API client can switch to."""

    def __init__(self, client: IAMClient):
        self.client = client

    def list_account_switch_keys(
        self, params: Optional[ListAccountSwitchKeysRequest] = None
    ) -> List[AccountSwitchKey]:
        params = params or ListAccountSwitchKeysRequest()
        client_id = params.client_id or SELF_CLIENT
        payload = self.client.call(
            Operation.LIST_ACCOUNT_SWITCH_KEYS,
            "GET",
            self.client.api_clients_path(client_id, "account-switch-keys"),
            params=query(search=params.search or None),
        )
        return [AccountSwitchKey.from_dict(item) for item in payload or []]
