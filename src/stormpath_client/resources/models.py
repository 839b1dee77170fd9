"""
Resource models exchanged with the Stormpath API.

Optional fields default to None and are left out of the JSON body entirely
when unset.
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class Link(BaseModel):
    """Reference to another resource by its href."""
    href: str

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class AccountStoreMapping(BaseModel):
    """
    Maps an account store (directory or group) to an application.

    The ``application`` and ``account_store`` links are always sent; the
    remaining fields only when set.
    """
    href: Optional[str] = None
    list_index: Optional[int] = Field(default=None, alias="listIndex")
    is_default_account_store: Optional[bool] = Field(default=None, alias="isDefaultAccountStore")
    is_default_group_store: Optional[bool] = Field(default=None, alias="isDefaultGroupStore")
    application: Link
    account_store: Link = Field(alias="accountStore")

    model_config = {"populate_by_name": True}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to API-compatible dictionary."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


def new_account_store_mapping(application_href: str, account_store_href: str) -> AccountStoreMapping:
    """Create a mapping between an application and an account store."""
    return AccountStoreMapping(
        application=Link(href=application_href),
        account_store=Link(href=account_store_href),
    )


__all__ = [
    "Link",
    "AccountStoreMapping",
    "new_account_store_mapping",
]
