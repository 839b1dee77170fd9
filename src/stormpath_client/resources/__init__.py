"""Stormpath resource models."""

from .models import Link, AccountStoreMapping, new_account_store_mapping

__all__ = [
    "Link",
    "AccountStoreMapping",
    "new_account_store_mapping",
]
