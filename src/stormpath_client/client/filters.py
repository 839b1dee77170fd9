"""
Query filters for collection requests.

A filter is anything with a ``to_query_params()`` method returning a
multi-valued mapping of query parameter names to values. Filters do not share
a base class; ``Filter`` is a structural protocol.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, Field


QueryParams = Dict[str, List[str]]


@runtime_checkable
class Filter(Protocol):
    """Anything that renders itself as query parameters."""

    def to_query_params(self) -> QueryParams:
        ...


class DefaultFilter:
    """Filter that contributes no query parameters."""

    def to_query_params(self) -> QueryParams:
        return {}

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, DefaultFilter)

    def __hash__(self) -> int:
        return hash(DefaultFilter)

    def __repr__(self) -> str:
        return "DefaultFilter()"


class CriteriaFilter(BaseModel):
    """
    Search criteria for directory, group and account collections.

    Every field is optional and only set fields are rendered, each under its
    wire name, e.g. ``CriteriaFilter(given_name="Jean")`` renders
    ``{"givenName": ["Jean"]}``.
    """
    q: Optional[str] = Field(default=None, description="Full text search")
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = Field(default=None, description="ENABLED or DISABLED")
    email: Optional[str] = None
    username: Optional[str] = None
    given_name: Optional[str] = Field(default=None, alias="givenName")
    surname: Optional[str] = None
    order_by: Optional[str] = Field(default=None, alias="orderBy", description="e.g. 'surname asc'")
    expand: Optional[str] = Field(default=None, description="Comma separated links to expand")

    model_config = {"populate_by_name": True, "frozen": True}

    def to_query_params(self) -> QueryParams:
        """Render set fields as query parameters."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        return {key: [str(value)] for key, value in data.items()}


__all__ = [
    "QueryParams",
    "Filter",
    "DefaultFilter",
    "CriteriaFilter",
]
