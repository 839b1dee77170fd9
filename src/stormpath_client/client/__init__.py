"""
Request construction for the Stormpath client.

Re-exports the request descriptors, pagination and filters.
"""

from .filters import QueryParams, Filter, DefaultFilter, CriteriaFilter
from .requests import (
    OFFSET,
    LIMIT,
    DEFAULT_LIMIT,
    HttpMethod,
    PageRequest,
    StormpathRequest,
    encode_query,
    new_page_request,
    new_default_page_request,
    new_delete_request,
    new_post_request,
    new_put_request,
    new_request,
    new_request_no_redirects,
)

__all__ = [
    "QueryParams",
    "Filter",
    "DefaultFilter",
    "CriteriaFilter",
    "OFFSET",
    "LIMIT",
    "DEFAULT_LIMIT",
    "HttpMethod",
    "PageRequest",
    "StormpathRequest",
    "encode_query",
    "new_page_request",
    "new_default_page_request",
    "new_delete_request",
    "new_post_request",
    "new_put_request",
    "new_request",
    "new_request_no_redirects",
]
