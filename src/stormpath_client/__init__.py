"""
Stormpath Python Client

Builds and sends requests to the Stormpath identity-management REST API:
request descriptors with pagination and filters, resource models and a thin
executing client on top of ``requests``.
"""

from .client import *
from .resources import Link, AccountStoreMapping, new_account_store_mapping
from .runtime.errors import *
from .runtime.codec import encode_json, decode_json
from .api_client import ClientConfig, StormpathClient

__version__ = "0.1.0"
__all__ = [
    # Request construction
    "QueryParams",
    "Filter",
    "DefaultFilter",
    "CriteriaFilter",
    "HttpMethod",
    "PageRequest",
    "StormpathRequest",
    "new_page_request",
    "new_default_page_request",
    "new_delete_request",
    "new_post_request",
    "new_put_request",
    "new_request",
    "new_request_no_redirects",
    # Resources
    "Link",
    "AccountStoreMapping",
    "new_account_store_mapping",
    # Errors
    "ErrorCode",
    "StormpathError",
    "SerializationError",
    "RequestConstructionError",
    "TransportError",
    "HttpStatusError",
    "error_from_response",
    # Codec
    "encode_json",
    "decode_json",
    # Client
    "ClientConfig",
    "StormpathClient",
]
