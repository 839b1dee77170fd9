"""
Request descriptors and pagination support for the Stormpath client.

A ``StormpathRequest`` describes one API call: method, resource URL, JSON
payload, pagination window, filter and any extra query parameters. Calling
``to_http_request()`` merges the query sources and returns a
``requests.Request`` ready to be prepared and sent.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Union
from urllib.parse import urlencode, urlsplit

import requests

from .filters import DefaultFilter, Filter, QueryParams
from ..runtime.codec import encode_json
from ..runtime.errors import ErrorCode, RequestConstructionError

logger = logging.getLogger(__name__)


OFFSET = "offset"
LIMIT = "limit"
DEFAULT_LIMIT = 25
JSON_CONTENT_TYPE = "application/json"


class HttpMethod(str, Enum):
    """HTTP methods used by the Stormpath API."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, value: Union[str, "HttpMethod"]) -> "HttpMethod":
        """Accept a member or its name in any case."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError as e:
            raise RequestConstructionError(
                f"Unsupported HTTP method: {value!r}",
                ErrorCode.INVALID_METHOD,
                details={"method": value},
                cause=e,
            ) from e

    @property
    def has_body(self) -> bool:
        return self in (HttpMethod.POST, HttpMethod.PUT)


@dataclass(frozen=True)
class PageRequest:
    """
    Offset/limit pagination window.

    Values are not validated: a negative offset or a non-positive limit simply
    means no pagination is requested.
    """
    limit: int = 0
    offset: int = 0

    def to_query_params(self) -> QueryParams:
        """Render as query parameters, or nothing if the window is not usable."""
        if self.offset >= 0 and self.limit > 0:
            return {OFFSET: [str(self.offset)], LIMIT: [str(self.limit)]}
        return {}


def new_page_request(limit: int, offset: int) -> PageRequest:
    return PageRequest(limit=limit, offset=offset)


def new_default_page_request() -> PageRequest:
    return PageRequest(limit=DEFAULT_LIMIT, offset=0)


@dataclass
class StormpathRequest:
    """Description of a single API request."""
    method: HttpMethod
    url: str
    follow_redirects: bool = True
    payload: bytes = b""
    page_request: PageRequest = field(default_factory=PageRequest)
    filter: Filter = field(default_factory=DefaultFilter)
    extra_params: QueryParams = field(default_factory=dict)

    def query_params(self) -> QueryParams:
        """
        Merge pagination, filter and extra parameters.

        Later sources replace earlier ones key by key, so the precedence is
        extra params, then filter, then pagination.
        """
        query = self.page_request.to_query_params()
        _replace_keys(query, self.filter.to_query_params())
        _replace_keys(query, self.extra_params or {})
        return query

    def encoded_url(self) -> str:
        """Resource URL with the merged query string, always joined by '?'."""
        return f"{self.url}?{encode_query(self.query_params())}"

    def to_http_request(self) -> requests.Request:
        """
        Build the transport request for this descriptor.

        Returns:
            requests.Request with method, URL, body and headers set

        Raises:
            RequestConstructionError: If the method or URL is invalid
        """
        method = HttpMethod.parse(self.method)
        url = self.encoded_url()
        _check_url(url)

        headers: Dict[str, str] = {}
        if method.has_body:
            headers["Content-Type"] = JSON_CONTENT_TYPE

        logger.debug(f"Request: {method.value} {url} ({len(self.payload or b'')} bytes)")
        return requests.Request(
            method=method.value,
            url=url,
            headers=headers,
            data=bytes(self.payload or b""),
        )


def encode_query(query: QueryParams) -> str:
    """URL-encode a multi-valued mapping, keys sorted, repeated keys for multiple values."""
    return urlencode([(key, value) for key in sorted(query) for value in query[key]])


def _replace_keys(query: QueryParams, overrides: Dict[str, Any]) -> None:
    for key, values in overrides.items():
        query[key] = _as_values(values)


def _as_values(values: Union[str, bytes, Iterable[Any]]) -> list:
    if isinstance(values, (str, bytes)):
        values = [values]
    return [_as_text(value) for value in values]


def _as_text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def _check_url(url: str) -> None:
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in url):
        raise RequestConstructionError(
            "Invalid control character in URL", ErrorCode.INVALID_URL, details={"url": url}
        )
    try:
        urlsplit(url).port
    except ValueError as e:
        raise RequestConstructionError(
            f"Invalid URL: {e}", ErrorCode.INVALID_URL, details={"url": url}, cause=e
        ) from e


def new_delete_request(url: str) -> StormpathRequest:
    return StormpathRequest(method=HttpMethod.DELETE, url=url, follow_redirects=True)


def new_post_request(url: str, payload: Any, extra_params: Optional[QueryParams] = None) -> StormpathRequest:
    """
    Request that POSTs ``payload`` as JSON.

    Raises:
        SerializationError: If the payload cannot be encoded as JSON
    """
    return StormpathRequest(
        method=HttpMethod.POST,
        url=url,
        payload=encode_json(payload),
        extra_params=dict(extra_params or {}),
        follow_redirects=True,
    )


def new_put_request(url: str, payload: Any, extra_params: Optional[QueryParams] = None) -> StormpathRequest:
    """Same as ``new_post_request`` with PUT."""
    return StormpathRequest(
        method=HttpMethod.PUT,
        url=url,
        payload=encode_json(payload),
        extra_params=dict(extra_params or {}),
        follow_redirects=True,
    )


def new_request(method: Union[str, HttpMethod], url: str, page_request: PageRequest,
                filter: Filter) -> StormpathRequest:
    return StormpathRequest(
        method=HttpMethod.parse(method),
        url=url,
        page_request=page_request,
        filter=filter,
        follow_redirects=True,
    )


def new_request_no_redirects(method: Union[str, HttpMethod], url: str, page_request: PageRequest,
                             filter: Filter) -> StormpathRequest:
    """Like ``new_request`` but redirects are returned to the caller instead of followed."""
    return StormpathRequest(
        method=HttpMethod.parse(method),
        url=url,
        page_request=page_request,
        filter=filter,
        follow_redirects=False,
    )


__all__ = [
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
