"""
Stormpath API Client

Thin executing layer over ``requests``: turns ``StormpathRequest``
descriptors into prepared HTTP requests, sends them and maps failures to the
client's error model. Authentication is left to the session (e.g.
``session.auth``).
"""

from __future__ import annotations
import os
import logging
from dataclasses import dataclass
from typing import Optional, Union
from urllib.parse import urljoin, urlsplit

import requests

from .client.requests import JSON_CONTENT_TYPE, StormpathRequest
from .runtime.codec import decode_json
from .runtime.errors import ErrorCode, TransportError, error_from_response


DEFAULT_BASE_URL = "https://api.stormpath.com/v1"


@dataclass
class ClientConfig:
    """Configuration for the Stormpath API client."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    debug: bool = False
    verify_ssl: bool = True
    user_agent: str = "stormpath-python-client/0.1.0"

    @classmethod
    def from_env(cls) -> ClientConfig:
        """
        Build a configuration from ``STORMPATH_*`` environment variables.

        Recognized: STORMPATH_BASE_URL, STORMPATH_TIMEOUT, STORMPATH_DEBUG.
        Missing variables keep their defaults.
        """
        config = cls()
        if os.environ.get("STORMPATH_BASE_URL"):
            config.base_url = os.environ["STORMPATH_BASE_URL"]
        if os.environ.get("STORMPATH_TIMEOUT"):
            config.timeout = float(os.environ["STORMPATH_TIMEOUT"])
        if os.environ.get("STORMPATH_DEBUG"):
            config.debug = os.environ["STORMPATH_DEBUG"].lower() in ("1", "true", "yes", "on")
        return config


class StormpathClient:
    """
    Sends Stormpath request descriptors over HTTP.

    Example:
        ```python
        with StormpathClient(ClientConfig(base_url="https://api.stormpath.com/v1")) as client:
            client.session.auth = (api_key_id, api_key_secret)
            response = client.send(new_request("GET", "/applications/abc/accounts",
                                               new_default_page_request(), DefaultFilter()))
        ```
    """

    def __init__(self, config: Union[str, ClientConfig, None] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Args:
            config: Base URL string or a ClientConfig (defaults to ClientConfig())
            session: Optional requests.Session, e.g. one with auth configured
        """
        if config is None:
            config = ClientConfig()
        elif isinstance(config, str):
            config = ClientConfig(base_url=config)
        self.config = config

        self.logger = logging.getLogger(__name__)
        if self.config.debug:
            self.logger.setLevel(logging.DEBUG)

        self._session = session or requests.Session()
        self._owns_session = session is None

    @property
    def session(self) -> requests.Session:
        return self._session

    def close(self) -> None:
        """Close the HTTP session if owned by this client."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> StormpathClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def resolve_url(self, url: str) -> str:
        """Resolve a relative resource URL against the configured base URL."""
        if urlsplit(url).scheme:
            return url
        return urljoin(self.config.base_url.rstrip("/") + "/", url.lstrip("/"))

    def prepare(self, request: StormpathRequest) -> requests.PreparedRequest:
        """
        Materialize and prepare a request for sending.

        Raises:
            RequestConstructionError: If the descriptor has an invalid method or URL
        """
        http_request = request.to_http_request()
        http_request.url = self.resolve_url(http_request.url)
        http_request.headers.setdefault("Accept", JSON_CONTENT_TYPE)
        http_request.headers.setdefault("User-Agent", self.config.user_agent)
        return self._session.prepare_request(http_request)

    def send(self, request: StormpathRequest) -> requests.Response:
        """
        Send a request and return the response.

        Redirects are followed only if the descriptor asks for it; a 3xx
        response is otherwise returned as is.

        Raises:
            RequestConstructionError: If the request cannot be built
            TransportError: If the HTTP call fails
            HttpStatusError: If the service answers with status >= 400
        """
        prepared = self.prepare(request)
        self.logger.debug(f"Sending {prepared.method} {prepared.url}")

        try:
            response = self._session.send(
                prepared,
                allow_redirects=request.follow_redirects,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
        except requests.exceptions.Timeout as e:
            raise TransportError(f"Request timed out: {e}", ErrorCode.TIMEOUT, cause=e) from e
        except requests.exceptions.ConnectionError as e:
            raise TransportError(f"Connection failed: {e}", ErrorCode.CONNECTION_FAILED, cause=e) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"HTTP request failed: {e}", cause=e) from e

        self.logger.debug(f"Response: {response.status_code} for {prepared.method} {prepared.url}")

        if response.status_code >= 400:
            try:
                body = decode_json(response.content)
            except ValueError:
                body = None
            error = error_from_response(response.status_code, body)
            self.logger.warning(f"{prepared.method} {prepared.url} failed: {error}")
            raise error

        return response


__all__ = [
    "DEFAULT_BASE_URL",
    "ClientConfig",
    "StormpathClient",
]
