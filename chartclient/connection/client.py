"""
Superset HTTP client for chartclient.

Async access to the Superset endpoints the chart core consumes. It handles
authentication headers, JSON parsing and error mapping; it does NOT retry.

Usage:
    async with SupersetClient(ConnectionConfig(base_url="https://bi.example.com")) as client:
        response = await client.get(RequestConfig(endpoint="/api/v1/formData/?slice_id=42"))
        form_data = response.json["form_data"]
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from chartclient.connection.base import (
    AuthenticationError,
    ClientResponse,
    ConnectionConfig,
    NotFoundError,
    RateLimitError,
    RequestConfig,
    ResponseParseError,
    TransportError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Per-call options from RequestConfig.extra that httpx understands
HTTPX_REQUEST_OPTIONS = frozenset({"cookies", "follow_redirects", "extensions"})


def _parse_retry_after(value: str | None) -> float | None:
    """Seconds from a numeric Retry-After header; None for dates or garbage."""
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


class SupersetClient:
    """
    Async transport backed by httpx.

    Provides:
    - HTTP client management
    - Authentication header injection
    - Error mapping to TransportError subtypes
    - Request/response logging
    """

    def __init__(self, config: ConnectionConfig | None = None):
        """
        Initialize the client.

        Args:
            config: Connection configuration (defaults to a local Superset)
        """
        self.config = config or ConnectionConfig()
        self._client: httpx.AsyncClient | None = None

    @property
    def name(self) -> str:
        """Transport name used in logs and errors."""
        return "superset"

    def _get_auth_headers(self) -> dict[str, str]:
        """Return authentication headers for requests."""
        headers: dict[str, str] = {}
        if self.config.access_token:
            headers["Authorization"] = f"Bearer {self.config.access_token}"
        if self.config.csrf_token:
            headers["X-CSRFToken"] = self.config.csrf_token
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=self.config.timeout,
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                    **self._get_auth_headers(),
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    # =========================================================================
    # Transport protocol
    # =========================================================================

    async def get(self, config: RequestConfig) -> ClientResponse:
        """Issue a GET and return the parsed body."""
        response = await self._request("GET", config)
        return self._parse_response(response)

    async def post(self, config: RequestConfig) -> ClientResponse:
        """Issue a POST with `post_payload` as the JSON body."""
        response = await self._request("POST", config, json=config.post_payload)
        return self._parse_response(response)

    # =========================================================================
    # Internals
    # =========================================================================

    async def _request(
        self,
        method: str,
        config: RequestConfig,
        *,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """
        Execute a single HTTP request.

        Raises:
            TransportError: On timeout, network failure or non-2xx status
        """
        client = await self._get_client()

        if self.config.log_requests:
            logger.debug(f"[{self.name}] {method} {config.endpoint} params={config.params} body={json}")

        extra: dict[str, Any] = {
            key: value for key, value in config.extra.items() if key in HTTPX_REQUEST_OPTIONS
        }
        if config.timeout is not None:
            extra["timeout"] = config.timeout
        if config.auth is not None:
            extra["auth"] = config.auth

        try:
            response = await client.request(
                method=method,
                url=config.endpoint,
                params=config.params,
                json=json,
                headers=config.headers,
                **extra,
            )
        except httpx.TimeoutException as e:
            raise TransportError(f"Request timeout: {e}", self.name) from e
        except httpx.NetworkError as e:
            raise TransportError(f"Network error: {e}", self.name) from e

        if self.config.log_responses:
            logger.debug(
                f"[{self.name}] Response: status={response.status_code} "
                f"body={response.text[:500] if response.text else 'empty'}"
            )

        self._check_response(response)
        return response

    def _parse_response(self, response: httpx.Response) -> ClientResponse:
        """Parse a successful response body as JSON."""
        try:
            body = response.json()
        except ValueError as e:
            raise ResponseParseError(
                f"Invalid JSON response: {e}",
                self.name,
                status_code=response.status_code,
                response_body=response.text,
            ) from e

        return ClientResponse(
            json=body,
            status_code=response.status_code,
            headers=dict(response.headers),
        )

    def _check_response(self, response: httpx.Response) -> None:
        """
        Check response for errors and raise appropriate exceptions.

        Raises:
            AuthenticationError: For 401/403
            RateLimitError: For 429
            NotFoundError: For 404
            ValidationError: For 400/422
            TransportError: For other errors
        """
        if response.is_success:
            return

        status = response.status_code
        body = response.text

        if status in (401, 403):
            raise AuthenticationError(
                f"Authentication failed: {body}",
                self.name,
                status_code=status,
                response_body=body,
            )

        if status == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                "Rate limit exceeded",
                self.name,
                status_code=status,
                response_body=body,
                retry_after=_parse_retry_after(retry_after),
            )

        if status == 404:
            raise NotFoundError(
                f"Resource not found: {body}",
                self.name,
                status_code=status,
                response_body=body,
            )

        if status in (400, 422):
            raise ValidationError(
                f"Validation error: {body}",
                self.name,
                status_code=status,
                response_body=body,
            )

        raise TransportError(
            f"Request failed: {body}",
            self.name,
            status_code=status,
            response_body=body,
        )

    async def __aenter__(self) -> SupersetClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()


# Process-wide default client
_default_client: SupersetClient | None = None


def get_superset_client() -> SupersetClient:
    """
    Get the default Superset client.

    Built from environment settings on first access (lazy initialization).
    """
    global _default_client
    if _default_client is None:
        from chartclient.config import get_settings

        _default_client = SupersetClient(ConnectionConfig.from_settings(get_settings()))
        logger.debug(f"Created default Superset client for {_default_client.config.base_url}")
    return _default_client


def reset_superset_client() -> None:
    """
    Drop the default client (for testing).

    The underlying httpx client is not closed; callers owning a running
    loop should `await get_superset_client().close()` first.
    """
    global _default_client
    _default_client = None
