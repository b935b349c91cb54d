"""
Base types for the chartclient transport layer.

This module defines the request/response contract between the chart
orchestration core and whatever performs the actual HTTP calls, plus the
exception family every transport raises.

Design Principles:
1. Async-first: All I/O operations are async
2. Pass-through: Per-call options are forwarded untouched
3. Fail loudly: Every HTTP failure maps to a TransportError subtype

Retries are intentionally absent here. A slow or failing call propagates
straight to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from dataclasses import fields as dataclass_fields
from typing import TYPE_CHECKING, Any, Mapping, Protocol, runtime_checkable

if TYPE_CHECKING:
    from chartclient.config.schemas import ClientSettings


# =============================================================================
# Exceptions
# =============================================================================


class TransportError(Exception):
    """Base exception for transport failures."""

    def __init__(
        self,
        message: str,
        transport: str = "superset",
        *,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.transport = transport
        self.status_code = status_code
        self.response_body = response_body

    def __str__(self) -> str:
        parts = [f"[{self.transport}] {self.args[0]}"]
        if self.status_code:
            parts.append(f"(status={self.status_code})")
        return " ".join(parts)


class AuthenticationError(TransportError):
    """Raised when authentication fails (401/403)."""


class NotFoundError(TransportError):
    """Raised when a resource is not found (404)."""


class ValidationError(TransportError):
    """Raised when request validation fails (400/422)."""


class RateLimitError(TransportError):
    """Raised when rate limit is exceeded (429). Never retried here."""

    def __init__(
        self,
        message: str,
        transport: str = "superset",
        *,
        retry_after: float | None = None,
        **kwargs,
    ):
        super().__init__(message, transport, **kwargs)
        self.retry_after = retry_after


class ResponseParseError(TransportError):
    """Raised when a response body is not valid JSON."""


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True, slots=True)
class ConnectionConfig:
    """Configuration for a transport client."""

    # Connection
    base_url: str = "http://localhost:8088"
    timeout: float = 30.0

    # Authentication
    access_token: str | None = None
    csrf_token: str | None = None

    # Observability
    log_requests: bool = False
    log_responses: bool = False

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> ConnectionConfig:
        """Build a connection config from application settings."""
        access_token = settings.access_token.get_secret_value() if settings.access_token else None
        csrf_token = settings.csrf_token.get_secret_value() if settings.csrf_token else None
        return cls(
            base_url=settings.base_url,
            timeout=settings.timeout,
            access_token=access_token or None,
            csrf_token=csrf_token or None,
            log_requests=settings.log_requests,
            log_responses=settings.log_responses,
        )


# =============================================================================
# Request / Response
# =============================================================================


@dataclass(frozen=True, slots=True)
class RequestConfig:
    """
    A single request as issued by the chart core.

    The core only sets `endpoint` and, for POSTs, `post_payload`. All other
    fields come from per-call options and are forwarded as given. Options
    that are not fields land in `extra`.
    """

    endpoint: str
    post_payload: dict[str, Any] | None = None
    headers: dict[str, str] | None = None
    params: dict[str, Any] | None = None
    timeout: float | None = None
    auth: Any = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        endpoint: str,
        options: Mapping[str, Any] | None = None,
        **fields: Any,
    ) -> RequestConfig:
        """
        Build a request config with per-call options layered on top.

        Options win over the core-provided values, including `endpoint`.
        Unknown options are kept in `extra` for the transport.
        """
        merged = {"endpoint": endpoint, **fields, **(options or {})}
        known = {f.name for f in dataclass_fields(cls)} - {"extra"}
        extra = {**merged.pop("extra", {})}
        for key in list(merged):
            if key not in known:
                extra[key] = merged.pop(key)
        return cls(**merged, extra=extra)


@dataclass(frozen=True, slots=True)
class ClientResponse:
    """Parsed response from a transport call."""

    json: Any
    status_code: int = 200
    headers: dict[str, str] = field(default_factory=dict)


@runtime_checkable
class Transport(Protocol):
    """
    Protocol for anything that can serve the chart core's requests.

    Implementations resolve with a parsed body or raise a TransportError.
    """

    async def get(self, config: RequestConfig) -> ClientResponse:
        ...

    async def post(self, config: RequestConfig) -> ClientResponse:
        ...
