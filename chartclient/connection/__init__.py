"""
chartclient Connection Layer.

Transport contract and the default httpx-backed Superset client.

Usage:
    from chartclient.connection import SupersetClient, ConnectionConfig

    client = SupersetClient(ConnectionConfig(base_url="https://bi.example.com"))
    response = await client.get(RequestConfig(endpoint="/api/v1/formData/?slice_id=1"))
"""

from chartclient.connection.base import (
    AuthenticationError,
    ClientResponse,
    ConnectionConfig,
    NotFoundError,
    RateLimitError,
    RequestConfig,
    ResponseParseError,
    Transport,
    TransportError,
    ValidationError,
)
from chartclient.connection.client import (
    SupersetClient,
    get_superset_client,
    reset_superset_client,
)

__all__ = [
    "AuthenticationError",
    "ClientResponse",
    "ConnectionConfig",
    "NotFoundError",
    "RateLimitError",
    "RequestConfig",
    "ResponseParseError",
    "SupersetClient",
    "Transport",
    "TransportError",
    "ValidationError",
    "get_superset_client",
    "reset_superset_client",
]
