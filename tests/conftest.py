"""
Pytest configuration and fixtures for chartclient tests.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

# Add the repository root to path for imports
# This allows `from chartclient.clients import ...` to work
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from chartclient.connection import ClientResponse  # noqa: E402
from chartclient.registries import (  # noqa: E402
    reset_annotation_source_registry,
    reset_chart_build_query_registry,
)


@pytest.fixture(autouse=True)
def clean_registries():
    """Give every test fresh global registries."""
    reset_chart_build_query_registry()
    reset_annotation_source_registry()
    yield
    reset_chart_build_query_registry()
    reset_annotation_source_registry()


@pytest.fixture
def stored_form_data():
    """Stored form data as returned by the formData endpoint."""
    return {
        "viz_type": "bar",
        "datasource": "ds1",
        "annotation_layers": [],
    }


@pytest.fixture
def mock_transport(stored_form_data):
    """
    Transport double serving the three Superset endpoints.

    GET routes on the endpoint prefix, POST always answers the query endpoint.
    """
    transport = AsyncMock()

    async def get(config):
        if config.endpoint.startswith("/api/v1/formData/"):
            return ClientResponse(json={"form_data": stored_form_data})
        if config.endpoint.startswith("/superset/fetch_datasource_metadata"):
            return ClientResponse(json={"cols": []})
        raise AssertionError(f"Unexpected GET {config.endpoint}")

    async def post(config):
        return ClientResponse(json={"rows": []})

    transport.get.side_effect = get
    transport.post.side_effect = post
    return transport
