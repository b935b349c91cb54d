"""
chartclient - async loader for everything a chart needs to render.

Given a saved slice id and/or explicit form data, chartclient resolves the
chart's form data and then, concurrently:

- **Query Data**: Builds the query context with the builder registered for the
  chart's `viz_type` and runs it
- **Datasource**: Fetches metadata for the chart's datasource
- **Annotations**: Resolves the chart's annotation layers

Quick Start:
    >>> from chartclient import ChartClient, SliceIdAndOrFormData
    >>> from chartclient.registries import get_chart_build_query_registry
    >>>
    >>> get_chart_build_query_registry().register("bar", build_bar_query)
    >>> chart = await ChartClient().load_chart_data(SliceIdAndOrFormData(slice_id=42))
    >>> chart.to_dict()
"""

__version__ = "0.1.0"
__license__ = "MIT"

from chartclient.clients import (
    AnnotationNotImplementedError,
    ChartClient,
    ChartClientError,
    InvalidInputError,
    UnknownChartTypeError,
)
from chartclient.connection import SupersetClient, TransportError
from chartclient.query import (
    AnnotationLayerMetadata,
    ChartData,
    FormData,
    SliceIdAndOrFormData,
)

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Core
    "ChartClient",
    "SupersetClient",
    # Types
    "AnnotationLayerMetadata",
    "ChartData",
    "FormData",
    "SliceIdAndOrFormData",
    # Errors
    "AnnotationNotImplementedError",
    "ChartClientError",
    "InvalidInputError",
    "TransportError",
    "UnknownChartTypeError",
]
