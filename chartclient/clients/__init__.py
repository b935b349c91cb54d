"""
chartclient Clients

The chart orchestration client and its error taxonomy.
"""

from .chart_client import ChartClient, RequestOptions
from .errors import (
    AnnotationNotImplementedError,
    ChartClientError,
    InvalidInputError,
    UnknownChartTypeError,
)

__all__ = [
    "AnnotationNotImplementedError",
    "ChartClient",
    "ChartClientError",
    "InvalidInputError",
    "RequestOptions",
    "UnknownChartTypeError",
]
