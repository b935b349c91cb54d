"""
Errors raised by the chart client.

Transport failures are not part of this family: they surface as
`chartclient.connection.TransportError` subtypes, unwrapped.
"""

from __future__ import annotations


class ChartClientError(Exception):
    """Base exception for chart loading errors."""


class InvalidInputError(ChartClientError, ValueError):
    """Raised when neither a slice id nor form data was supplied."""


class UnknownChartTypeError(ChartClientError, LookupError):
    """Raised when no query builder is registered for a chart type."""

    def __init__(self, viz_type: str | None):
        super().__init__(f"Unknown chart type: {viz_type}")
        self.viz_type = viz_type


class AnnotationNotImplementedError(ChartClientError, NotImplementedError):
    """Raised when an annotation layer's source type has no loader."""

    def __init__(self, source_type: str):
        super().__init__(f"Annotation source type is not implemented yet: {source_type}")
        self.source_type = source_type
