"""
chartclient Query Types

Form data, orchestration input and the chart aggregate.
"""

from .form_data import (
    AnnotationData,
    AnnotationLayerMetadata,
    ChartData,
    FormData,
    SliceIdAndOrFormData,
)

__all__ = [
    "AnnotationData",
    "AnnotationLayerMetadata",
    "ChartData",
    "FormData",
    "SliceIdAndOrFormData",
]
