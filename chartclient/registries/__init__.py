"""
chartclient Registries

Type-keyed lookup tables consulted by the chart core:
- ChartBuildQueryRegistry: viz_type -> query builder
- AnnotationSourceRegistry: source_type -> annotation loader
"""

from .annotation_sources import (
    AnnotationSourceLoader,
    AnnotationSourceRegistry,
    get_annotation_source_registry,
    reset_annotation_source_registry,
)
from .build_query import (
    BuildQueryFunc,
    ChartBuildQueryRegistry,
    get_chart_build_query_registry,
    reset_chart_build_query_registry,
)

__all__ = [
    "AnnotationSourceLoader",
    "AnnotationSourceRegistry",
    "BuildQueryFunc",
    "ChartBuildQueryRegistry",
    "get_annotation_source_registry",
    "get_chart_build_query_registry",
    "reset_annotation_source_registry",
    "reset_chart_build_query_registry",
]
