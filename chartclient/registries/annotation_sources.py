"""
Annotation source registry.

Resolving an annotation layer that names a `source_type` is dispatched
through this registry. It ships empty: until a loader is registered for a
source type, layers of that type fail with AnnotationNotImplementedError.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Awaitable, Mapping, Protocol

if TYPE_CHECKING:
    from chartclient.connection.base import Transport
    from chartclient.query.form_data import AnnotationLayerMetadata

logger = logging.getLogger(__name__)


class AnnotationSourceLoader(Protocol):
    """Async loader for one annotation source type."""

    def __call__(
        self,
        layer: AnnotationLayerMetadata,
        client: Transport,
        options: Mapping[str, Any] | None,
    ) -> Awaitable[Any]:
        ...


class AnnotationSourceRegistry:
    """Registry of annotation loaders keyed by source type."""

    def __init__(self) -> None:
        self._loaders: dict[str, AnnotationSourceLoader] = {}

    def register(self, source_type: str, loader: AnnotationSourceLoader) -> None:
        if source_type in self._loaders:
            logger.warning(f"Replacing existing annotation loader: {source_type}")
        self._loaders[source_type] = loader
        logger.info(f"Registered annotation loader: {source_type}")

    def get(self, source_type: str) -> AnnotationSourceLoader | None:
        return self._loaders.get(source_type)

    def has(self, source_type: str) -> bool:
        return source_type in self._loaders

    def keys(self) -> list[str]:
        return list(self._loaders.keys())

    def unregister(self, source_type: str) -> bool:
        if source_type in self._loaders:
            del self._loaders[source_type]
            logger.info(f"Unregistered annotation loader: {source_type}")
            return True
        return False

    def clear(self) -> None:
        self._loaders.clear()


_registry: AnnotationSourceRegistry | None = None


def get_annotation_source_registry() -> AnnotationSourceRegistry:
    """Get the global annotation source registry (lazy)."""
    global _registry
    if _registry is None:
        _registry = AnnotationSourceRegistry()
    return _registry


def reset_annotation_source_registry() -> None:
    """Reset the global annotation source registry (for testing)."""
    global _registry
    if _registry is not None:
        _registry.clear()
    _registry = None
