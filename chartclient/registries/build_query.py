"""
Chart Build-Query Registry for chartclient.

Maps a chart type (`viz_type`) to the function that turns form data into a
query-context payload. The chart core only ever reads from it; plugins
register their builders at application startup.

Example:
    registry = get_chart_build_query_registry()
    registry.register("bar", build_bar_query)

    build_query = registry.get(form_data.viz_type)
    payload = build_query(form_data)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from chartclient.query.form_data import FormData

logger = logging.getLogger(__name__)

BuildQueryFunc = Callable[["FormData"], Any]
"""Pure, synchronous builder: form data in, query payload out."""


class ChartBuildQueryRegistry:
    """
    Registry of query builders keyed by chart type.

    Lookups are read-only and safe to share between concurrent chart loads.
    """

    def __init__(self) -> None:
        self._builders: dict[str, BuildQueryFunc] = {}

    def register(self, viz_type: str, build_query: BuildQueryFunc) -> None:
        """
        Register a builder.

        Args:
            viz_type: Chart type key
            build_query: Builder function

        Note:
            An existing builder for the same key is replaced (useful for testing).
        """
        if viz_type in self._builders:
            logger.warning(f"Replacing existing query builder: {viz_type}")
        self._builders[viz_type] = build_query
        logger.info(f"Registered query builder: {viz_type}")

    def get(self, viz_type: str) -> BuildQueryFunc | None:
        """Get the builder for a chart type, or None if there is none."""
        return self._builders.get(viz_type)

    def has(self, viz_type: str) -> bool:
        """Check if a builder is registered."""
        return viz_type in self._builders

    def keys(self) -> list[str]:
        """Get list of registered chart types."""
        return list(self._builders.keys())

    def unregister(self, viz_type: str) -> bool:
        """
        Unregister a builder.

        Returns:
            True if the builder was removed, False if not found
        """
        if viz_type in self._builders:
            del self._builders[viz_type]
            logger.info(f"Unregistered query builder: {viz_type}")
            return True
        return False

    def clear(self) -> None:
        """Clear all registered builders (for testing)."""
        self._builders.clear()
        logger.debug("Cleared all query builders")

    def __len__(self) -> int:
        return len(self._builders)

    def __contains__(self, viz_type: str) -> bool:
        return viz_type in self._builders


# Global registry instance
_registry: ChartBuildQueryRegistry | None = None


def get_chart_build_query_registry() -> ChartBuildQueryRegistry:
    """
    Get the global build-query registry.

    Creates the registry on first access (lazy initialization).
    """
    global _registry
    if _registry is None:
        _registry = ChartBuildQueryRegistry()
    return _registry


def reset_chart_build_query_registry() -> None:
    """Reset the global build-query registry (for testing)."""
    global _registry
    if _registry is not None:
        _registry.clear()
    _registry = None
