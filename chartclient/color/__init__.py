"""
chartclient Color

Color scheme configuration.
"""

from .scheme import ColorScheme

__all__ = ["ColorScheme"]
