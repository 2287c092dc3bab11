"""
Infrastructure components: filters and the filter plugin manager.
"""

from . import filters
from .plugin_manager import FilterPluginManager

__all__ = [
    'filters',
    'FilterPluginManager'
]
