"""
Application layer: composition of filters.
"""

from .chains import FilterChain

__all__ = ["FilterChain"]
