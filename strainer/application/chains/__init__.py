"""
Filter chains.
"""

from .filter_chain import FilterChain, DEFAULT_PRIORITY

__all__ = ["FilterChain", "DEFAULT_PRIORITY"]
