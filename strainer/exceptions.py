"""
Exception types raised by strainer filters.
"""


class FilterError(Exception):
    """Base class for every error raised by the library."""


class InvalidArgumentError(FilterError, ValueError):
    """
    Raised when a filter receives an invalid configuration.

    Covers configuration values that are neither a mapping nor an iterable
    of pairs, option keys that match neither a setter nor an options slot,
    and values rejected by a setter.
    """


class FilterRuntimeError(FilterError, RuntimeError):
    """Raised when a filter is in a state that makes filtering impossible."""


class FilterNotFoundError(FilterError, LookupError):
    """Raised when a plugin manager cannot resolve a filter name."""


__all__ = [
    "FilterError",
    "InvalidArgumentError",
    "FilterRuntimeError",
    "FilterNotFoundError",
]
