"""
Filter plugin manager - resolves filters by short name.
"""

import re
import warnings
from typing import Any, Callable, Dict, List, Optional

from strainer.exceptions import FilterNotFoundError, InvalidArgumentError
from .filters import AllowList, DenyList, UpperCaseWords
from .filters.word import (
    DashToUnderscore,
    SeparatorToSeparator,
    UnderscoreToDash,
    UnderscoreToStudlyCase,
)

FilterFactory = Callable[..., Callable[[Any], Any]]

DEFAULT_FILTERS: Dict[str, FilterFactory] = {
    'allowlist': AllowList,
    'denylist': DenyList,
    'uppercasewords': UpperCaseWords,
    'wordseparatortoseparator': SeparatorToSeparator,
    'worddashtounderscore': DashToUnderscore,
    'wordunderscoretodash': UnderscoreToDash,
    'wordunderscoretostudlycase': UnderscoreToStudlyCase,
}

DEFAULT_ALIASES: Dict[str, str] = {
    'separatortoseparator': 'wordseparatortoseparator',
    'dashtounderscore': 'worddashtounderscore',
    'underscoretodash': 'wordunderscoretodash',
    'underscoretostudlycase': 'wordunderscoretostudlycase',
}

# Old names kept for backwards compatibility, resolved with a DeprecationWarning
DEPRECATED_ALIASES: Dict[str, str] = {
    'whitelist': 'allowlist',
    'blacklist': 'denylist',
}


def normalize_name(name: str) -> str:
    """Lower-case a filter name and strip separators ('Word\\Dash_To-Underscore' -> 'worddashtounderscore')."""
    return re.sub(r"[\s_\-.\\]", "", name).lower()


class FilterPluginManager:
    """
    Registry that creates filters from short names.

    Names are matched after normalization, so 'AllowList', 'allow_list' and
    'allow-list' all resolve to the same filter. Every get() call returns a
    new instance.

    Args:
        filters: Optional extra factories to register, keyed by name

    Example:
        manager = FilterPluginManager()
        dash = manager.get('underscore_to_dash')
        dash('a_b')  # 'a-b'

        allow = manager.get('allow_list', {'list': ['a', 'b']})
    """

    def __init__(self, filters: Optional[Dict[str, FilterFactory]] = None):
        self._factories: dict[str, FilterFactory] = dict(DEFAULT_FILTERS)
        self._aliases: dict[str, str] = dict(DEFAULT_ALIASES)

        for name, factory in (filters or {}).items():
            self.register(name, factory)

    def register(self, name: str, factory: FilterFactory) -> None:
        """
        Register a filter factory under a name.

        Args:
            name: Short name of the filter
            factory: Filter class or any callable returning a filter;
                     called with the options as single argument when
                     options are given, without arguments otherwise

        Raises:
            InvalidArgumentError: If name is empty or factory is not callable
        """
        if not isinstance(name, str) or not normalize_name(name):
            raise InvalidArgumentError(f"Filter name must be a non-empty string, got {name!r}")

        if not callable(factory):
            raise InvalidArgumentError(
                f"Factory for filter '{name}' must be callable, got {type(factory).__name__}"
            )

        key = normalize_name(name)
        self._aliases.pop(key, None)
        self._factories[key] = factory

    def has(self, name: str) -> bool:
        return self._resolve(name, warn=False) is not None

    def names(self) -> List[str]:
        """Normalized names of all registered filters, aliases excluded."""
        return sorted(self._factories)

    def get(self, name: str, options: Optional[Any] = None) -> Callable[[Any], Any]:
        """
        Create a new filter instance.

        Args:
            name: Filter name or alias
            options: Optional configuration passed to the filter

        Returns:
            The new filter

        Raises:
            FilterNotFoundError: If no filter is registered under name
        """
        key = self._resolve(name, warn=True)
        if key is None:
            raise FilterNotFoundError(
                f"A filter by the name '{name}' was not found. "
                f"Available filters: {self.names()}"
            )

        factory = self._factories[key]
        if options is None:
            return factory()
        return factory(options)

    def _resolve(self, name: str, warn: bool) -> Optional[str]:
        if not isinstance(name, str):
            return None

        key = normalize_name(name)

        if key in DEPRECATED_ALIASES and key not in self._factories:
            if warn:
                warnings.warn(
                    f"Filter name '{name}' is deprecated, use '{DEPRECATED_ALIASES[key]}' instead",
                    DeprecationWarning,
                    stacklevel=3
                )
            key = DEPRECATED_ALIASES[key]

        key = self._aliases.get(key, key)
        return key if key in self._factories else None
