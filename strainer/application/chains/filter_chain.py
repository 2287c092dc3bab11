"""
Filter chain - runs several filters in sequence.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Callable, List, Optional

from strainer.exceptions import InvalidArgumentError
from ...infrastructure.filters.base import AbstractFilter
from ...infrastructure.plugin_manager import FilterPluginManager

DEFAULT_PRIORITY = 1000


class FilterChain(AbstractFilter):
    """
    Ordered chain of filters applied one after the other.

    Each callback receives the output of the previous one. Callbacks with a
    higher priority run first; callbacks with equal priority run in the order
    they were attached. Errors raised by a callback propagate unchanged.

    Args:
        options: Optional configuration with 'filters' and/or 'callbacks'
        plugin_manager: Manager used by attach_by_name(); a default
                        FilterPluginManager is created when omitted

    Example:
        from strainer.application.chains import FilterChain
        from strainer.infrastructure.filters import UpperCaseWords
        from strainer.infrastructure.filters.word import UnderscoreToDash

        chain = FilterChain()
        chain.attach(UnderscoreToDash())
        chain.attach(UpperCaseWords())
        chain('hello_world')  # 'Hello-World'

    Configuration example:
        chain = FilterChain({
            'filters': [
                {'name': 'underscore_to_dash'},
                {'name': 'upper_case_words', 'priority': 500},
            ],
            'callbacks': [
                {'callback': str.strip, 'priority': 2000},
            ]
        })
    """

    def __init__(
        self,
        options: Optional[Any] = None,
        plugin_manager: Optional[FilterPluginManager] = None
    ):
        self.plugin_manager = plugin_manager or FilterPluginManager()
        self._queue: list[tuple[int, int, Callable[[Any], Any]]] = []
        self._sequence = 0

        super().__init__(options)

    def __len__(self) -> int:
        return len(self._queue)

    def attach(self, callback: Callable[[Any], Any], priority: int = DEFAULT_PRIORITY) -> "FilterChain":
        """
        Attach a filter or any callable taking one value.

        Args:
            callback: Filter to attach
            priority: Higher values run earlier (default: 1000)

        Returns:
            FilterChain: self

        Raises:
            InvalidArgumentError: If callback is not callable or priority is not an int
        """
        if not callable(callback):
            raise InvalidArgumentError(
                f"Expected a valid filter or callable, got {type(callback).__name__}"
            )

        if isinstance(priority, bool) or not isinstance(priority, int):
            raise InvalidArgumentError(
                f"priority must be an integer, got {type(priority).__name__}"
            )

        self._queue.append((priority, self._sequence, callback))
        self._sequence += 1
        return self

    def attach_by_name(
        self,
        name: str,
        options: Optional[Any] = None,
        priority: int = DEFAULT_PRIORITY
    ) -> "FilterChain":
        """
        Create a filter through the plugin manager and attach it.

        Raises:
            FilterNotFoundError: If the plugin manager does not know name
        """
        return self.attach(self.plugin_manager.get(name, options), priority)

    def merge(self, chain: "FilterChain") -> "FilterChain":
        """Attach every callback of another chain, keeping its priorities."""
        for priority, _, callback in chain._ordered():
            self.attach(callback, priority)
        return self

    def get_filters(self) -> List[Callable[[Any], Any]]:
        """Callbacks in execution order."""
        return [callback for _, _, callback in self._ordered()]

    def set_filters(self, filters: Iterable) -> "FilterChain":
        """
        Attach filters described as {'name', 'options', 'priority'} mappings.

        Raises:
            InvalidArgumentError: If a description has no 'name'
        """
        for spec in self._specs(filters, 'filters'):
            if 'name' not in spec:
                raise InvalidArgumentError(
                    f"Invalid filter specification provided; does not include 'name' key: {spec!r}"
                )
            self.attach_by_name(
                spec['name'],
                spec.get('options'),
                spec.get('priority', DEFAULT_PRIORITY)
            )
        return self

    def set_callbacks(self, callbacks: Iterable) -> "FilterChain":
        """
        Attach callables described as {'callback', 'priority'} mappings.

        Raises:
            InvalidArgumentError: If a description has no 'callback'
        """
        for spec in self._specs(callbacks, 'callbacks'):
            if 'callback' not in spec:
                raise InvalidArgumentError(
                    f"Invalid callback specification provided; does not include 'callback' key: {spec!r}"
                )
            self.attach(spec['callback'], spec.get('priority', DEFAULT_PRIORITY))
        return self

    def filter(self, value: Any) -> Any:
        result = value
        for callback in self.get_filters():
            result = callback(result)
        return result

    def _ordered(self) -> list[tuple[int, int, Callable[[Any], Any]]]:
        return sorted(self._queue, key=lambda entry: (-entry[0], entry[1]))

    @staticmethod
    def _specs(specs: Any, option: str) -> list[Mapping]:
        if not isinstance(specs, Iterable) or isinstance(specs, (str, bytes, Mapping)):
            raise InvalidArgumentError(
                f"'{option}' must be a list of mappings, got {type(specs).__name__}"
            )

        result = list(specs)
        for spec in result:
            if not isinstance(spec, Mapping):
                raise InvalidArgumentError(
                    f"Each entry of '{option}' must be a mapping, got {type(spec).__name__}"
                )
        return result
