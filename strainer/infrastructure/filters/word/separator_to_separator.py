"""
Separator to separator filter - replaces one word separator with another.
"""

from dataclasses import dataclass
from typing import Any

from strainer.exceptions import InvalidArgumentError
from ..base import AbstractFilter


@dataclass
class SeparatorToSeparatorOptions:
    search_separator: str = " "
    replacement_separator: str = "-"


class SeparatorToSeparator(AbstractFilter):
    """
    Replace every occurrence of a search separator with a replacement separator.

    Scalars are converted to strings before filtering. Lists, tuples and
    dicts are filtered item by item; None and other objects are returned
    unchanged.

    Args:
        options: Optional configuration with 'search_separator' and/or
                 'replacement_separator'

    Example:
        filter = SeparatorToSeparator({'search_separator': '.', 'replacement_separator': '/'})
        filter('a.b.c')  # 'a/b/c'
    """

    options_class = SeparatorToSeparatorOptions

    def set_search_separator(self, separator: str) -> "SeparatorToSeparator":
        if not isinstance(separator, str) or not separator:
            raise InvalidArgumentError(
                f"search_separator must be a non-empty string, got {separator!r}"
            )
        self.options["search_separator"] = separator
        return self

    def get_search_separator(self) -> str:
        return self.options["search_separator"]

    def set_replacement_separator(self, separator: str) -> "SeparatorToSeparator":
        if not isinstance(separator, str):
            raise InvalidArgumentError(
                f"replacement_separator must be a string, got {type(separator).__name__}"
            )
        self.options["replacement_separator"] = separator
        return self

    def get_replacement_separator(self) -> str:
        return self.options["replacement_separator"]

    def filter(self, value: Any) -> Any:
        search = self.get_search_separator()
        replacement = self.get_replacement_separator()

        def replace(item: Any) -> Any:
            return item.replace(search, replacement) if isinstance(item, str) else item

        return self.apply_to_stringable_values(value, lambda v: map_strings(v, replace))


def map_strings(value: Any, func: Any) -> Any:
    """
    Apply func to a string or to each item of a list, tuple or dict.

    Used as the body of word filters that work on one word at a time.
    """
    if isinstance(value, list):
        return [func(item) for item in value]
    if isinstance(value, tuple):
        return tuple(func(item) for item in value)
    if isinstance(value, dict):
        return {key: func(item) for key, item in value.items()}
    return func(value)
