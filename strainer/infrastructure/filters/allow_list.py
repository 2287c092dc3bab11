"""
Allow list and deny list filters - keep or drop values by membership.
"""

import warnings
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, List

from strainer.exceptions import InvalidArgumentError
from .base import AbstractFilter, is_scalar, to_string


@dataclass
class ListOptions:
    list: List[Any] = field(default_factory=list)
    strict: bool = False


def _matches(value: Any, item: Any, strict: bool) -> bool:
    if strict:
        return type(value) is type(item) and value == item
    if is_scalar(value) and is_scalar(item):
        return to_string(value) == to_string(item)
    return value == item


class _MembershipFilter(AbstractFilter):
    options_class = ListOptions

    def set_list(self, values: Iterable) -> "_MembershipFilter":
        if not isinstance(values, Iterable) or isinstance(values, (str, bytes)):
            raise InvalidArgumentError(
                f"list must be an iterable of values, got {type(values).__name__}"
            )
        self.options["list"] = list(values)
        return self

    def get_list(self) -> list:
        return self.options["list"]

    def set_strict(self, strict: Any) -> "_MembershipFilter":
        self.options["strict"] = bool(strict)
        return self

    def get_strict(self) -> bool:
        return self.options["strict"]

    def _contains(self, value: Any) -> bool:
        strict = self.get_strict()
        return any(_matches(value, item, strict) for item in self.get_list())


class AllowList(_MembershipFilter):
    """
    Keep a value only when it appears in the configured list.

    Values that are not in the list are replaced by None. In non-strict mode
    scalars are compared by their string form, so 1 matches '1'. In strict
    mode type and value must both match.

    Args:
        options: Optional configuration with 'list' and/or 'strict'

    Example:
        filter = AllowList({'list': ['desktop', 'mobile']})
        filter('mobile')  # 'mobile'
        filter('tablet')  # None
    """

    def filter(self, value: Any) -> Any:
        return value if self._contains(value) else None


class DenyList(_MembershipFilter):
    """
    Drop a value when it appears in the configured list.

    Listed values are replaced by None, everything else is returned as is.
    Comparison follows the same strict/non-strict rules as AllowList.

    Example:
        filter = DenyList({'list': ['tablet'], 'strict': True})
        filter('tablet')  # None
    """

    def filter(self, value: Any) -> Any:
        return None if self._contains(value) else value


class Whitelist(AllowList):
    """Deprecated alias of AllowList."""

    def __init__(self, options=None):
        warnings.warn(
            "Whitelist is deprecated, use AllowList instead",
            DeprecationWarning,
            stacklevel=2
        )
        super().__init__(options)


class Blacklist(DenyList):
    """Deprecated alias of DenyList."""

    def __init__(self, options=None):
        warnings.warn(
            "Blacklist is deprecated, use DenyList instead",
            DeprecationWarning,
            stacklevel=2
        )
        super().__init__(options)
