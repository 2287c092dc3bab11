"""
Base class for value filters.
"""

import numbers
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any, Callable, ClassVar, Dict, Optional

import numpy as np

from strainer.exceptions import InvalidArgumentError


@dataclass
class NoOptions:
    """Options declaration for filters that take no options."""


def setter_token(key: str) -> str:
    """
    Derive the canonical setter token for an option key.

    The key is split on underscores (and spaces), the first letter of each
    segment is upper-cased and the segments are joined.

    Example:
        setter_token('public_key')  # 'PublicKey'
        setter_token('publicKey')   # 'PublicKey'
    """
    segments = re.split(r"[_ ]", key)
    return "".join(segment[:1].upper() + segment[1:] for segment in segments)


def setter_name(key: str) -> str:
    """Python method name a setter for ``key`` is expected to have."""
    token = setter_token(key)
    return "set_" + re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", token).lower()


def is_scalar(value: Any) -> bool:
    # bool, Decimal, Fraction and complex are numbers.Number; bytes is not a scalar
    return isinstance(value, (str, numbers.Number, np.number, np.bool_, np.str_))


def to_string(value: Any) -> str:
    if isinstance(value, np.generic):
        value = value.item()
    return str(value)


class AbstractFilter(ABC):
    """
    Abstract base class for all value filters.

    A filter transforms one input value into one output value. Concrete
    filters declare the options they recognize through ``options_class``,
    a dataclass whose fields name the options and carry their defaults,
    and may define ``set_<option>`` methods for options that need
    validation. Setters are collected into a lookup table once per class.

    Args:
        options: Optional configuration, a mapping or an iterable of
                 (key, value) pairs, forwarded to set_options()

    Example:
        @dataclass
        class TargetOptions:
            target: str = '.'

        class Target(AbstractFilter):
            options_class = TargetOptions

            def filter(self, value):
                return value

        f = Target({'target': 'out.txt'})
        f.get_options()  # {'target': 'out.txt'}
    """

    options_class: ClassVar[type] = NoOptions
    _option_setters: ClassVar[Dict[str, Callable]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        # Later classes in the MRO override setters of their bases
        setters: dict[str, Callable] = {}
        for klass in reversed(cls.__mro__):
            for attr, member in vars(klass).items():
                if (
                    attr.startswith("set_")
                    and attr != "set_options"
                    and callable(member)
                    and not isinstance(member, (staticmethod, classmethod))
                ):
                    setters[setter_token(attr[len("set_"):]).lower()] = member

        cls._option_setters = setters

    def __init__(self, options: Optional[Any] = None):
        if not is_dataclass(self.options_class):
            raise TypeError(
                f"{type(self).__name__}.options_class must be a dataclass, "
                f"got {self.options_class!r}"
            )

        self.options: dict[str, Any] = asdict(self.options_class())

        if options is not None:
            self.set_options(options)

    @abstractmethod
    def filter(self, value: Any) -> Any:
        """
        Filter a value.

        Args:
            value: Input value

        Returns:
            The filtered value
        """
        pass

    def __call__(self, value: Any) -> Any:
        """
        Invoke the filter as a plain function.

        Proxies to filter().
        """
        return self.filter(value)

    def set_options(self, options: Any) -> "AbstractFilter":
        """
        Apply a configuration to the filter.

        Each key is routed to its registered setter when one exists,
        otherwise to the matching entry of the options mapping. Keys are
        applied in iteration order; keys applied before a failing key stay
        applied.

        Args:
            options: Mapping or iterable of (key, value) pairs

        Returns:
            AbstractFilter: self

        Raises:
            InvalidArgumentError: If options has the wrong shape or contains
                                  a key with no setter and no options entry
        """
        if not self.is_options(options):
            raise InvalidArgumentError(
                f'"{type(self).__name__}.set_options" expects a mapping or an iterable '
                f'of key/value pairs; received "{type(options).__name__}"'
            )

        items = options.items() if isinstance(options, Mapping) else options

        for item in items:
            try:
                key, value = item
            except (TypeError, ValueError) as e:
                raise InvalidArgumentError(
                    f"Options must be (key, value) pairs, got {item!r}"
                ) from e

            setter = None
            if isinstance(key, str):
                setter = self._option_setters.get(setter_token(key).lower())

            if setter is not None:
                setter(self, value)
            elif isinstance(key, str) and key in self.options:
                self.options[key] = value
            else:
                expected = setter_name(key) if isinstance(key, str) else ""
                raise InvalidArgumentError(
                    f'The option "{key}" does not have a matching {expected} setter '
                    f"method or options[{key}] key"
                )

        return self

    def get_options(self) -> dict[str, Any]:
        """
        Retrieve the options representing the filter state.

        Returns:
            dict: A copy of the options mapping
        """
        return dict(self.options)

    @staticmethod
    def is_options(value: Any) -> bool:
        """Whether value can be passed to set_options()."""
        if isinstance(value, Mapping):
            return True
        return isinstance(value, Iterable) and not isinstance(value, (str, bytes))

    @staticmethod
    def apply_to_stringable_values(value: Any, callback: Callable[[Any], Any]) -> Any:
        """
        Run callback on string-like values only.

        Lists, tuples and dicts are handed to callback in a single call after
        their scalar items have been converted to strings (nested containers
        and other objects are left as they are). A scalar is converted to a
        string and passed to callback. Anything else is returned unchanged
        without calling callback.

        Args:
            value: Value to filter
            callback: String transformation of the concrete filter

        Returns:
            The callback result, or value itself when it is not stringable
        """
        if isinstance(value, list):
            return callback([to_string(item) if is_scalar(item) else item for item in value])

        if isinstance(value, tuple):
            return callback(tuple(to_string(item) if is_scalar(item) else item for item in value))

        if isinstance(value, dict):
            return callback({
                key: to_string(item) if is_scalar(item) else item
                for key, item in value.items()
            })

        if not is_scalar(value):
            return value

        return callback(to_string(value))
