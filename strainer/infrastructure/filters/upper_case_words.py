"""
Upper case words filter - capitalizes the first letter of every word.
"""

import codecs
import os
import re
from dataclasses import dataclass, field
from typing import Any

from strainer.exceptions import FilterRuntimeError, InvalidArgumentError
from .base import AbstractFilter


# Apostrophes inside a word do not start a new word ("don't" -> "Don't")
WORD_PATTERN = re.compile(r"[^\W_]+(?:'[^\W_]+)*")


def _title(text: str) -> str:
    return WORD_PATTERN.sub(lambda match: match.group(0).capitalize(), text)


def _validated_encoding(encoding: Any) -> str:
    if not isinstance(encoding, str):
        raise InvalidArgumentError(
            f"encoding must be a string, got {type(encoding).__name__}"
        )

    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise InvalidArgumentError(
            f"The given encoding '{encoding}' is not supported"
        ) from e

    return encoding.lower()


def _default_encoding() -> str:
    return _validated_encoding(os.getenv("STRAINER_DEFAULT_ENCODING", "utf-8"))


@dataclass
class UpperCaseWordsOptions:
    encoding: str = field(default_factory=_default_encoding)


class UpperCaseWords(AbstractFilter):
    """
    Capitalize the first letter of each word and lower-case the rest.

    Only text is filtered. str values are title-cased directly, bytes values
    are decoded with the configured encoding first and encoded back after.
    Every other value (None, numbers, lists, objects) is returned unchanged.

    Args:
        options: Optional configuration, e.g. {'encoding': 'latin-1'}

    Example:
        filter = UpperCaseWords()
        filter('aBc1@3')  # 'Abc1@3'
        filter('A b C')   # 'A B C'
    """

    options_class = UpperCaseWordsOptions

    def set_encoding(self, encoding: str) -> "UpperCaseWords":
        """
        Set the encoding used for bytes input.

        Args:
            encoding: Codec name, matched case-insensitively

        Raises:
            InvalidArgumentError: If the codec is unknown
        """
        self.options["encoding"] = _validated_encoding(encoding)
        return self

    def get_encoding(self) -> str:
        return self.options["encoding"]

    def filter(self, value: Any) -> Any:
        if isinstance(value, str):
            return _title(value)

        if isinstance(value, bytes):
            encoding = self.get_encoding()
            try:
                return _title(value.decode(encoding)).encode(encoding)
            except UnicodeError as e:
                raise FilterRuntimeError(
                    f"Could not filter bytes using encoding '{encoding}': {str(e)}"
                ) from e

        return value
