"""
Underscore to studly case filter.
"""

import re
from typing import Any

from ..base import AbstractFilter
from .separator_to_separator import map_strings

# An underscore with nothing after it (trailing) is kept
UNDERSCORE_PATTERN = re.compile(r"_(\S)")


def _studly(word: Any) -> Any:
    if not isinstance(word, str):
        return word

    joined = UNDERSCORE_PATTERN.sub(lambda match: match.group(1).upper(), word)
    return joined[:1].lower() + joined[1:]


class UnderscoreToStudlyCase(AbstractFilter):
    """
    Convert underscore separated words to studly case.

    Each underscore followed by a character is removed and the character
    upper-cased, then the first letter is lower-cased.

    Example:
        filter = UnderscoreToStudlyCase()
        filter('studly_cased_words')     # 'studlyCasedWords'
        filter('_laminas_project')       # 'laminasProject'
        filter('abc_')                   # 'abc_'
        filter(['a_b', '', 'Foo_bar'])   # ['aB', '', 'fooBar']
    """

    def filter(self, value: Any) -> Any:
        return self.apply_to_stringable_values(value, lambda v: map_strings(v, _studly))
