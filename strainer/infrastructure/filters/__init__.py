"""
Value filters.

Every filter takes one value and returns the filtered value. Filters are
callable, so they can be used anywhere a plain function is expected:
- Directly on single values
- Inside a FilterChain
- On DataFrame columns through DataFrameValueFilter
"""

from .base import AbstractFilter, NoOptions
from .allow_list import AllowList, DenyList, Whitelist, Blacklist
from .upper_case_words import UpperCaseWords
from .dataframe import DataFrameValueFilter
from . import word

__all__ = [
    'AbstractFilter',
    'NoOptions',
    'AllowList',
    'DenyList',
    'Whitelist',
    'Blacklist',
    'UpperCaseWords',
    'DataFrameValueFilter',
    'word'
]
