"""
Word filters - rewrite word boundaries inside strings.
"""

from .separator_to_separator import SeparatorToSeparator
from .dash_to_underscore import DashToUnderscore
from .underscore_to_dash import UnderscoreToDash
from .underscore_to_studly_case import UnderscoreToStudlyCase

__all__ = [
    'SeparatorToSeparator',
    'DashToUnderscore',
    'UnderscoreToDash',
    'UnderscoreToStudlyCase'
]
