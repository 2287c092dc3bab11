"""
Underscore to dash filter.
"""

from .separator_to_separator import SeparatorToSeparator


class UnderscoreToDash(SeparatorToSeparator):
    """
    Replace underscores with dashes.

    Example:
        UnderscoreToDash()('underscore_separated_words')  # 'underscore-separated-words'
    """

    def __init__(self, options=None):
        super().__init__({"search_separator": "_", "replacement_separator": "-"})
        if options is not None:
            self.set_options(options)
