"""
Dash to underscore filter.
"""

from .separator_to_separator import SeparatorToSeparator


class DashToUnderscore(SeparatorToSeparator):
    """
    Replace dashes with underscores.

    Example:
        DashToUnderscore()('dash-separated-words')  # 'dash_separated_words'
    """

    def __init__(self, options=None):
        super().__init__({"search_separator": "-", "replacement_separator": "_"})
        if options is not None:
            self.set_options(options)
