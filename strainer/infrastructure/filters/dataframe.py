"""
DataFrame adapter - applies value filters to DataFrame columns.
"""

import pandas as pd
from typing import Any, Callable, List, Union


class DataFrameValueFilter:
    """
    Apply a value filter to every cell of selected DataFrame columns.

    Any callable taking a single value works, so filters, filter chains and
    plain functions can all be used. Columns that are not present in the
    DataFrame are skipped, and missing cells (NaN, None) are left as they are.

    Args:
        value_filter: Callable applied to each cell
        columns: Column name or list of column names to filter

    Example - Normalize slugs:
        filter = DataFrameValueFilter(UnderscoreToDash(), 'slug')
        cleaned = filter.filter(pages_df)

    Example - Drop unknown platforms:
        filter = DataFrameValueFilter(
            AllowList({'list': ['desktop', 'mobile']}),
            ['platform', 'referrer_platform']
        )
        cleaned = filter.filter(sessions_df)
    """

    def __init__(
        self,
        value_filter: Callable[[Any], Any],
        columns: Union[str, List[str]]
    ):
        if not callable(value_filter):
            raise TypeError(
                f"value_filter must be callable, got {type(value_filter).__name__}"
            )

        if isinstance(columns, str):
            self.columns: list[str] = [columns]
        elif isinstance(columns, list):
            self.columns = list(columns)
        else:
            raise TypeError(
                f"columns must be a string or list of strings, got {type(columns).__name__}"
            )

        if not self.columns:
            raise ValueError("columns list cannot be empty")

        self.value_filter = value_filter

    def __call__(self, df: pd.DataFrame) -> pd.DataFrame:
        return self.filter(df)

    def filter(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Filter the configured columns of a DataFrame.

        Args:
            df: Input DataFrame

        Returns:
            pd.DataFrame: Copy of df with filtered columns

        Raises:
            TypeError: If df is not a pandas DataFrame
        """
        if not isinstance(df, pd.DataFrame):
            raise TypeError(
                f"Expected pandas DataFrame, got {type(df).__name__}"
            )

        if df.empty:
            return df.copy()

        result = df.copy()

        for column in self.columns:
            if column in result.columns:
                result[column] = result[column].map(self.value_filter, na_action='ignore')

        return result
