"""
Example: Filter chain applied to DataFrame columns
"""

import pandas as pd
import strainer
from strainer.application.chains import FilterChain
from strainer.infrastructure.filters import DataFrameValueFilter


def main():
    # Load STRAINER_* settings from .env if present
    strainer.configure()

    df = pd.DataFrame({
        'page': ['about_us', '  contact_page ', 'home'],
        'platform': ['desktop', 'tablet', 'mobile'],
        'sessions': [120, 45, 300]
    })

    # Build the chain from configuration
    chain = FilterChain({
        'callbacks': [
            {'callback': str.strip, 'priority': 2000},
        ],
        'filters': [
            {'name': 'underscore_to_dash'},
            {'name': 'upper_case_words', 'priority': 500},
        ]
    })

    pages = DataFrameValueFilter(chain, 'page')
    platforms = DataFrameValueFilter(
        chain.plugin_manager.get('allow_list', {'list': ['desktop', 'mobile']}),
        'platform'
    )

    result = platforms.filter(pages.filter(df))
    print(result)


if __name__ == "__main__":
    main()
