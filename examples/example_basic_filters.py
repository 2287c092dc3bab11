"""
Example: Configuring and calling single filters
"""

from strainer.infrastructure.filters import AllowList, UpperCaseWords
from strainer.infrastructure.filters.word import SeparatorToSeparator, UnderscoreToStudlyCase


def main():
    # Filters are plain callables
    title = UpperCaseWords()
    print(title("the quick brown fox"))

    # Options can be given at construction...
    paths = SeparatorToSeparator({
        'search_separator': '.',
        'replacement_separator': '/'
    })
    print(paths("app.models.user"))

    # ...or changed later
    paths.set_options({'replacement_separator': '::'})
    print(paths("app.models.user"))
    print(paths.get_options())

    # Lists are filtered as a whole, other objects pass through
    studly = UnderscoreToStudlyCase()
    print(studly(["user_id", "created_at", 42]))
    print(studly(None))

    # Allow list keeps only known values
    platforms = AllowList({'list': ['desktop', 'mobile'], 'strict': True})
    for value in ['desktop', 'tablet', 'mobile']:
        print(value, "->", platforms(value))


if __name__ == "__main__":
    main()
