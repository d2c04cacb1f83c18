"""Supported file naming conventions."""

from enum import Enum

from ccpath.errors import UnsupportedConventionError


class Convention(str, Enum):
    """A file naming convention, keyed by its command line token.

    Converting to and from some of these conventions is lossy: word boundaries
    cannot be recovered from flat case, and it is not always possible to tell
    whether a number starts a word, ends one or is a word itself.
    """

    # First letter of each word capitalized, words separated by spaces.
    TITLE_CASE = "title"
    # All lowercase, no separator.
    FLAT_CASE = "flat"
    # All uppercase, no separator.
    UPPER_FLAT_CASE = "FLAT"
    # No separator, every word but the first capitalized.
    CAMEL_CASE = "camel"
    # No separator, every word capitalized (also known as pascal case).
    UPPER_CAMEL_CASE = "CAMEL"
    # Lowercase words separated by underscores.
    SNAKE_CASE = "snake"
    # Uppercase words separated by underscores (screaming snake case).
    UPPER_SNAKE_CASE = "SNAKE"
    # Lowercase words separated by hyphens.
    KEBAB_CASE = "kebab"

    @property
    def token(self) -> str:
        """The canonical command line token."""
        return self.value

    @property
    def example(self) -> str:
        """The name of the convention written in the convention itself."""
        return _EXAMPLES[self]

    @classmethod
    def parse(cls, token: str) -> "Convention":
        """Parse a canonical token into a convention.

        Tokens are case sensitive since `flat` and `FLAT` name different
        conventions.

        Raises:
            UnsupportedConventionError: If the token is not a known convention.
        """
        try:
            return cls(token)
        except ValueError as e:
            raise UnsupportedConventionError(token) from e

    def __str__(self) -> str:
        return self.value


_EXAMPLES = {
    Convention.TITLE_CASE: "Title Case",
    Convention.FLAT_CASE: "flatcase",
    Convention.UPPER_FLAT_CASE: "UPPERFLATCASE",
    Convention.CAMEL_CASE: "camelCase",
    Convention.UPPER_CAMEL_CASE: "CamelCase",
    Convention.SNAKE_CASE: "snake_case",
    Convention.UPPER_SNAKE_CASE: "SNAKE_CASE",
    Convention.KEBAB_CASE: "kebab-case",
}
