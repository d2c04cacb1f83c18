"""Case conversion between naming conventions.

Conversion happens in two steps: the text is split into words, then the
words are joined again following the rules of the target convention. When the
source convention is known only its own word boundaries are used, otherwise
boundaries are guessed from separators and case transitions.
"""

import re

from ccpath.models.convention import Convention


# Whitespace, underscores and hyphens all separate words when guessing.
SEPARATORS_PATTERN = re.compile(r"[\s_\-]+")

_SOURCE_SEPARATORS = {
    Convention.TITLE_CASE: re.compile(r"\s+"),
    Convention.SNAKE_CASE: re.compile(r"_+"),
    Convention.UPPER_SNAKE_CASE: re.compile(r"_+"),
    Convention.KEBAB_CASE: re.compile(r"-+"),
}


def split_case(text: str) -> list[str]:
    """Split text on case transitions.

    A word starts at an upper-case letter that follows a lower-case letter or
    a digit (`someFile`), and at the last capital of an acronym that is
    followed by a lower-case letter (`HTTPServer`). Letter case is taken from
    Unicode, so `naïveÉcole` splits too.
    """
    words: list[str] = []
    start = 0
    for i in range(1, len(text)):
        previous, current = text[i - 1], text[i]
        if not current.isupper():
            continue
        after_lower = previous.islower() or previous.isdigit()
        ends_acronym = previous.isupper() and i + 1 < len(text) and text[i + 1].islower()
        if after_lower or ends_acronym:
            words.append(text[start:i])
            start = i
    words.append(text[start:])
    return words


def split_words(text: str, from_convention: Convention | None = None) -> list[str]:
    """Split text into words.

    Args:
        text: Text to split.
        from_convention: Convention the text is known to be written in.

    Returns:
        The non-empty words of the text, in order.
    """
    if from_convention in (Convention.FLAT_CASE, Convention.UPPER_FLAT_CASE):
        chunks = [text]
    elif from_convention in (Convention.CAMEL_CASE, Convention.UPPER_CAMEL_CASE):
        chunks = split_case(text)
    elif from_convention is not None:
        chunks = _SOURCE_SEPARATORS[from_convention].split(text)
    else:
        chunks = [word for chunk in SEPARATORS_PATTERN.split(text) for word in split_case(chunk)]

    return [chunk for chunk in chunks if chunk]


def join_words(words: list[str], to_convention: Convention) -> str:
    """Join words following the capitalization and separator rules of a convention."""
    if to_convention is Convention.TITLE_CASE:
        return " ".join(word.capitalize() for word in words)
    if to_convention is Convention.FLAT_CASE:
        return "".join(word.lower() for word in words)
    if to_convention is Convention.UPPER_FLAT_CASE:
        return "".join(word.upper() for word in words)
    if to_convention is Convention.CAMEL_CASE:
        return "".join(word.lower() if i == 0 else word.capitalize() for i, word in enumerate(words))
    if to_convention is Convention.UPPER_CAMEL_CASE:
        return "".join(word.capitalize() for word in words)
    if to_convention is Convention.SNAKE_CASE:
        return "_".join(word.lower() for word in words)
    if to_convention is Convention.UPPER_SNAKE_CASE:
        return "_".join(word.upper() for word in words)
    if to_convention is Convention.KEBAB_CASE:
        return "-".join(word.lower() for word in words)

    raise ValueError(f"Unhandled naming convention: {to_convention!r}")


def convert_case(text: str, to_convention: Convention, from_convention: Convention | None = None) -> str:
    """Convert text to the given convention.

    Round trips are only reliable when the source convention is given;
    guessing word boundaries is lossy.
    """
    return join_words(split_words(text, from_convention), to_convention)
