"""Conversion of a single path component."""

import os

from ccpath.casing import convert_case
from ccpath.errors import InvalidPathError, InvalidUtf8PathError
from ccpath.models.component import PathComponent
from ccpath.models.rename import ConversionRequest


def _decode_component(component: str | bytes | os.PathLike) -> str:
    """Return the component as text, rejecting anything that is not valid UTF-8.

    Undecodable file names reach Python as strings carrying lone surrogates
    (PEP 383), so text is checked by encoding it back strictly.
    """
    raw = os.fspath(component)
    try:
        if isinstance(raw, bytes):
            return raw.decode("utf-8")
        raw.encode("utf-8")
    except UnicodeError as e:
        raise InvalidUtf8PathError(raw) from e
    return raw


def convert_component(component: str | bytes | os.PathLike, request: ConversionRequest) -> str:
    """Convert one file or directory name to the requested convention.

    The extension, if any, is kept as is and only the stem is converted.
    A name that is only an extension (`.gitignore`) is returned unchanged.

    Args:
        component: A single path segment.
        request: Source and target conventions.

    Returns:
        The converted segment.

    Raises:
        InvalidUtf8PathError: If the segment is not valid UTF-8.
        InvalidPathError: If the segment has neither a stem nor an extension.
    """
    name = _decode_component(component)
    parts = PathComponent.from_name(name)

    if not parts.is_valid:
        raise InvalidPathError(name)
    if parts.stem is None:
        return name

    new_stem = convert_case(parts.stem, request.to_convention, request.from_convention)
    if not new_stem:
        # nothing but separators
        new_stem = parts.stem

    if parts.extension is None:
        return new_stem
    return f"{new_stem}.{parts.extension}"
