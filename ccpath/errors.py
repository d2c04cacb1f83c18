"""Errors raised while converting and renaming paths."""

from pathlib import PurePath


class CCPathError(Exception):
    """Base class for all ccpath errors."""


class UnsupportedConventionError(CCPathError, ValueError):
    """Raised when a naming convention token is not one of the supported ones."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unsupported naming convention '{token}'")


class PathConvertError(CCPathError):
    """Base class for errors computing the converted form of a path."""

    def __init__(self, path: str | bytes | PurePath, message: str) -> None:
        self.path = path
        super().__init__(message)


class InvalidUtf8PathError(PathConvertError):
    """A path component is not valid UTF-8 text."""

    def __init__(self, path: str | bytes | PurePath) -> None:
        super().__init__(path, f"path contains invalid utf-8 characters: {_display(path)}")


class InvalidPathError(PathConvertError):
    """A path component has neither a stem nor an extension."""

    def __init__(self, path: str | bytes | PurePath) -> None:
        super().__init__(path, f"paths must contain either a stem or an extension or both: '{_display(path)}'")


class PathNotFoundError(CCPathError):
    """A path given as input does not exist."""

    def __init__(self, path: PurePath) -> None:
        self.path = path
        super().__init__(f"no such file or directory '{path}'")


class RenameIOError(CCPathError):
    """Creating the destination directory or renaming failed."""

    def __init__(self, source: PurePath, destination: PurePath, reason: OSError) -> None:
        self.source = source
        self.destination = destination
        self.reason = reason
        super().__init__(f"cannot rename '{source}' to '{destination}': {reason.strerror or reason}")


class ListDirectoryError(CCPathError):
    """The entries of a directory could not be read during a recursive walk."""

    def __init__(self, directory: PurePath, reason: OSError) -> None:
        self.directory = directory
        self.reason = reason
        super().__init__(f"cannot list directory '{directory}': {reason.strerror or reason}")


def _display(path: str | bytes | PurePath) -> str:
    """Render a possibly undecodable path for an error message."""
    if isinstance(path, bytes):
        return path.decode("utf-8", errors="replace")
    return str(path).encode("utf-8", errors="backslashreplace").decode("utf-8")
