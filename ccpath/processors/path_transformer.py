"""Conversion of whole paths, component by component."""

from pathlib import PurePath

from ccpath.models.rename import ConversionRequest, RenameMode, RenamePlan
from ccpath.processors.component_converter import convert_component


class PathTransformer:
    """Compute converted paths for a conversion request."""

    def __init__(self, request: ConversionRequest) -> None:
        """Initialize the transformer.

        Args:
            request: Source and target conventions applied to every path.
        """
        self.request = request

    def convert_basename(self, path: PurePath) -> PurePath:
        """Convert only the final component of a path.

        Paths without a convertible file name (the root, `.` or a path ending
        in `..`) are returned unchanged.

        Examples:
            `/An Absolute/Path To/Some File.jpg` to camel case gives
            `/An Absolute/Path To/someFile.jpg`.
        """
        if not path.name or path.name == "..":
            return path

        return path.with_name(convert_component(path.name, self.request))

    def convert_full(self, path: PurePath) -> PurePath:
        """Convert every component of a path.

        The anchor (root and drive), `.` and `..` are kept. The first component
        that fails to convert aborts the whole conversion.

        Examples:
            `/anAbsolute/pathTo/someFile.jpg` to snake case gives
            `/an_absolute/path_to/some_file.jpg`.
        """
        converted: list[str] = []
        for index, part in enumerate(path.parts):
            if (index == 0 and path.anchor) or part in (".", ".."):
                converted.append(part)
            else:
                converted.append(convert_component(part, self.request))

        return type(path)(*converted)

    def convert_full_except_prefix(self, path: PurePath, prefix: PurePath) -> PurePath:
        """Convert every component of a path that lies below `prefix`.

        The prefix is matched component-wise. When the path does not start with
        it the result is the same as `convert_full`.

        Examples:
            `/some-path/prefix/and-a/child` with prefix `/some-path/prefix`
            to upper snake case gives `/some-path/prefix/AND_A/CHILD`.
        """
        if not path.is_relative_to(prefix):
            return self.convert_full(path)

        return prefix / self.convert_full(path.relative_to(prefix))

    def transform(self, path: PurePath, mode: RenameMode, prefix: PurePath | None = None) -> PurePath:
        """Convert a path in the given mode. The prefix only applies to full path mode."""
        if mode is RenameMode.BASENAME:
            return self.convert_basename(path)
        if prefix is not None:
            return self.convert_full_except_prefix(path, prefix)
        return self.convert_full(path)

    def plan(self, path: PurePath, mode: RenameMode, prefix: PurePath | None = None) -> RenamePlan:
        """Pair a path with its converted destination."""
        return RenamePlan(source=path, destination=self.transform(path, mode, prefix))
