"""Path component data model."""

from pydantic import BaseModel, ConfigDict, Field


class PathComponent(BaseModel):
    """A single path segment split into stem and extension."""

    model_config = ConfigDict(frozen=True)

    stem: str | None = Field(default=None, description="Text before the last '.'")
    extension: str | None = Field(default=None, description="Text after the last '.', without the dot")

    @classmethod
    def from_name(cls, name: str) -> "PathComponent":
        """Split a segment name the way file systems split file names.

        The extension is whatever follows the last dot. A name whose only dot
        is the leading one (`.gitignore`) has an extension and no stem, and
        the special names `.` and `..` have neither.
        """
        if name in ("", ".", ".."):
            return cls()

        stem, dot, extension = name.rpartition(".")
        if not dot:
            return cls(stem=extension)
        return cls(stem=stem or None, extension=extension)

    @property
    def is_valid(self) -> bool:
        return self.stem is not None or self.extension is not None

    def __str__(self) -> str:
        if self.extension is None:
            return self.stem or ""
        return f"{self.stem or ''}.{self.extension}"
