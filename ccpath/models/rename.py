"""Rename operation data models."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ccpath.models.convention import Convention


class ConversionRequest(BaseModel):
    """The conventions governing a conversion."""

    model_config = ConfigDict(frozen=True)

    from_convention: Convention | None = Field(
        default=None,
        description="Known source convention; when absent word boundaries are guessed",
    )
    to_convention: Convention = Field(description="Target convention")

    def __str__(self) -> str:
        source = self.from_convention.token if self.from_convention else "auto"
        return f"ConversionRequest({source} -> {self.to_convention.token})"


class RenameMode(str, Enum):
    """Which components of a path are converted."""

    BASENAME = "basename"
    FULL_PATH = "full_path"


class RenamePlan(BaseModel):
    """A source path paired with its computed destination."""

    model_config = ConfigDict(frozen=True)

    source: Path = Field(description="Existing path")
    destination: Path = Field(description="Path the source is renamed to")

    @property
    def is_noop(self) -> bool:
        return self.source == self.destination

    def __str__(self) -> str:
        return f"'{self.source}' -> '{self.destination}'"


class RenameStatus(str, Enum):
    """How a single rename step ended."""

    RENAMED = "renamed"
    DRY_RUN = "dry_run"
    UNCHANGED = "unchanged"
    SKIPPED_EXISTS = "skipped_exists"
    FAILED = "failed"


class RenameOutcome(BaseModel):
    """Result of processing one path, reported to the user."""

    model_config = ConfigDict(frozen=True)

    source: Path = Field(description="Path that was processed")
    status: RenameStatus
    plan: RenamePlan | None = Field(
        default=None,
        description="Computed plan; absent when the destination could not be computed",
    )
    error: str | None = Field(default=None, description="Error message for failed outcomes")

    @property
    def failed(self) -> bool:
        return self.status is RenameStatus.FAILED

    @property
    def destination(self) -> Path | None:
        return self.plan.destination if self.plan else None
