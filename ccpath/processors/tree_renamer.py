"""Renaming of paths and directory trees on disk."""

import errno
import os
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from ccpath.errors import ListDirectoryError, PathConvertError, PathNotFoundError, RenameIOError
from ccpath.models.rename import (
    ConversionRequest,
    RenameMode,
    RenameOutcome,
    RenamePlan,
    RenameStatus,
)
from ccpath.processors.path_transformer import PathTransformer


class TreeRenamer:
    """Rename paths to a naming convention, one entry at a time.

    Directory trees are processed bottom-up: everything inside a directory is
    renamed before the directory itself, so the original path of every entry
    the walk has not reached yet stays valid.
    """

    def __init__(
        self,
        request: ConversionRequest,
        mode: RenameMode = RenameMode.BASENAME,
        prefix: Path | None = None,
        no_clobber: bool = False,
        dry_run: bool = False,
        on_outcome: Callable[[RenameOutcome], None] | None = None,
    ) -> None:
        """Initialize the renamer.

        Args:
            request: Source and target conventions.
            mode: Whether to convert only the basename or the full path of
                  each input path. Recursive walks always use basename mode.
            prefix: Path prefix left untouched in full path mode.
            no_clobber: Skip renames whose destination already exists.
            dry_run: Compute and report renames without touching the disk.
            on_outcome: Called with every outcome as soon as it is known.
        """
        self.transformer = PathTransformer(request)
        self.mode = mode
        self.prefix = prefix
        self.no_clobber = no_clobber
        self.dry_run = dry_run
        self.on_outcome = on_outcome

    def apply_one(self, path: Path, mode: RenameMode | None = None) -> RenameOutcome:
        """Rename a single path.

        Conversion and I/O failures are returned as failed outcomes so the
        caller can carry on with the next path.

        Args:
            path: Existing path to rename.
            mode: Overrides the renamer's mode for this path.

        Returns:
            What happened to the path.
        """
        mode = mode or self.mode
        try:
            plan = self.transformer.plan(path, mode, self.prefix if mode is RenameMode.FULL_PATH else None)
        except PathConvertError as e:
            return self._report(RenameOutcome(source=path, status=RenameStatus.FAILED, error=str(e)))

        try:
            if self.no_clobber and not plan.is_noop and self._is_collision(plan):
                status = RenameStatus.SKIPPED_EXISTS
            elif self.dry_run:
                status = RenameStatus.DRY_RUN
            elif plan.is_noop:
                status = RenameStatus.UNCHANGED
            else:
                self._rename(plan)
                status = RenameStatus.RENAMED
        except RenameIOError as e:
            return self._report(RenameOutcome(source=path, status=RenameStatus.FAILED, plan=plan, error=str(e)))

        return self._report(RenameOutcome(source=path, status=status, plan=plan))

    def walk_bottom_up(
        self,
        directory: Path,
        on_error: Callable[[ListDirectoryError], None] | None = None,
    ) -> Iterator[Path]:
        """Yield every entry below `directory`, and `directory` itself, contents first.

        Symbolic links are yielded as entries but never followed. The walk is
        single pass: entries are listed just before their directory is
        descended into, so callers may rename what has already been yielded.

        Args:
            directory: Root of the walk.
            on_error: Called when a directory cannot be listed. The directory
                      and its contents are then left out of the walk and the
                      walk continues with its siblings. Without a handler the
                      error is raised.

        Raises:
            ListDirectoryError: If a directory cannot be listed and no
                handler was given.
        """
        if directory.is_dir() and not directory.is_symlink():
            try:
                with os.scandir(directory) as it:
                    entries = sorted(it, key=lambda entry: entry.name)
            except OSError as e:
                error = ListDirectoryError(directory, e)
                if on_error is None:
                    raise error from e
                on_error(error)
                return
            for entry in entries:
                yield from self.walk_bottom_up(Path(entry.path), on_error)
        yield directory

    def apply_recursive(self, directory: Path) -> list[RenameOutcome]:
        """Rename a whole tree bottom-up, converting the basename of each entry.

        A failure on one entry does not stop the walk. A directory that cannot
        be listed is reported as failed and left in place with its contents.
        """
        outcomes: list[RenameOutcome] = []

        def listing_failed(error: ListDirectoryError) -> None:
            outcomes.append(
                self._report(RenameOutcome(source=error.directory, status=RenameStatus.FAILED, error=str(error)))
            )

        for entry in self.walk_bottom_up(directory, on_error=listing_failed):
            outcomes.append(self.apply_one(entry, RenameMode.BASENAME))
        return outcomes

    def run(self, paths: Iterable[Path], recursive: bool = False) -> list[RenameOutcome]:
        """Rename each path in turn.

        Raises:
            PathNotFoundError: If any path does not exist. Checked for every path
                before anything is renamed.
        """
        paths = list(paths)
        for path in paths:
            if not os.path.lexists(path):
                raise PathNotFoundError(path)

        outcomes: list[RenameOutcome] = []
        for path in paths:
            if recursive:
                outcomes.extend(self.apply_recursive(path))
            else:
                outcomes.append(self.apply_one(path))
        return outcomes

    def _is_collision(self, plan: RenamePlan) -> bool:
        """Check whether renaming would replace a different existing entry.

        On case-insensitive file systems a case-only rename finds its own
        source at the destination, which is not a collision. Any other name
        resolving to the source's inode is a hard link and still collides.

        Raises:
            RenameIOError: If either path cannot be inspected.
        """
        try:
            destination = os.lstat(plan.destination)
        except FileNotFoundError:
            return False
        except OSError as e:
            raise RenameIOError(plan.source, plan.destination, e) from e
        try:
            source = os.lstat(plan.source)
        except OSError as e:
            raise RenameIOError(plan.source, plan.destination, e) from e
        same_entry = (source.st_dev, source.st_ino) == (destination.st_dev, destination.st_ino)
        return not (same_entry and _is_case_only(plan))

    def _rename(self, plan: RenamePlan) -> None:
        """Move the source to the destination, creating missing parent directories.

        Renaming a hard link onto another link of the same file succeeds
        without removing the source, which is reported as a failure.

        Raises:
            RenameIOError: If a directory cannot be created or the rename fails.
        """
        try:
            plan.destination.parent.mkdir(parents=True, exist_ok=True)
            os.rename(plan.source, plan.destination)
            if not _is_case_only(plan) and os.path.lexists(plan.source):
                raise FileExistsError(errno.EEXIST, "source and destination are links to the same file")
        except OSError as e:
            raise RenameIOError(plan.source, plan.destination, e) from e

    def _report(self, outcome: RenameOutcome) -> RenameOutcome:
        if self.on_outcome is not None:
            self.on_outcome(outcome)
        return outcome


def _is_case_only(plan: RenamePlan) -> bool:
    """Whether source and destination differ in letter case only."""
    return str(plan.source).casefold() == str(plan.destination).casefold()
