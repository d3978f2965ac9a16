import logging
import os
import time
from collections.abc import Generator, Iterable
from itertools import count, islice
from pathlib import Path
from typing import Final

from .log_actions import LogActions
from .models import PendingMove, RunStatistics
from .organizer_config import OrganizerConfig
from .reporter import Reporter

__all__ = ("MAX_COLLISION_ATTEMPTS", "FileMover")


MAX_COLLISION_ATTEMPTS: Final = 1_000
"""Numbered names tried before falling back to a timestamp suffix."""

logger = logging.getLogger(__name__)


class FileMover:
    """Moves classified files into their category folders under `root_dir`.

    Attributes:
        config (OrganizerConfig): The organizer configuration.
        root_dir (pathlib.Path): The directory category folders are created
            in.
        stats (RunStatistics): Receives moved, skipped and error counts.
        reporter (Reporter): Writes the per-file indicator lines.
    """

    # Magic methods

    def __init__(
        self,
        config: OrganizerConfig,
        root_dir: Path,
        stats: RunStatistics,
        reporter: Reporter,
    ) -> None:
        self.config: Final = config
        self.root_dir: Final = root_dir
        self.stats: Final = stats
        self.reporter: Final = reporter

        # Destinations promised to earlier previews in dry-run mode
        self._reserved: set[Path] = set()

    # Public methods

    def move_all(self, pending: Iterable[PendingMove]) -> None:
        """Move every pending file in order, continuing past failures."""

        for move in pending:
            self.move(move)

    def move(self, move: PendingMove) -> Path | None:
        """Move one file into its category folder.

        Args:
            move: The file and the category it belongs to.

        Returns:
            The final, or in dry-run mode the planned, destination path.
            `None` if the file was left where it is.
        """

        src: Final = move.source
        folder: Final = self.config.folder_name(move.category)
        dst_dir: Final = self.root_dir / folder

        if src.parent == dst_dir:
            msg = f"{LogActions.SKIPPED}: '{src.name}' is already in "
            msg += f"'{folder}'."
            logger.debug(msg)
            self.stats.skipped += 1
            return None

        if not self._create_dir(dst_dir, src):
            return None

        dst: Final = self._get_unique_destination_path(dst_dir, src.name)

        logger.debug(f"  Moving: {src.name}")
        logger.debug(f"    From: {src}")
        logger.debug(f"    To:   {dst}")

        if self.config.dry_run:
            msg = f"{LogActions.DRY_RUN}: Would move '{src.name}' to "
            msg += f"'{folder}{os.sep}'."
            logger.debug(msg)
            self._reserved.add(dst)
            self.reporter.file_moved(src.name, folder, dry_run=True)
            self.stats.record_move(move.category)
            return dst

        try:
            src.rename(dst)

        except OSError as e:
            msg = f"{LogActions.FAILED}: ✗ Error moving '{src.name}': {e}"
            logger.error(msg)
            self.stats.errors += 1
            return None

        if dst.name != src.name:
            msg = f"{LogActions.RENAMED}: '{src.name}' to '{dst.name}' to "
            msg += "avoid a name collision."
            logger.debug(msg)

        msg = f"{LogActions.MOVED}: '{src.name}' to '{folder}{os.sep}'."
        logger.debug(msg)

        self.reporter.file_moved(src.name, folder, dry_run=False)
        self.stats.record_move(move.category)
        return dst

    # Private methods

    def _create_dir(self, dst_dir: Path, src: Path) -> bool:
        """Make sure `dst_dir` exists before `src` is moved into it.

        Returns:
            `False` if the directory could not be created, in which case the
                failure has been logged and counted.
        """

        if self.config.dry_run or dst_dir.is_dir():
            return True

        try:
            dst_dir.mkdir(parents=True, exist_ok=True)

        except OSError as e:
            msg = f"{LogActions.FAILED}: Error creating directory "
            msg += f"'{dst_dir.name}' for '{src.name}': {e}"
            logger.error(msg)
            self.stats.errors += 1
            return False

        logger.debug(f"{LogActions.CREATED}: Directory '{dst_dir.name}'.")
        return True

    def _is_taken(self, path: Path) -> bool:
        return path in self._reserved or path.exists()

    def _get_unique_destination_path(self, dst_dir: Path, name: str) -> Path:
        """Find a free path for `name` inside `dst_dir`.

        Tries `name` itself, then `stem_1.ext`, `stem_2.ext` and so on. After
        `MAX_COLLISION_ATTEMPTS` numbered names, a millisecond timestamp is
        used as the suffix instead so the search always ends.

        Args:
            dst_dir: The destination directory.
            name: The file's current name.

        Returns:
            A path inside `dst_dir` that is not taken.
        """

        if not self._is_taken(path := dst_dir / name):
            return path

        stem, ext = _split_name(name)
        paths: Final = self._generate_numbered_paths(dst_dir, stem, ext)

        for path in islice(paths, MAX_COLLISION_ATTEMPTS):
            if not self._is_taken(path):
                return path

        millis: Final = time.time_ns() // 1_000_000
        msg = f"{LogActions.FAILED}: No free numbered name for '{name}' after "
        msg += f"{MAX_COLLISION_ATTEMPTS} attempts, using timestamp {millis}."
        logger.warning(msg)
        return dst_dir / f"{stem}_{millis}{ext}"

    @staticmethod
    def _generate_numbered_paths(
        dst_dir: Path, stem: str, ext: str
    ) -> Generator[Path, None, None]:
        """Yield `stem_N.ext` paths in `dst_dir` for N = 1, 2, ..."""

        for n in count(1):
            yield dst_dir / f"{stem}_{n}{ext}"


def _split_name(name: str) -> tuple[str, str]:
    """Split `name` before its last dot, keeping the dot with the extension.

    A leading dot is part of the stem, so `.bashrc` has no extension.
    """

    index = name.rfind(".")
    if index <= 0:
        return name, ""
    return name[:index], name[index:]
