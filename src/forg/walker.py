import logging
import os
from collections.abc import Collection, Iterable
from pathlib import Path
from typing import Final

from .categories import classify, is_skipped_name
from .log_actions import LogActions
from .models import PendingMove, RunStatistics
from .organizer_config import OrganizerConfig

__all__ = ("DirectoryWalker",)


logger = logging.getLogger(__name__)


class DirectoryWalker:
    """Collects the files of a directory tree that should be organized.

    The root directory counts as depth 1. In recursive mode, subdirectories
    are entered only while the current depth is below `config.max_depth`.

    Attributes:
        config (OrganizerConfig): The organizer configuration.
        stats (RunStatistics): Receives skip and error counts.
        program_names (frozenset[str]): Filenames of the running program,
            which are never collected.
    """

    def __init__(
        self,
        config: OrganizerConfig,
        stats: RunStatistics,
        program_names: Collection[str] = (),
    ) -> None:
        self.config: Final = config
        self.stats: Final = stats
        self.program_names: Final = frozenset(program_names)

    # Public methods

    def collect(self, root_dir: Path) -> list[PendingMove]:
        """Classify every eligible file under `root_dir`.

        Args:
            root_dir: The directory to organize.

        Returns:
            The pending moves in directory enumeration order.

        Raises:
            OSError: If `root_dir` itself cannot be read.
        """

        pending: list[PendingMove] = []

        with os.scandir(root_dir) as it:
            entries = list(it)
        self._visit(entries, 1, pending)

        msg = f"{LogActions.FINISHED}: Found {len(pending)} file(s) to "
        msg += "organize."
        logger.debug(msg)
        return pending

    # Private methods

    def _walk(
        self, directory: Path, depth: int, pending: list[PendingMove]
    ) -> None:
        """Visit a subdirectory, logging and counting it if it is unreadable."""

        try:
            with os.scandir(directory) as it:
                entries = list(it)

        except OSError as e:
            msg = f"{LogActions.FAILED}: Error accessing directory "
            msg += f"'{directory}': {e}"
            logger.error(msg)
            self.stats.errors += 1
            return

        self._visit(entries, depth, pending)

    def _visit(
        self,
        entries: Iterable[os.DirEntry[str]],
        depth: int,
        pending: list[PendingMove],
    ) -> None:
        for entry in entries:
            try:
                self._visit_entry(entry, depth, pending)

            except OSError as e:
                msg = f"{LogActions.FAILED}: Error reading '{entry.path}': {e}"
                logger.error(msg)
                self.stats.errors += 1

    def _visit_entry(
        self, entry: os.DirEntry[str], depth: int, pending: list[PendingMove]
    ) -> None:
        name: Final = entry.name

        if entry.is_symlink():
            logger.debug(f"{LogActions.SKIPPED}: Symlink '{entry.path}'.")
            return

        if entry.is_dir():
            self._visit_dir(entry, depth, pending)
            return

        if not entry.is_file():
            msg = f"{LogActions.SKIPPED}: Not a regular file '{entry.path}'."
            logger.debug(msg)
            return

        if name in self.program_names:
            logger.debug(f"{LogActions.SKIPPED}: Program file '{name}'.")
            return

        if is_skipped_name(name):
            logger.debug(f"{LogActions.SKIPPED}: Ignored name '{entry.path}'.")
            self.stats.skipped += 1
            return

        pending.append(PendingMove(Path(entry.path), classify(name)))

    def _visit_dir(
        self, entry: os.DirEntry[str], depth: int, pending: list[PendingMove]
    ) -> None:
        if not self.config.recursive:
            logger.debug(f"{LogActions.SKIPPED}: Directory '{entry.name}'.")
            return

        if is_skipped_name(entry.name):
            logger.debug(f"{LogActions.SKIPPED}: Ignored name '{entry.path}'.")
            self.stats.skipped += 1
            return

        if depth >= self.config.max_depth:
            msg = f"{LogActions.SKIPPED}: Directory '{entry.path}' is beyond "
            msg += f"max depth {self.config.max_depth}."
            logger.debug(msg)
            return

        self._walk(Path(entry.path), depth + 1, pending)
