import logging
from collections.abc import Collection
from pathlib import Path
from typing import Final

from .log_actions import LogActions
from .models import RunStatistics
from .mover import FileMover
from .organizer_config import OrganizerConfig
from .reporter import Reporter
from .walker import DirectoryWalker

__all__ = ("PROGRAM_NAME", "FileOrganizer")


PROGRAM_NAME: Final = "forg"

logger = logging.getLogger(__name__)


class FileOrganizer:
    """Sorts the files of a directory into category subfolders.

    Files are collected first, then moved one at a time. A run is not atomic:
    if it is interrupted, files that were already moved stay moved.

    Attributes:
        config (OrganizerConfig): The organizer configuration.
        reporter (Reporter): Writes the banner, progress and summary.
        program_names (frozenset[str]): Filenames that are never moved.
    """

    # Magic methods

    def __init__(
        self,
        config: OrganizerConfig,
        reporter: Reporter | None = None,
        program_names: Collection[str] = (),
    ) -> None:
        self.config: Final = config
        self.reporter: Final = reporter if reporter is not None else Reporter()
        self.program_names: Final = frozenset({PROGRAM_NAME, *program_names})

    # Public methods

    def organize(self, root_dir: Path) -> RunStatistics:
        """Organize the files in `root_dir`.

        Per-directory and per-file failures are logged and counted rather than
        raised.

        Args:
            root_dir: The directory to organize.

        Returns:
            The counts gathered during the run.

        Raises:
            NotADirectoryError: If `root_dir` is not a directory.
            OSError: If `root_dir` cannot be read.
        """

        if not root_dir.is_dir():
            msg = f"Not a directory '{root_dir}'."
            raise NotADirectoryError(msg)

        stats: Final = RunStatistics()
        self.reporter.banner(root_dir, self.config)

        logger.debug(f"{LogActions.STARTED}: Scanning '{root_dir}'.")
        walker: Final = DirectoryWalker(self.config, stats, self.program_names)
        pending: Final = walker.collect(root_dir)

        if pending:
            mover = FileMover(self.config, root_dir, stats, self.reporter)
            mover.move_all(pending)
        else:
            self.reporter.no_files()

        self.reporter.summary(stats)

        msg = f"{LogActions.FINISHED}: Moved {stats.total} file(s), "
        msg += f"{stats.skipped} skipped, {stats.errors} error(s)."
        logger.debug(msg)
        return stats
