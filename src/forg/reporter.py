import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Final, TextIO

from .categories import CATEGORY_NAMES
from .logs import AnsiColor, paint
from .models import RunStatistics
from .organizer_config import OrganizerConfig

__all__ = ("Reporter",)


_CATEGORY_COLUMN_WIDTH: Final = 20
_RULE: Final = "-" * 30


class Reporter:
    """Writes the banner, per-file progress and final summary of a run.

    Attributes:
        stream (TextIO): Where output is written. Defaults to `sys.stdout`.
        color (bool): Whether ANSI colors are used. Defaults to whether
            `stream` is a terminal.
    """

    def __init__(
        self, stream: TextIO | None = None, *, color: bool | None = None
    ) -> None:
        self.stream: Final = stream if stream is not None else sys.stdout
        if color is None:
            isatty = getattr(self.stream, "isatty", None)
            color = bool(isatty and isatty())
        self.color: Final = color

    # Public methods

    def banner(self, root_dir: Path, config: OrganizerConfig) -> None:
        self._write(f"Organizing files in: {root_dir}", AnsiColor.BLUE)

        if config.recursive:
            msg = f"Recursive mode enabled (max depth: {config.max_depth})"
            self._write(msg, AnsiColor.BLUE)

        if config.prefix:
            self._write(f"Using prefix: {config.prefix}", AnsiColor.BLUE)

        if config.dry_run:
            msg = "[DRY RUN MODE - No changes will be made]"
            self._write(msg, AnsiColor.YELLOW)

        self._write()

    def no_files(self) -> None:
        self._write("No files to organize.", AnsiColor.YELLOW)

    def file_moved(self, name: str, folder: str, *, dry_run: bool) -> None:
        """Write the one-line indicator for a moved or previewed file."""

        if dry_run:
            self._write(f"  → {name} -> {folder}", AnsiColor.BLUE)
        else:
            self._write(f"  ✓ {name} -> {folder}", AnsiColor.GREEN)

    def summary(self, stats: RunStatistics) -> None:
        """Write the per-category table followed by skip and error totals.

        Categories appear in table order with `Others` last, and only those
        with at least one moved file are listed.
        """

        self._write()
        title = paint("Organization Complete!", AnsiColor.BOLD, self.color)
        self._write(title, AnsiColor.GREEN)
        self._write()

        self._write(self._row("Category", "Files"))
        self._write(_RULE)
        for category in self._ordered(stats.moved):
            self._write(self._row(category, stats.moved[category]))
        self._write(_RULE)
        self._write(self._row("Total", stats.total))

        if stats.skipped:
            self._write()
            msg = f"Skipped: {stats.skipped} files/directories"
            self._write(msg, AnsiColor.YELLOW)

        if stats.errors:
            self._write()
            self._write(f"Errors: {stats.errors}", AnsiColor.RED)

    # Private methods

    def _write(self, text: str = "", color: str = "") -> None:
        print(paint(text, color, self.color), file=self.stream)

    @staticmethod
    def _row(label: str, value: object) -> str:
        return f"{label:<{_CATEGORY_COLUMN_WIDTH}}{value}"

    @staticmethod
    def _ordered(categories: Iterable[str]) -> list[str]:
        present = set(categories)
        ordered = [c for c in CATEGORY_NAMES if c in present]
        # Categories outside the table still get a row, after the known ones
        ordered += sorted(present.difference(CATEGORY_NAMES))
        return ordered
