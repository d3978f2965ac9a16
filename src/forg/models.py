from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple

__all__ = ("PendingMove", "RunStatistics")


class PendingMove(NamedTuple):
    """A file that has been classified but not moved yet."""

    source: Path
    category: str


@dataclass
class RunStatistics:
    """Counters accumulated over one organizer run.

    Attributes:
        moved: The number of files moved into each category.
        skipped: The number of entries excluded by skip rules or already in
            place.
        errors: The number of directories or files that failed.
    """

    moved: Counter[str] = field(default_factory=Counter)
    skipped: int = 0
    errors: int = 0

    @property
    def total(self) -> int:
        return sum(self.moved.values())

    @property
    def exit_code(self) -> int:
        return 1 if self.errors else 0

    def record_move(self, category: str) -> None:
        self.moved[category] += 1
