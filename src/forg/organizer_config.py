from dataclasses import dataclass
from typing import Final

__all__ = ("DEFAULT_DEPTH", "OrganizerConfig")


DEFAULT_DEPTH: Final = 1
"""The traversal depth used when none, or an invalid one, is given. The
current directory counts as depth 1.
"""


@dataclass(frozen=True)
class OrganizerConfig:
    """Options for a single organizer run.

    Attributes:
        prefix: Text prepended to every category folder name.
        verbose: If `True`, log per-file skip and move details.
        dry_run: If `True`, no actual file operations are performed.
        recursive: If `True`, descend into subdirectories up to `max_depth`.
        max_depth: The deepest level visited in recursive mode.
        show_help: If `True`, print usage and exit.
        show_version: If `True`, print the version and exit.
    """

    prefix: str = ""
    verbose: bool = False
    dry_run: bool = False
    recursive: bool = False
    max_depth: int = DEFAULT_DEPTH
    show_help: bool = False
    show_version: bool = False

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            msg = f"`max_depth` must be at least 1, got {self.max_depth}."
            raise ValueError(msg)

    def folder_name(self, category: str) -> str:
        """Return the destination folder name for `category`."""

        return f"{self.prefix}{category}"
