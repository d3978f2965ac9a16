"""Organize the files of the current directory into category subfolders."""

__author__ = "Charles Mesa Cayobit"
__version__ = "1.0.0"

from .categories import OTHERS, classify
from .file_organizer import FileOrganizer
from .models import PendingMove, RunStatistics
from .organizer_config import OrganizerConfig

__all__ = (
    "OTHERS",
    "FileOrganizer",
    "OrganizerConfig",
    "PendingMove",
    "RunStatistics",
    "classify",
)
