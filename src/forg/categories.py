"""The mapping between a file extension and its category folder.

Files are sorted into these folders, each optionally prefixed:

--Root/
  |--Images/
  |--Videos/
  |--Audio/
  |--Documents/
  |--Archives/
  |--Code/
  |--Executables/
  |--Database/
  |--Books/
  |--Others/
"""

from types import MappingProxyType
from typing import Final

__all__ = (
    "CATEGORIES",
    "CATEGORY_NAMES",
    "EXT_TO_CATEGORY",
    "OTHERS",
    "SKIP_NAMES",
    "classify",
    "get_extension",
    "is_skipped_name",
)


OTHERS: Final = "Others"
"""The category used when a file's extension is missing or unknown."""


# CATEGORY TABLE ###############################################################


CATEGORIES: Final[tuple[tuple[str, tuple[str, ...]], ...]] = (
    (
        "Images",
        (
            "jpg", "jpeg", "png", "gif", "bmp", "tiff",
            "svg", "webp", "ico", "psd", "ai", "eps",
        ),
    ),
    (
        "Videos",
        (
            "mp4", "mkv", "avi", "mov", "wmv", "flv",
            "webm", "m4v", "mpeg", "mpg", "3gp", "rmvb",
        ),
    ),
    (
        "Audio",
        (
            "mp3", "wav", "flac", "aac", "ogg",
            "m4a", "wma", "aiff", "mid", "midi",
        ),
    ),
    (
        "Documents",
        (
            "pdf", "doc", "docx", "txt", "rtf", "odt", "xls",
            "xlsx", "ppt", "pptx", "csv", "md", "markdown", "log",
        ),
    ),
    (
        "Archives",
        (
            "zip", "rar", "7z", "tar", "gz", "bz2",
            "xz", "iso", "dmg", "pkg", "deb", "rpm",
        ),
    ),
    (
        "Code",
        (
            "cpp", "c", "h", "hpp", "py", "js", "ts", "html", "htm",
            "css", "scss", "java", "go", "rs", "rb", "php", "swift",
            "kt", "scala", "sh", "bash", "json", "xml", "yaml", "yml",
            "toml", "ini", "cfg", "conf",
        ),
    ),
    (
        "Executables",
        ("exe", "app", "bin", "msi", "run", "elf", "so", "dll", "dylib"),
    ),
    (
        "Database",
        ("sql", "db", "sqlite", "mdb", "accdb", "frm", "ibd"),
    ),
    (
        "Books",
        ("epub", "mobi", "azw", "azw3", "fb2", "djvu", "chm"),
    ),
)
"""Category names paired with their lowercase, dotless extensions, in display
order.
"""

CATEGORY_NAMES: Final = (*(name for name, _ in CATEGORIES), OTHERS)
"""Every category name in display order, ending with `OTHERS`."""


def _build_lookup() -> MappingProxyType[str, str]:
    lookup: dict[str, str] = {}
    for category, extensions in CATEGORIES:
        for ext in extensions:
            # The first category to claim an extension keeps it
            lookup.setdefault(ext, category)
    return MappingProxyType(lookup)


EXT_TO_CATEGORY: Final = _build_lookup()


# SKIP RULES ###################################################################


SKIP_NAMES: Final = frozenset(
    {
        # Version control
        ".git",
        ".svn",
        ".hg",
        ".bzr",
        # IDEs and editors
        ".vscode",
        ".idea",
        ".vs",
        # Build output and caches
        "build",
        "dist",
        "node_modules",
        ".cache",
        "__pycache__",
        # OS metadata
        ".DS_Store",
        "Thumbs.db",
        ".Spotlight-V100",
        ".Trashes",
    }
)
"""Files and directories the organizer never touches."""


def is_skipped_name(name: str) -> bool:
    """Return whether `name` is hidden or listed in `SKIP_NAMES`."""

    return name.startswith(".") or name in SKIP_NAMES


# CLASSIFICATION ###############################################################


def get_extension(filename: str) -> str:
    """Return the lowercase text after the last dot of `filename`.

    Args:
        filename: A file's name, without any directory part.

    Returns:
        The extension without its dot, or an empty string if `filename` has no
            dot or ends with one.
    """

    _, dot, ext = filename.rpartition(".")
    if not dot:
        return ""
    return ext.lower()


def classify(filename: str) -> str:
    """Map `filename` to the name of its category.

    Args:
        filename: A file's name, without any directory part.

    Returns:
        The first category whose extensions include the file's extension, or
            `OTHERS` if there is none.
    """

    if not (ext := get_extension(filename)):
        return OTHERS
    return EXT_TO_CATEGORY.get(ext, OTHERS)
