from enum import StrEnum, unique

__all__ = ("LogActions",)


@unique
class LogActions(StrEnum):
    CONFIG = "CONFIG"
    DRY_RUN = "DRY-RUN"

    STARTED = "STARTED"
    FINISHED = "FINISHED"

    CREATED = "CREATED"
    MOVED = "MOVED"
    RENAMED = "RENAMED"
    SKIPPED = "SKIPPED"
    FAILED = "FAILED"
