"""Task dependency link types (Gantt semantics)."""

from enum import StrEnum


class DependencyType(StrEnum):
    """How a task depends on its predecessor."""

    FINISH_TO_START = "FS"
    START_TO_START = "SS"
    FINISH_TO_FINISH = "FF"
    START_TO_FINISH = "SF"
