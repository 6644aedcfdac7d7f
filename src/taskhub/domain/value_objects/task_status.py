"""Task workflow statuses."""

from enum import StrEnum


class TaskStatus(StrEnum):
    """Status of a task on its board."""

    TODO = "todo"
    IN_PROGRESS = "inprogress"
    REVIEW = "review"
    DONE = "done"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (TaskStatus.DONE, TaskStatus.CANCELLED)

    @property
    def is_started(self) -> bool:
        return self is not TaskStatus.TODO
