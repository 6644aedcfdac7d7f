"""Task entity - only the fields the permission and scheduling core reads."""

from dataclasses import dataclass
from datetime import datetime

from taskhub.domain.value_objects import TaskStatus


@dataclass
class Task:
    """Task placed in the workspace hierarchy."""

    id: str
    workspace_id: str
    space_id: str
    title: str
    status: TaskStatus = TaskStatus.TODO
    folder_id: str | None = None
    list_id: str | None = None
    assignee_id: str | None = None
    start_date: datetime | None = None
    due_date: datetime | None = None
    is_milestone: bool = False
