"""Task repository port."""

from typing import Protocol

from taskhub.domain.entities import Task


class TaskRepository(Protocol):
    """Port for task reads and schedule updates."""

    async def get_by_id(self, task_id: str) -> Task | None: ...

    async def get_assignee(self, task_id: str) -> str | None: ...

    async def update_dates(self, task: Task) -> None: ...

    async def list_by_space(self, workspace_id: str, space_id: str) -> list[Task]: ...
