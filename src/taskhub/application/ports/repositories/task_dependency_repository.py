"""Task dependency repository port."""

from typing import Protocol
from uuid import UUID

from taskhub.domain.entities import TaskDependency


class TaskDependencyRepository(Protocol):
    """Port for dependency edges between tasks."""

    async def get_by_id(self, dependency_id: UUID) -> TaskDependency | None: ...

    async def find(self, task_id: str, depends_on_id: str) -> TaskDependency | None: ...

    async def list_by_task(self, task_id: str) -> list[TaskDependency]: ...

    async def list_by_depends_on(self, depends_on_id: str) -> list[TaskDependency]: ...

    async def list_by_tasks(self, task_ids: list[str]) -> list[TaskDependency]: ...

    async def create(self, dependency: TaskDependency) -> TaskDependency: ...

    async def delete(self, dependency_id: UUID) -> None: ...
