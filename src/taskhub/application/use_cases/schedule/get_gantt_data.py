"""Gantt chart data for one space."""

import math

from taskhub.application.dto.schedule_dto import GanttLink, GanttTask
from taskhub.domain.entities import Task
from taskhub.domain.value_objects import TaskStatus

_PROGRESS = {TaskStatus.DONE: 100, TaskStatus.IN_PROGRESS: 50}


def calculate_duration(task: Task) -> int:
    """Whole days from start to due, rounded up; 0 without both dates."""
    if task.start_date is None or task.due_date is None:
        return 0
    return math.ceil((task.due_date - task.start_date).total_seconds() / 86400)


def calculate_progress(status: TaskStatus) -> int:
    return _PROGRESS.get(status, 0)


class GetGanttDataUseCase:
    """List a space's tasks with durations, progress and dependency links."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, workspace_id: str, space_id: str) -> list[GanttTask]:
        async with self._uow_factory() as uow:
            tasks = await uow.tasks.list_by_space(workspace_id, space_id)
            dependencies = (
                await uow.dependencies.list_by_tasks([t.id for t in tasks]) if tasks else []
            )

        links: dict[str, list[GanttLink]] = {}
        for dependency in dependencies:
            links.setdefault(dependency.task_id, []).append(
                GanttLink(depends_on_id=dependency.depends_on_id, type=dependency.type)
            )
        return [
            GanttTask(
                task_id=task.id,
                title=task.title,
                status=task.status,
                start_date=task.start_date,
                due_date=task.due_date,
                duration_days=calculate_duration(task),
                progress=calculate_progress(task.status),
                is_milestone=task.is_milestone,
                assignee_id=task.assignee_id,
                dependencies=links.get(task.id, []),
            )
            for task in tasks
        ]
