"""Validate timeline use case - date constraints of one task."""

from taskhub.application.dto.schedule_dto import TimelineValidation
from taskhub.domain.entities import Task
from taskhub.domain.exceptions import NotFound
from taskhub.domain.value_objects import DependencyType

# For each link type: which date of the task must not precede which date of
# the predecessor, and how a violation reads.
_LINK_CONSTRAINTS = {
    DependencyType.FINISH_TO_START: ("start_date", "due_date", "start before", "finishes"),
    DependencyType.START_TO_START: ("start_date", "start_date", "start before", "starts"),
    DependencyType.FINISH_TO_FINISH: ("due_date", "due_date", "finish before", "finishes"),
    DependencyType.START_TO_FINISH: ("due_date", "start_date", "finish before", "starts"),
}


def _own_errors(task: Task) -> list[str]:
    errors = []
    if task.start_date is not None and task.due_date is not None:
        if task.is_milestone and task.start_date != task.due_date:
            errors.append("Milestone must have start_date equal to due_date (duration = 0)")
        if task.start_date > task.due_date:
            errors.append("Start date cannot be after due date")
    return errors


class ValidateTimelineUseCase:
    """Check a task's dates against its own shape and its predecessors."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, task_id: str, workspace_id: str | None = None) -> TimelineValidation:
        """Collect every violated constraint; missing dates never violate one."""
        async with self._uow_factory() as uow:
            task = await uow.tasks.get_by_id(task_id)
            if task is None or (workspace_id is not None and task.workspace_id != workspace_id):
                raise NotFound("Task", task_id)

            result = TimelineValidation(task_id=task_id, errors=_own_errors(task))
            for dependency in await uow.dependencies.list_by_task(task_id):
                predecessor = await uow.tasks.get_by_id(dependency.depends_on_id)
                if predecessor is None:
                    continue
                own, other, verb, event = _LINK_CONSTRAINTS[dependency.type]
                mine, theirs = getattr(task, own), getattr(predecessor, other)
                if mine is not None and theirs is not None and mine < theirs:
                    result.errors.append(
                        f'Task cannot {verb} predecessor "{predecessor.title}" {event} '
                        f"({dependency.type} dependency)"
                    )
        return result
