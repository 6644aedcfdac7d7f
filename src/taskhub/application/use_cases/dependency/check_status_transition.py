"""Dependency-gated status transition check."""

from taskhub.application.dto.dependency_dto import BlockingTask, TransitionCheck
from taskhub.domain.entities import Task
from taskhub.domain.value_objects import DependencyType, TaskStatus

# Link types that block starting (inprogress/review) or finishing (done) the
# dependent task, with the predecessor condition that must hold.
_START_RULES = {
    DependencyType.FINISH_TO_START: "finished",
    DependencyType.START_TO_START: "started",
}
_FINISH_RULES = {
    DependencyType.FINISH_TO_START: "finished",
    DependencyType.FINISH_TO_FINISH: "finished",
    DependencyType.START_TO_FINISH: "started",
}


def _satisfied(predecessor: Task, condition: str) -> bool:
    if condition == "finished":
        return predecessor.status.is_terminal
    return predecessor.status.is_started


class CheckStatusTransitionUseCase:
    """Decide whether a task may move to a new status given its predecessors."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, task_id: str, new_status: TaskStatus) -> TransitionCheck:
        """Check new_status against every dependency of task_id."""
        if new_status in (TaskStatus.IN_PROGRESS, TaskStatus.REVIEW):
            rules = _START_RULES
        elif new_status is TaskStatus.DONE:
            rules = _FINISH_RULES
        else:
            return TransitionCheck(allowed=True)

        blocking: list[BlockingTask] = []
        async with self._uow_factory() as uow:
            for dependency in await uow.dependencies.list_by_task(task_id):
                condition = rules.get(dependency.type)
                if condition is None:
                    continue
                predecessor = await uow.tasks.get_by_id(dependency.depends_on_id)
                if predecessor is None or _satisfied(predecessor, condition):
                    continue
                verb = "completed" if condition == "finished" else "started"
                blocking.append(
                    BlockingTask(
                        dependency=dependency,
                        task_id=predecessor.id,
                        title=predecessor.title,
                        reason=(
                            f'Task "{predecessor.title}" must be {verb} first '
                            f"({dependency.type} dependency)"
                        ),
                    )
                )

        if not blocking:
            return TransitionCheck(allowed=True)
        noun = "dependency" if len(blocking) == 1 else "dependencies"
        return TransitionCheck(
            allowed=False,
            reason=f"Task is blocked by {len(blocking)} unfinished {noun}",
            blocking_tasks=blocking,
        )
