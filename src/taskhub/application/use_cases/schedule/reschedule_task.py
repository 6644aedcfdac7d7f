"""Reschedule task use case - Gantt auto-scheduling cascade."""

import logging
from datetime import datetime, timedelta

from taskhub.application.dto.schedule_dto import RescheduledTask, RescheduleResult
from taskhub.application.ports import PermissionChecker, UnitOfWork
from taskhub.application.use_cases.task_access import ensure_task_permission, load_task
from taskhub.domain.entities import Task
from taskhub.domain.exceptions import NotFound, ValidationError
from taskhub.domain.value_objects import PermissionAction

logger = logging.getLogger(__name__)


def calculate_date_delta(old: datetime | None, new: datetime | None) -> timedelta:
    """Shift between two dates, zero when either is missing."""
    if old is None or new is None:
        return timedelta(0)
    return new - old


def _shift(task: Task, delta: timedelta) -> bool:
    """Move both dates of task by delta. Returns False if it has no dates."""
    moved = False
    if task.start_date is not None:
        task.start_date = task.start_date + delta
        moved = True
    if task.due_date is not None:
        task.due_date = task.due_date + delta
        moved = True
    if moved and task.is_milestone and task.due_date is not None:
        task.start_date = task.due_date
    return moved


class RescheduleTaskUseCase:
    """Move a task on the timeline and push its dependents by the same delta."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(
        self,
        actor_id: str,
        task_id: str,
        start_date: datetime | None = None,
        due_date: datetime | None = None,
        workspace_id: str | None = None,
    ) -> RescheduleResult:
        """Apply new dates to task_id and cascade the shift to dependent tasks.

        The shift is measured on the start date when both old and new start
        dates are known, otherwise on the due date.
        """
        if start_date is None and due_date is None:
            raise ValidationError("start_date or due_date is required")

        task = await load_task(self._uow_factory, task_id, workspace_id)
        await ensure_task_permission(
            self._permission_checker, actor_id, task, PermissionAction.EDIT_TASK
        )

        async with self._uow_factory() as uow:
            task = await uow.tasks.get_by_id(task_id)
            if not task:
                raise NotFound("Task", task_id)

            if start_date is not None and task.start_date is not None:
                delta = calculate_date_delta(task.start_date, start_date)
            else:
                delta = calculate_date_delta(task.due_date, due_date)

            if start_date is not None:
                task.start_date = start_date
            if due_date is not None:
                task.due_date = due_date
            if task.is_milestone and task.due_date is not None:
                task.start_date = task.due_date
            if (
                task.start_date is not None
                and task.due_date is not None
                and task.start_date > task.due_date
            ):
                raise ValidationError("start_date must not be after due_date")
            await uow.tasks.update_dates(task)

            result = RescheduleResult(task_id=task_id, delta=delta)
            if delta:
                await self._cascade(uow, task_id, delta, {task_id}, result)
                logger.info(
                    "Rescheduled %s by %s, cascaded to %d dependent tasks",
                    task_id,
                    delta,
                    result.updated,
                )
            return result

    async def _cascade(
        self,
        uow: UnitOfWork,
        task_id: str,
        delta: timedelta,
        visited: set[str],
        result: RescheduleResult,
    ) -> None:
        for dependency in await uow.dependencies.list_by_depends_on(task_id):
            if dependency.task_id in visited:
                logger.debug("Skipping already rescheduled task %s", dependency.task_id)
                continue
            dependent = await uow.tasks.get_by_id(dependency.task_id)
            if dependent is None:
                continue
            visited.add(dependent.id)

            old_start, old_due = dependent.start_date, dependent.due_date
            if not _shift(dependent, delta):
                continue
            await uow.tasks.update_dates(dependent)
            result.updated += 1
            result.tasks.append(
                RescheduledTask(
                    task_id=dependent.id,
                    title=dependent.title,
                    old_start_date=old_start,
                    old_due_date=old_due,
                    new_start_date=dependent.start_date,
                    new_due_date=dependent.due_date,
                )
            )
            await self._cascade(uow, dependent.id, delta, visited, result)
