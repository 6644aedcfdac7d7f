"""Permission context for actions on a single task."""

from taskhub.application.ports import PermissionChecker
from taskhub.domain.entities import Task
from taskhub.domain.exceptions import NotFound, PermissionDenied
from taskhub.domain.value_objects import PermissionAction, PermissionContext, ResourceType


def task_context(task: Task, user_id: str) -> PermissionContext:
    """Context placing the task at its full list/folder/space depth."""
    return PermissionContext(
        workspace_id=task.workspace_id,
        user_id=user_id,
        space_id=task.space_id,
        folder_id=task.folder_id,
        list_id=task.list_id,
        resource_id=task.id,
        resource_type=ResourceType.TASK,
        assignee_id=task.assignee_id,
    )


async def load_task(
    unit_of_work_factory: type, task_id: str, workspace_id: str | None = None
) -> Task:
    """Read task in its own short unit of work.

    The connection is released before the caller runs a permission check,
    which opens one of its own. A task outside workspace_id is reported as
    missing.
    """
    async with unit_of_work_factory() as uow:
        task = await uow.tasks.get_by_id(task_id)
    if task is None or (workspace_id is not None and task.workspace_id != workspace_id):
        raise NotFound("Task", task_id)
    return task


async def ensure_task_permission(
    permission_checker: PermissionChecker,
    actor_id: str,
    task: Task,
    action: PermissionAction,
) -> None:
    """Raise PermissionDenied unless actor may perform action on task."""
    if not await permission_checker.can(actor_id, action, task_context(task, actor_id)):
        raise PermissionDenied(f"User does not have {action} on this task")
