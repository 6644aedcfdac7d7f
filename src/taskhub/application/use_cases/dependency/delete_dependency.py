"""Delete task dependency use case."""

from uuid import UUID

from taskhub.application.ports import PermissionChecker
from taskhub.application.use_cases.task_access import ensure_task_permission, load_task
from taskhub.domain.exceptions import NotFound
from taskhub.domain.value_objects import PermissionAction


class DeleteDependencyUseCase:
    """Remove a dependency edge."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(
        self, actor_id: str, workspace_id: str, task_id: str, dependency_id: UUID
    ) -> None:
        """Delete dependency_id, one of the edges of task_id.

        Actor must be able to edit the dependent task. An edge that belongs
        to another task, or a task outside workspace_id, is reported as
        missing.
        """
        async with self._uow_factory() as uow:
            dependency = await uow.dependencies.get_by_id(dependency_id)
        if dependency is None or dependency.task_id != task_id:
            raise NotFound("Dependency", str(dependency_id))
        task = await load_task(self._uow_factory, task_id, workspace_id)

        await ensure_task_permission(
            self._permission_checker, actor_id, task, PermissionAction.EDIT_TASK
        )
        async with self._uow_factory() as uow:
            await uow.dependencies.delete(dependency_id)
