"""Create task dependency use case."""

from datetime import UTC, datetime
from uuid import uuid4

from taskhub.application.ports import PermissionChecker
from taskhub.application.use_cases.dependency.graph import check_circular_dependency
from taskhub.application.use_cases.task_access import ensure_task_permission, load_task
from taskhub.domain.entities import TaskDependency
from taskhub.domain.exceptions import CircularDependency, ValidationError
from taskhub.domain.value_objects import DependencyType, PermissionAction


class CreateDependencyUseCase:
    """Make task_id depend on depends_on_id."""

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
        depends_on_id: str,
        type: DependencyType = DependencyType.FINISH_TO_START,
        workspace_id: str | None = None,
    ) -> TaskDependency:
        """Create the dependency. Actor must be able to edit the dependent task."""
        if task_id == depends_on_id:
            raise ValidationError("A task cannot depend on itself")

        task = await load_task(self._uow_factory, task_id, workspace_id)
        depends_on = await load_task(self._uow_factory, depends_on_id)
        await ensure_task_permission(
            self._permission_checker, actor_id, task, PermissionAction.EDIT_TASK
        )

        if task.workspace_id != depends_on.workspace_id:
            raise ValidationError("Tasks must belong to the same workspace")
        if task.space_id != depends_on.space_id:
            raise ValidationError("Tasks must belong to the same space")

        async with self._uow_factory() as uow:
            if await uow.dependencies.find(task_id, depends_on_id):
                raise ValidationError("This dependency already exists")
            if await check_circular_dependency(uow.dependencies, depends_on_id, task_id):
                raise CircularDependency(
                    "Cannot create dependency: this would create a circular dependency"
                )

            dependency = TaskDependency(
                id=uuid4(),
                task_id=task_id,
                depends_on_id=depends_on_id,
                workspace_id=task.workspace_id,
                type=type,
                created_at=datetime.now(UTC),
                created_by=actor_id,
            )
            return await uow.dependencies.create(dependency)
