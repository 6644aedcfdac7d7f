"""Task scheduling API resources - dependencies, transitions, timeline, Gantt chart."""

from datetime import datetime
from uuid import UUID

import falcon
import falcon.asgi

from taskhub.application.dto.dependency_dto import TransitionCheck
from taskhub.application.dto.schedule_dto import GanttTask, RescheduleResult
from taskhub.application.use_cases.dependency.check_status_transition import (
    CheckStatusTransitionUseCase,
)
from taskhub.application.use_cases.dependency.create_dependency import CreateDependencyUseCase
from taskhub.application.use_cases.dependency.delete_dependency import DeleteDependencyUseCase
from taskhub.application.use_cases.schedule.get_gantt_data import GetGanttDataUseCase
from taskhub.application.use_cases.schedule.reschedule_task import RescheduleTaskUseCase
from taskhub.application.use_cases.schedule.validate_timeline import ValidateTimelineUseCase
from taskhub.domain.entities import TaskDependency
from taskhub.domain.exceptions import TaskHubError
from taskhub.domain.value_objects import DependencyType, PermissionAction, TaskStatus
from taskhub.interfaces.api.permission_hooks import PermissionContextBuilder, require_permission
from taskhub.interfaces.api.resources.errors import error_response, unauthorized


def _dependency_to_dict(dependency: TaskDependency) -> dict:
    return {
        "id": str(dependency.id),
        "task_id": dependency.task_id,
        "depends_on_id": dependency.depends_on_id,
        "type": dependency.type.value,
        "created_by": dependency.created_by,
        "created_at": dependency.created_at.isoformat(),
    }


def _transition_to_dict(check: TransitionCheck) -> dict:
    return {
        "allowed": check.allowed,
        "reason": check.reason,
        "blocking_tasks": [
            {
                "dependency_id": str(b.dependency.id),
                "task_id": b.task_id,
                "title": b.title,
                "reason": b.reason,
            }
            for b in check.blocking_tasks
        ],
    }


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def _reschedule_to_dict(result: RescheduleResult) -> dict:
    return {
        "task_id": result.task_id,
        "date_delta_seconds": result.delta.total_seconds(),
        "updated": result.updated,
        "tasks": [
            {
                "task_id": t.task_id,
                "title": t.title,
                "old_start_date": _isoformat(t.old_start_date),
                "old_due_date": _isoformat(t.old_due_date),
                "new_start_date": _isoformat(t.new_start_date),
                "new_due_date": _isoformat(t.new_due_date),
            }
            for t in result.tasks
        ],
    }


def _gantt_task_to_dict(task: GanttTask) -> dict:
    return {
        "task_id": task.task_id,
        "title": task.title,
        "status": task.status.value,
        "start_date": _isoformat(task.start_date),
        "due_date": _isoformat(task.due_date),
        "duration_days": task.duration_days,
        "progress": task.progress,
        "is_milestone": task.is_milestone,
        "assignee_id": task.assignee_id,
        "dependencies": [
            {"depends_on_id": link.depends_on_id, "type": link.type.value}
            for link in task.dependencies
        ],
    }


class TaskDependenciesResource:
    """GET/POST /v1/workspaces/{workspace_id}/tasks/{task_id}/dependencies."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker,
        context_builder: PermissionContextBuilder,
        create_dependency: CreateDependencyUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self.permission_checker = permission_checker
        self.context_builder = context_builder
        self._create = create_dependency

    @falcon.before(require_permission(PermissionAction.VIEW_TASK))
    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        workspace_id: str,
        task_id: str,
    ) -> None:
        """List what the task depends on."""
        async with self._uow_factory() as uow:
            dependencies = await uow.dependencies.list_by_task(task_id)
        resp.media = {"items": [_dependency_to_dict(d) for d in dependencies]}
        resp.status = falcon.HTTP_200

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        workspace_id: str,
        task_id: str,
    ) -> None:
        """Add a dependency: body {"depends_on_id": ..., "type": "FS"}."""
        user = getattr(req.context, "user", None)
        if not user:
            unauthorized(resp)
            return

        try:
            body = await req.get_media()
            depends_on_id = body["depends_on_id"]
            dependency_type = DependencyType(body.get("type", "FS"))
        except (KeyError, TypeError):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Missing required field: depends_on_id"}
            return
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "type must be one of FS, SS, FF, SF"}
            return

        try:
            dependency = await self._create.execute(
                user.user_id,
                task_id,
                depends_on_id,
                dependency_type,
                workspace_id=workspace_id,
            )
        except TaskHubError as e:
            error_response(resp, e)
            return
        resp.media = _dependency_to_dict(dependency)
        resp.status = falcon.HTTP_201


class TaskDependencyResource:
    """DELETE /v1/workspaces/{workspace_id}/tasks/{task_id}/dependencies/{dependency_id}."""

    def __init__(self, delete_dependency: DeleteDependencyUseCase) -> None:
        self._delete = delete_dependency

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        workspace_id: str,
        task_id: str,
        dependency_id: str,
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            unauthorized(resp)
            return

        try:
            dep_id = UUID(dependency_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid dependency ID"}
            return

        try:
            await self._delete.execute(user.user_id, workspace_id, task_id, dep_id)
        except TaskHubError as e:
            error_response(resp, e)
            return
        resp.status = falcon.HTTP_204


class TaskTransitionResource:
    """GET /v1/workspaces/{workspace_id}/tasks/{task_id}/transition?status=done."""

    def __init__(
        self,
        permission_checker,
        context_builder: PermissionContextBuilder,
        check_transition: CheckStatusTransitionUseCase,
    ) -> None:
        self.permission_checker = permission_checker
        self.context_builder = context_builder
        self._check = check_transition

    @falcon.before(require_permission(PermissionAction.VIEW_TASK))
    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        workspace_id: str,
        task_id: str,
    ) -> None:
        """Report whether the dependencies allow moving the task to status."""
        try:
            status = TaskStatus(req.get_param("status", required=True))
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Unknown status"}
            return
        check = await self._check.execute(task_id, status)
        resp.media = _transition_to_dict(check)
        resp.status = falcon.HTTP_200


class TaskTimelineResource:
    """POST /v1/workspaces/{workspace_id}/tasks/{task_id}/timeline - move and cascade."""

    def __init__(self, reschedule_task: RescheduleTaskUseCase) -> None:
        self._reschedule = reschedule_task

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        workspace_id: str,
        task_id: str,
    ) -> None:
        """Body: {"start_date": ISO-8601, "due_date": ISO-8601}, either may be omitted."""
        user = getattr(req.context, "user", None)
        if not user:
            unauthorized(resp)
            return

        try:
            body = await req.get_media()
            start_date = body.get("start_date")
            due_date = body.get("due_date")
            start_date = datetime.fromisoformat(start_date) if start_date else None
            due_date = datetime.fromisoformat(due_date) if due_date else None
        except (AttributeError, TypeError, ValueError):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "start_date and due_date must be ISO-8601 dates"}
            return

        try:
            result = await self._reschedule.execute(
                user.user_id, task_id, start_date, due_date, workspace_id=workspace_id
            )
        except TaskHubError as e:
            error_response(resp, e)
            return
        resp.media = _reschedule_to_dict(result)
        resp.status = falcon.HTTP_200


class TaskTimelineValidationResource:
    """GET /v1/workspaces/{workspace_id}/tasks/{task_id}/timeline/validate."""

    def __init__(
        self,
        permission_checker,
        context_builder: PermissionContextBuilder,
        validate_timeline: ValidateTimelineUseCase,
    ) -> None:
        self.permission_checker = permission_checker
        self.context_builder = context_builder
        self._validate = validate_timeline

    @falcon.before(require_permission(PermissionAction.VIEW_TASK))
    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        workspace_id: str,
        task_id: str,
    ) -> None:
        """Report the task's violated date constraints."""
        try:
            result = await self._validate.execute(task_id, workspace_id)
        except TaskHubError as e:
            error_response(resp, e)
            return
        resp.media = {"task_id": result.task_id, "valid": result.valid, "errors": result.errors}
        resp.status = falcon.HTTP_200


class SpaceGanttResource:
    """GET /v1/workspaces/{workspace_id}/spaces/{space_id}/gantt."""

    def __init__(
        self,
        permission_checker,
        context_builder: PermissionContextBuilder,
        get_gantt_data: GetGanttDataUseCase,
    ) -> None:
        self.permission_checker = permission_checker
        self.context_builder = context_builder
        self._get_gantt_data = get_gantt_data

    @falcon.before(require_permission(PermissionAction.VIEW_SPACE))
    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        workspace_id: str,
        space_id: str,
    ) -> None:
        tasks = await self._get_gantt_data.execute(workspace_id, space_id)
        resp.media = {"items": [_gantt_task_to_dict(t) for t in tasks]}
        resp.status = falcon.HTTP_200
