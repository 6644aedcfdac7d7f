"""Route-level permission checks for Falcon resources."""

import falcon
import falcon.asgi

from taskhub.domain.value_objects import PermissionAction, PermissionContext, ResourceType

# Deepest scope first; the first id present names the resource being accessed.
_RESOURCE_PARAMS = (
    ("task_id", ResourceType.TASK),
    ("list_id", ResourceType.LIST),
    ("folder_id", ResourceType.FOLDER),
    ("space_id", ResourceType.SPACE),
    ("table_id", ResourceType.TABLE),
)


class PermissionContextBuilder:
    """Builds a PermissionContext from route params and query string.

    For task routes the task's own space, folder and list are used so that
    overrides on any of its parents apply.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def build(
        self, req: falcon.asgi.Request, params: dict, user_id: str
    ) -> PermissionContext | None:
        workspace_id = params.get("workspace_id")
        if not workspace_id:
            return None

        ids = {
            name: params.get(name) or req.get_param(name)
            for name, _ in _RESOURCE_PARAMS
        }
        assignee_id = None
        if ids["task_id"]:
            async with self._uow_factory() as uow:
                task = await uow.tasks.get_by_id(ids["task_id"])
            if task is None or task.workspace_id != workspace_id:
                raise falcon.HTTPNotFound(title="Task not found")
            ids.update(space_id=task.space_id, folder_id=task.folder_id, list_id=task.list_id)
            assignee_id = task.assignee_id

        resource_id, resource_type = workspace_id, ResourceType.WORKSPACE
        for name, kind in _RESOURCE_PARAMS:
            if ids[name]:
                resource_id, resource_type = ids[name], kind
                break

        return PermissionContext(
            workspace_id=workspace_id,
            user_id=user_id,
            space_id=ids["space_id"],
            folder_id=ids["folder_id"],
            list_id=ids["list_id"],
            table_id=ids["table_id"],
            resource_id=resource_id,
            resource_type=resource_type,
            assignee_id=assignee_id,
        )


def require_permission(action: PermissionAction):
    """Falcon before-hook: 401 without user, 403 when the checker denies action.

    The resource must expose permission_checker and context_builder. On
    success the context is stored in req.context.permission_context.
    """

    async def hook(
        req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, params: dict
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            raise falcon.HTTPUnauthorized(title="Authentication required")

        context = await resource.context_builder.build(req, params, user.user_id)
        if context is None:
            raise falcon.HTTPBadRequest(title="Workspace context not found")

        if not await resource.permission_checker.can(user.user_id, action, context):
            raise falcon.HTTPForbidden(
                title="Permission denied",
                description=f"You do not have permission to perform this action: {action}",
            )
        req.context.permission_context = context

    return hook
