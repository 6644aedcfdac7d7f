"""Permission API resources - checks and scope overrides."""

import falcon.asgi

from taskhub.application.use_cases.permission.assign_scope_permission import (
    AssignScopePermissionUseCase,
)
from taskhub.application.use_cases.permission.revoke_scope_permission import (
    RevokeScopePermissionUseCase,
)
from taskhub.domain.entities import ScopeMember
from taskhub.domain.exceptions import TaskHubError
from taskhub.domain.value_objects import (
    PermissionAction,
    PermissionContext,
    ResourceType,
    ScopeType,
)
from taskhub.interfaces.api.permission_hooks import PermissionContextBuilder
from taskhub.interfaces.api.resources.errors import error_response, unauthorized

_VIEW_ACTIONS = {
    ScopeType.SPACE: PermissionAction.VIEW_SPACE,
    ScopeType.FOLDER: PermissionAction.VIEW_FOLDER,
    ScopeType.LIST: PermissionAction.VIEW_LIST,
}


def _member_to_dict(member: ScopeMember) -> dict:
    return {
        "id": str(member.id),
        "scope": member.scope.value,
        "scope_id": member.scope_id,
        "user_id": member.user_id,
        "permission_level": member.permission_level,
        "added_by": member.added_by,
        "created_at": member.created_at.isoformat(),
    }


class PermissionCheckResource:
    """GET /v1/workspaces/{workspace_id}/permissions/check?action=... - evaluate one action."""

    def __init__(self, permission_checker, context_builder: PermissionContextBuilder) -> None:
        self._permission_checker = permission_checker
        self._context_builder = context_builder

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        workspace_id: str,
    ) -> None:
        """Check whether the caller may perform action; scope ids come from the query string."""
        user = getattr(req.context, "user", None)
        if not user:
            unauthorized(resp)
            return

        raw_action = req.get_param("action") or ""
        try:
            action = PermissionAction(raw_action.upper())
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Unknown action: {raw_action!r}"}
            return

        context = await self._context_builder.build(
            req, {"workspace_id": workspace_id}, user.user_id
        )
        allowed = await self._permission_checker.can(user.user_id, action, context)
        role = await self._permission_checker.get_user_role(user.user_id, workspace_id)
        resp.media = {
            "action": action.value,
            "allowed": allowed,
            "role": role.value if role else None,
        }
        resp.status = falcon.HTTP_200


class TableAccessResource:
    """GET /v1/workspaces/{workspace_id}/tables/{table_id}/access."""

    def __init__(self, permission_checker) -> None:
        self._permission_checker = permission_checker

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        workspace_id: str,
        table_id: str,
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            unauthorized(resp)
            return
        allowed = await self._permission_checker.can_access_table(
            user.user_id, table_id, workspace_id
        )
        resp.media = {"table_id": table_id, "allowed": allowed}
        resp.status = falcon.HTTP_200


class ScopeMembersResource:
    """GET /v1/workspaces/{workspace_id}/{scope}s/{scope_id}/members - list overrides."""

    def __init__(self, scope: ScopeType, unit_of_work_factory: type, permission_checker) -> None:
        self._scope = scope
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def _can_view(self, user_id: str, workspace_id: str, scope_id: str) -> bool:
        if self._scope is ScopeType.TABLE:
            return await self._permission_checker.can_access_table(user_id, scope_id, workspace_id)
        context = PermissionContext(
            workspace_id=workspace_id,
            user_id=user_id,
            resource_id=scope_id,
            resource_type=ResourceType(self._scope.value),
            **{f"{self._scope}_id": scope_id},
        )
        return await self._permission_checker.can(user_id, _VIEW_ACTIONS[self._scope], context)

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        workspace_id: str,
        **params: str,
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            unauthorized(resp)
            return

        scope_id = params[f"{self._scope}_id"]
        if not await self._can_view(user.user_id, workspace_id, scope_id):
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        async with self._uow_factory() as uow:
            members = await uow.members_of(self._scope).list_by_scope(workspace_id, scope_id)
        resp.media = {"items": [_member_to_dict(m) for m in members]}
        resp.status = falcon.HTTP_200


class ScopeMemberResource:
    """PUT/DELETE /v1/workspaces/{workspace_id}/{scope}s/{scope_id}/members/{subject}."""

    def __init__(
        self,
        scope: ScopeType,
        assign_permission: AssignScopePermissionUseCase,
        revoke_permission: RevokeScopePermissionUseCase,
    ) -> None:
        self._scope = scope
        self._assign = assign_permission
        self._revoke = revoke_permission

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        workspace_id: str,
        subject: str,
        **params: str,
    ) -> None:
        """Grant or replace subject's override."""
        user = getattr(req.context, "user", None)
        if not user:
            unauthorized(resp)
            return

        try:
            body = await req.get_media()
            level = body["permission_level"]
        except (KeyError, TypeError):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Missing required field: permission_level"}
            return

        try:
            member = await self._assign.execute(
                user.user_id,
                workspace_id,
                self._scope,
                params[f"{self._scope}_id"],
                subject,
                level,
            )
        except TaskHubError as e:
            error_response(resp, e)
            return
        resp.media = _member_to_dict(member)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        workspace_id: str,
        subject: str,
        **params: str,
    ) -> None:
        """Revoke subject's override."""
        user = getattr(req.context, "user", None)
        if not user:
            unauthorized(resp)
            return

        try:
            await self._revoke.execute(
                user.user_id,
                workspace_id,
                self._scope,
                params[f"{self._scope}_id"],
                subject,
            )
        except TaskHubError as e:
            error_response(resp, e)
            return
        resp.status = falcon.HTTP_204
