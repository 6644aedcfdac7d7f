"""Resolution strategies for the workspace permission checker.

Strategies run in a fixed order. Each one either decides (True/False) or
returns None to let the next one look. The first decisive answer wins, so
overrides from different scopes are never combined.
"""

from collections.abc import Callable
from dataclasses import dataclass

from taskhub.application.ports import UnitOfWork
from taskhub.domain.entities import Workspace
from taskhub.domain.permission_matrix import (
    ASSIGNEE_ACTIONS,
    SPACE_VIEW_ONLY_ACTIONS,
    folder_permission_has_action,
    is_space_action,
    is_task_action,
    list_permission_has_action,
    role_has_permission,
    space_permission_has_action,
)
from taskhub.domain.value_objects import (
    PermissionAction,
    PermissionContext,
    ResourceType,
    ScopeType,
    WorkspaceRole,
)


@dataclass
class Resolution:
    """State shared by the strategies while one check runs."""

    user_id: str
    action: PermissionAction
    context: PermissionContext
    uow: UnitOfWork
    workspace: Workspace | None = None
    role: WorkspaceRole | None = None


class OwnerBypass:
    """The recorded workspace owner can do anything."""

    name = "owner"

    async def decide(self, r: Resolution) -> bool | None:
        r.workspace = await r.uow.workspaces.get_by_id(r.context.workspace_id)
        if r.workspace is not None and r.workspace.owner_id == r.user_id:
            return True
        return None


class WorkspaceMembership:
    """No membership denies; admins bypass every override."""

    name = "membership"

    async def decide(self, r: Resolution) -> bool | None:
        r.role = r.workspace.role_of(r.user_id) if r.workspace is not None else None
        if r.role is None:
            return False
        if r.role is WorkspaceRole.ADMIN:
            return True
        return None


class ScopeOverride:
    """Override found on one scope replaces the workspace role decision."""

    def __init__(
        self,
        scope: ScopeType,
        has_action: Callable[[str, PermissionAction], bool],
    ) -> None:
        self.scope = scope
        self.name = f"{scope}_override"
        self._has_action = has_action

    def scope_id(self, context: PermissionContext) -> str | None:
        return getattr(context, f"{self.scope}_id")

    async def decide(self, r: Resolution) -> bool | None:
        scope_id = self.scope_id(r.context)
        if not scope_id:
            return None
        level = await r.uow.members_of(self.scope).get_permission_level(
            r.context.workspace_id, r.user_id, scope_id
        )
        if level is None:
            return None
        return self._has_action(level, r.action)


class SpaceOverride(ScopeOverride):
    """Space override, plus the roster rule for plain members.

    A member without a space override who is not on the space roster may
    only view and comment inside that space.
    """

    def __init__(self) -> None:
        super().__init__(ScopeType.SPACE, space_permission_has_action)

    async def decide(self, r: Resolution) -> bool | None:
        decision = await super().decide(r)
        if decision is not None:
            return decision
        space_id = r.context.space_id
        if (
            space_id
            and r.role is WorkspaceRole.MEMBER
            and is_space_action(r.action)
            and not await r.uow.spaces.has_member(space_id, r.user_id)
        ):
            return r.action in SPACE_VIEW_ONLY_ACTIONS
        return None


class WorkspaceRolePermission:
    """Fallback to the workspace role matrix."""

    name = "workspace_role"

    async def decide(self, r: Resolution) -> bool | None:
        if role_has_permission(r.role, r.action):
            return True
        if (
            is_task_action(r.action)
            and r.action in ASSIGNEE_ACTIONS
            and r.context.resource_type == ResourceType.TASK
        ):
            return None
        return False


class TaskAssignee:
    """Assignees may edit and move their own tasks."""

    name = "task_assignee"

    async def decide(self, r: Resolution) -> bool | None:
        if not r.context.resource_id:
            return False
        assignee_id = await r.uow.tasks.get_assignee(r.context.resource_id)
        return assignee_id is not None and assignee_id == r.user_id


DEFAULT_STRATEGIES = (
    OwnerBypass(),
    WorkspaceMembership(),
    ScopeOverride(ScopeType.LIST, list_permission_has_action),
    ScopeOverride(ScopeType.FOLDER, folder_permission_has_action),
    SpaceOverride(),
    WorkspaceRolePermission(),
    TaskAssignee(),
)
