"""Permission checker implementation - workspace roles with scope overrides."""

import logging

from taskhub.domain.value_objects import PermissionAction, PermissionContext, WorkspaceRole
from taskhub.infrastructure.permission.strategies import DEFAULT_STRATEGIES, Resolution

logger = logging.getLogger(__name__)


class WorkspacePermissionChecker:
    """Resolves permissions against workspace membership and scope overrides.

    Resolution order: owner, membership/admin, list override, folder
    override, space override, workspace role, task assignee. Every lookup
    error is logged and turned into a denial.
    """

    def __init__(self, unit_of_work_factory: type, strategies=DEFAULT_STRATEGIES) -> None:
        self._uow_factory = unit_of_work_factory
        self._strategies = tuple(strategies)

    async def can(
        self, user_id: str, action: PermissionAction, context: PermissionContext
    ) -> bool:
        """Check if user may perform action in context."""
        try:
            async with self._uow_factory() as uow:
                resolution = Resolution(
                    user_id=user_id, action=action, context=context, uow=uow
                )
                for strategy in self._strategies:
                    decision = await strategy.decide(resolution)
                    if decision is not None:
                        logger.debug(
                            "%s %s in workspace %s: %s (%s)",
                            user_id,
                            action,
                            context.workspace_id,
                            "allow" if decision else "deny",
                            strategy.name,
                        )
                        return decision
        except Exception:
            logger.exception(
                "Permission check failed for %s %s in workspace %s",
                user_id,
                action,
                context.workspace_id,
            )
            return False
        return False

    async def can_access_table(self, user_id: str, table_id: str, workspace_id: str) -> bool:
        """Admins and owners see every table, others need a table override of any level."""
        try:
            async with self._uow_factory() as uow:
                workspace = await uow.workspaces.get_by_id(workspace_id)
                role = workspace.role_of(user_id) if workspace else None
                if role in (WorkspaceRole.OWNER, WorkspaceRole.ADMIN):
                    return True
                level = await uow.table_members.get_permission_level(
                    workspace_id, user_id, table_id
                )
                return level is not None
        except Exception:
            logger.exception("Table access check failed for %s on table %s", user_id, table_id)
            return False

    async def get_user_role(self, user_id: str, workspace_id: str) -> WorkspaceRole | None:
        """Get user's role in workspace, None without membership."""
        try:
            async with self._uow_factory() as uow:
                workspace = await uow.workspaces.get_by_id(workspace_id)
        except Exception:
            logger.exception("Role lookup failed for %s in workspace %s", user_id, workspace_id)
            return None
        if workspace is None:
            return None
        return workspace.role_of(user_id)

    async def is_owner(self, user_id: str, workspace_id: str) -> bool:
        return await self.get_user_role(user_id, workspace_id) is WorkspaceRole.OWNER

    async def is_admin_or_owner(self, user_id: str, workspace_id: str) -> bool:
        role = await self.get_user_role(user_id, workspace_id)
        return role in (WorkspaceRole.OWNER, WorkspaceRole.ADMIN)
