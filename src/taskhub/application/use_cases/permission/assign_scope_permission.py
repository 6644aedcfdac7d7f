"""Assign scope permission use case."""

from datetime import UTC, datetime
from uuid import uuid4

from taskhub.application.ports import PermissionChecker
from taskhub.application.use_cases.permission.scope_context import (
    ensure_can_manage_scope,
    parse_level,
)
from taskhub.domain.entities import ScopeMember
from taskhub.domain.exceptions import NotFound, ValidationError
from taskhub.domain.value_objects import ScopeType, WorkspaceRole


class AssignScopePermissionUseCase:
    """Grant (or replace) a user's override on a space, folder, list or table."""

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
        workspace_id: str,
        scope: ScopeType,
        scope_id: str,
        subject: str,
        level: str,
    ) -> ScopeMember:
        """Set subject's level on scope. Actor must be allowed to manage its permissions."""
        await ensure_can_manage_scope(
            self._permission_checker, actor_id, workspace_id, scope, scope_id
        )
        permission_level = parse_level(scope, level)

        async with self._uow_factory() as uow:
            workspace = await uow.workspaces.get_by_id(workspace_id)
            if not workspace:
                raise NotFound("Workspace", workspace_id)
            role = workspace.role_of(subject)
            if role is None:
                raise ValidationError("Subject is not a member of the workspace")
            if role is WorkspaceRole.OWNER:
                raise ValidationError("The workspace owner cannot be restricted by an override")

            members = uow.members_of(scope)
            existing = await members.get_for_scope(workspace_id, scope_id, subject)
            if existing:
                existing.permission_level = permission_level
                existing.added_by = actor_id
                return await members.upsert(existing)

            member = ScopeMember(
                id=uuid4(),
                scope=scope,
                scope_id=scope_id,
                user_id=subject,
                workspace_id=workspace_id,
                permission_level=permission_level,
                created_at=datetime.now(UTC),
                added_by=actor_id,
            )
            return await members.upsert(member)
