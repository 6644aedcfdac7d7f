"""Revoke scope permission use case."""

from taskhub.application.ports import PermissionChecker
from taskhub.application.use_cases.permission.scope_context import ensure_can_manage_scope
from taskhub.domain.exceptions import NotFound
from taskhub.domain.value_objects import ScopeType


class RevokeScopePermissionUseCase:
    """Remove a user's override so the workspace role applies again."""

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
    ) -> None:
        """Revoke subject's override on scope."""
        await ensure_can_manage_scope(
            self._permission_checker, actor_id, workspace_id, scope, scope_id
        )

        async with self._uow_factory() as uow:
            members = uow.members_of(scope)
            member = await members.get_for_scope(workspace_id, scope_id, subject)
            if not member:
                raise NotFound("Permission", f"{scope}/{scope_id}/{subject}")
            await members.delete(member.id)
