"""Permission checker port - workspace RBAC with scope overrides."""

from typing import Protocol

from taskhub.domain.value_objects import PermissionAction, PermissionContext, WorkspaceRole


class PermissionChecker(Protocol):
    """Port for authorization decisions. Implementations never raise; they deny."""

    async def can(
        self, user_id: str, action: PermissionAction, context: PermissionContext
    ) -> bool: ...

    async def can_access_table(self, user_id: str, table_id: str, workspace_id: str) -> bool: ...

    async def get_user_role(self, user_id: str, workspace_id: str) -> WorkspaceRole | None: ...

    async def is_owner(self, user_id: str, workspace_id: str) -> bool: ...

    async def is_admin_or_owner(self, user_id: str, workspace_id: str) -> bool: ...
