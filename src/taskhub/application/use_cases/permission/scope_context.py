"""Helpers shared by the scope permission use cases."""

from taskhub.application.ports import PermissionChecker
from taskhub.domain.exceptions import PermissionDenied, ValidationError
from taskhub.domain.value_objects import (
    PermissionAction,
    PermissionContext,
    ResourceType,
    ScopeType,
)


async def ensure_can_manage_scope(
    permission_checker: PermissionChecker,
    actor_id: str,
    workspace_id: str,
    scope: ScopeType,
    scope_id: str,
) -> None:
    """Raise PermissionDenied unless actor may manage overrides on the scope.

    Tables have no parent overrides, so only admins and owners manage them.
    """
    if scope is ScopeType.TABLE:
        allowed = await permission_checker.is_admin_or_owner(actor_id, workspace_id)
    else:
        context = PermissionContext(
            workspace_id=workspace_id,
            user_id=actor_id,
            resource_id=scope_id,
            resource_type=ResourceType(scope.value),
            **{f"{scope}_id": scope_id},
        )
        allowed = await permission_checker.can(
            actor_id, PermissionAction.MANAGE_SPACE_PERMISSIONS, context
        )
    if not allowed:
        raise PermissionDenied(f"User cannot manage permissions on this {scope}")


def parse_level(scope: ScopeType, level: str) -> str:
    """Validate level against the scope's enum and return its canonical value."""
    try:
        return scope.level_type(level.upper()).value
    except (AttributeError, ValueError):
        raise ValidationError(f"Invalid {scope} permission level: {level!r}") from None
