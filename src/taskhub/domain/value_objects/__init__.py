"""Domain value objects."""

from taskhub.domain.value_objects.dependency_type import DependencyType
from taskhub.domain.value_objects.permission_action import PermissionAction
from taskhub.domain.value_objects.permission_context import PermissionContext
from taskhub.domain.value_objects.permission_level import (
    FolderPermissionLevel,
    ListPermissionLevel,
    SpacePermissionLevel,
    TablePermissionLevel,
)
from taskhub.domain.value_objects.resource_type import ResourceType
from taskhub.domain.value_objects.scope_type import ScopeType
from taskhub.domain.value_objects.task_status import TaskStatus
from taskhub.domain.value_objects.workspace_role import WorkspaceRole

__all__ = [
    "DependencyType",
    "FolderPermissionLevel",
    "ListPermissionLevel",
    "PermissionAction",
    "PermissionContext",
    "ResourceType",
    "ScopeType",
    "SpacePermissionLevel",
    "TablePermissionLevel",
    "TaskStatus",
    "WorkspaceRole",
]
