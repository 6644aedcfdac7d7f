"""Permission context - the resource a check is evaluated against."""

from dataclasses import dataclass

from taskhub.domain.value_objects.resource_type import ResourceType


@dataclass(frozen=True)
class PermissionContext:
    """Per-request description of where an action happens.

    Built by the caller (API hook or use case) and never persisted. Only
    workspace_id and user_id are required; the deeper the optional scope
    ids, the more overrides the resolver can consider.
    """

    workspace_id: str
    user_id: str
    space_id: str | None = None
    folder_id: str | None = None
    list_id: str | None = None
    table_id: str | None = None
    resource_id: str | None = None
    resource_type: ResourceType | None = None
    assignee_id: str | None = None
