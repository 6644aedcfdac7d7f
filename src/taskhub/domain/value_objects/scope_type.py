"""Scopes that carry per-user permission overrides."""

from enum import StrEnum

from taskhub.domain.value_objects.permission_level import (
    FolderPermissionLevel,
    ListPermissionLevel,
    SpacePermissionLevel,
    TablePermissionLevel,
)


class ScopeType(StrEnum):
    """Resource scope an override is attached to."""

    SPACE = "space"
    FOLDER = "folder"
    LIST = "list"
    TABLE = "table"

    @property
    def level_type(self) -> type[StrEnum]:
        """Permission level enum valid for this scope."""
        return _LEVEL_TYPES[self]


_LEVEL_TYPES: dict[ScopeType, type[StrEnum]] = {
    ScopeType.SPACE: SpacePermissionLevel,
    ScopeType.FOLDER: FolderPermissionLevel,
    ScopeType.LIST: ListPermissionLevel,
    ScopeType.TABLE: TablePermissionLevel,
}
