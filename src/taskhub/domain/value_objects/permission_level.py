"""Per-scope permission levels used by member overrides."""

from enum import StrEnum


class SpacePermissionLevel(StrEnum):
    """Override level on a space."""

    FULL = "FULL"
    EDIT = "EDIT"
    COMMENT = "COMMENT"
    VIEW = "VIEW"


class FolderPermissionLevel(StrEnum):
    """Override level on a folder."""

    FULL = "FULL"
    EDIT = "EDIT"
    COMMENT = "COMMENT"
    VIEW = "VIEW"


class ListPermissionLevel(StrEnum):
    """Override level on a list."""

    FULL = "FULL"
    EDIT = "EDIT"
    COMMENT = "COMMENT"
    VIEW = "VIEW"


class TablePermissionLevel(StrEnum):
    """Override level on a custom table. Tables have no COMMENT level."""

    FULL = "FULL"
    EDIT = "EDIT"
    VIEW = "VIEW"
